# src/photon_cli/core/model_resolver.py
"""Model resolution: from a ModelRef to what goes on the wire."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from photon_cli.model_management import (
    LiteralModel,
    Model,
    ModelRef,
    ModelRegistry,
    RegisteredModel,
    get_registry,
)

logger = logging.getLogger(__name__)


class ResolvedModel(BaseModel):
    """The provider API name plus the registry entry, when there is one."""

    api_name: str = Field(..., min_length=1)
    model: Model | None = Field(
        default=None, description="Registry entry (None for online models)"
    )

    model_config = {"frozen": True}

    @property
    def is_thinking(self) -> bool:
        return self.model is not None and self.model.is_thinking

    @property
    def display_name(self) -> str:
        return self.model.name if self.model else self.api_name


class ModelResolver:
    """Handles model reference resolution against the registry."""

    def __init__(self, registry: ModelRegistry | None = None):
        """
        Initialize resolver with optional registry.

        Args:
            registry: ModelRegistry instance (uses the built-in one if not provided)
        """
        self.registry = registry or get_registry()

    def resolve(self, ref: ModelRef | None = None) -> ResolvedModel:
        """
        Resolve a model reference.

        Args:
            ref: Registered or literal model (default model if None)

        Returns:
            ResolvedModel

        Raises:
            ModelNotFoundError: if a registered id is unknown
        """
        if ref is None:
            ref = RegisteredModel(model_id=self.registry.default_model_id())

        if isinstance(ref, LiteralModel):
            # Online models skip the registry entirely
            logger.debug(f"Using online model: {ref.api_name}")
            return ResolvedModel(api_name=ref.api_name)

        model = self.registry.get_model(ref.model_id)
        logger.debug(f"Resolved model '{ref.model_id}' -> {model.api_name}")
        return ResolvedModel(api_name=model.api_name, model=model)
