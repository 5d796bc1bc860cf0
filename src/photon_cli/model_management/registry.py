# src/photon_cli/model_management/registry.py
"""
Model registry.

A fixed, read-only catalog of the OpenRouter models Photon offers, keyed
by a short id. Iteration order of the catalog is the display order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from pydantic import BaseModel, Field

from photon_cli.config.defaults import DEFAULT_MODEL_ID
from photon_cli.exceptions import ModelNotFoundError

logger = logging.getLogger(__name__)


class Model(BaseModel):
    """An LLM offered through OpenRouter, with display metadata."""

    id: str = Field(..., min_length=1, description="Short stable identifier")
    api_name: str = Field(..., min_length=1, description="Provider-facing model string")
    name: str = Field(..., description="Display name")
    description: str = Field(default="", description="One-line description")
    provider: str = Field(default="", description="Model vendor")
    features: tuple[str, ...] = Field(default=(), description="Capability tags")
    context_len: int = Field(..., gt=0, description="Context window in tokens")
    best_for: str = Field(default="", description="Suggested use")
    is_thinking: bool = Field(
        default=False, description="Emits a <think> reasoning trace before answering"
    )
    is_multimodal: bool = Field(default=False, description="Accepts images")

    model_config = {"frozen": True}


class ModelRegistry:
    """
    Read-only mapping of model id to Model.

    The catalog is a single ordered association: there is no separate
    display-order list to keep in sync.
    """

    def __init__(self, models: Iterable[Model], default_id: str = DEFAULT_MODEL_ID):
        catalog: dict[str, Model] = {}
        api_names: set[str] = set()
        for model in models:
            if model.id in catalog:
                raise ValueError(f"Duplicate model id: {model.id}")
            if model.api_name in api_names:
                raise ValueError(f"Duplicate API name: {model.api_name}")
            catalog[model.id] = model
            api_names.add(model.api_name)

        if default_id not in catalog:
            raise ValueError(f"Default model '{default_id}' is not in the catalog")

        self._models: Mapping[str, Model] = MappingProxyType(catalog)
        self._default_id = default_id

    def list_models(self) -> Mapping[str, Model]:
        """Return the full catalog, in display order."""
        return self._models

    def get_model(self, model_id: str) -> Model:
        """
        Look up a model by id.

        Raises:
            ModelNotFoundError: if the id is not in the catalog
        """
        try:
            return self._models[model_id]
        except KeyError:
            raise ModelNotFoundError(model_id) from None

    def get_model_by_api_name(self, api_name: str) -> Model:
        """
        Look up a model by its provider-facing API name.

        Raises:
            ModelNotFoundError: if no model has that exact API name
        """
        for model in self._models.values():
            if model.api_name == api_name:
                return model
        raise ModelNotFoundError(
            api_name, f"model with API name '{api_name}' not found"
        )

    def is_valid_model(self, model_id: str) -> bool:
        """Check whether a model id is in the catalog."""
        return model_id in self._models

    def default_model_id(self) -> str:
        """Return the id used when nothing else is configured."""
        return self._default_id


# ── Built-in catalog ─────────────────────────────────────────────────────────

BUILTIN_MODELS: tuple[Model, ...] = (
    Model(
        id="kimi",
        name="MoonshotAI Kimi K2",
        api_name="moonshotai/kimi-k2:free",
        description="Advanced Chinese AI model with strong reasoning capabilities",
        provider="MoonshotAI",
        features=("Strong Reasoning", "Chinese & English", "Code Generation"),
        context_len=200000,
        best_for="Bilingual research, code analysis, logical reasoning",
    ),
    Model(
        id="deepseek-r1",
        name="DeepSeek R1",
        api_name="deepseek/deepseek-r1:free",
        description="Advanced reasoning model with step-by-step thinking capabilities",
        provider="DeepSeek",
        features=("Reasoning", "Problem Solving", "Analysis"),
        context_len=163840,
        best_for="Complex analysis, problem-solving, research tasks",
        is_thinking=True,
    ),
    Model(
        id="deepseek-v3",
        name="DeepSeek V3 Chat",
        api_name="deepseek/deepseek-chat:free",
        description="General purpose model with excellent coding and instruction following",
        provider="DeepSeek",
        features=("General Purpose", "Coding", "Instruction Following"),
        context_len=163840,
        best_for="General queries, coding help, conversational tasks",
    ),
    Model(
        id="llama-4",
        name="Meta Llama 4 Maverick",
        api_name="meta-llama/llama-4-maverick:free",
        description="Multimodal model supporting text and image analysis",
        provider="Meta",
        features=("Multimodal", "Text", "Image Analysis"),
        context_len=128000,
        best_for="Image analysis, visual content research",
        is_multimodal=True,
    ),
    Model(
        id="mistral",
        name="Mistral Small 3.1",
        api_name="mistralai/mistral-small-3.1-24b-instruct:free",
        description="Efficient and fast model with good balance of speed and capability",
        provider="Mistral AI",
        features=("Fast", "Efficient", "Balanced"),
        context_len=128000,
        best_for="Quick responses, general research",
        is_multimodal=True,
    ),
)

_registry = ModelRegistry(BUILTIN_MODELS)


def get_registry() -> ModelRegistry:
    """Return the process-wide registry."""
    return _registry


# Convenience shortcuts over the default registry


def list_models() -> Mapping[str, Model]:
    return _registry.list_models()


def get_model(model_id: str) -> Model:
    return _registry.get_model(model_id)


def get_model_by_api_name(api_name: str) -> Model:
    return _registry.get_model_by_api_name(api_name)


def is_valid_model(model_id: str) -> bool:
    return _registry.is_valid_model(model_id)


def default_model_id() -> str:
    return _registry.default_model_id()
