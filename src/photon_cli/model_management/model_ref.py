# src/photon_cli/model_management/model_ref.py
"""
Model references.

A model identifier from the user or the config file is either a registry
id or a literal OpenRouter API name ("online" model). The decision is made
once, here, so nothing downstream re-checks prefixes.
"""

from __future__ import annotations

from typing import Literal, Union

from pydantic import BaseModel, Field

from photon_cli.constants.providers import ONLINE_MODEL_PREFIX


class RegisteredModel(BaseModel):
    """Reference to a model in the registry."""

    kind: Literal["registered"] = "registered"
    model_id: str = Field(..., min_length=1)

    model_config = {"frozen": True}


class LiteralModel(BaseModel):
    """A provider-facing API name used as-is, bypassing the registry."""

    kind: Literal["literal"] = "literal"
    api_name: str = Field(..., min_length=1)

    model_config = {"frozen": True}


ModelRef = Union[RegisteredModel, LiteralModel]


def is_online_identifier(identifier: str) -> bool:
    """True for identifiers carrying the online prefix and a non-empty name."""
    return (
        identifier.startswith(ONLINE_MODEL_PREFIX)
        and len(identifier) > len(ONLINE_MODEL_PREFIX)
    )


def parse_model_ref(identifier: str) -> ModelRef:
    """
    Turn an identifier string into a ModelRef.

    ``__online__<api-name>`` becomes a LiteralModel; anything else is
    taken as a registry id. Registry membership is not checked here.
    """
    if is_online_identifier(identifier):
        return LiteralModel(api_name=identifier[len(ONLINE_MODEL_PREFIX):])
    return RegisteredModel(model_id=identifier)


def online_model(api_name: str) -> LiteralModel:
    """Build a LiteralModel from a bare API name (``--online`` flag)."""
    return LiteralModel(api_name=api_name)
