# src/photon_cli/model_management/__init__.py
"""
Model management package for photon-cli.

- Model: immutable description of an OpenRouter model
- ModelRegistry: the read-only catalog and its lookups
- ModelRef: registered id or literal API name, decided once at the boundary
"""

from photon_cli.model_management.model_ref import (
    LiteralModel,
    ModelRef,
    RegisteredModel,
    is_online_identifier,
    online_model,
    parse_model_ref,
)
from photon_cli.model_management.registry import (
    BUILTIN_MODELS,
    Model,
    ModelRegistry,
    default_model_id,
    get_model,
    get_model_by_api_name,
    get_registry,
    is_valid_model,
    list_models,
)

__all__ = [
    "Model",
    "ModelRegistry",
    "BUILTIN_MODELS",
    "get_registry",
    "list_models",
    "get_model",
    "get_model_by_api_name",
    "is_valid_model",
    "default_model_id",
    "ModelRef",
    "RegisteredModel",
    "LiteralModel",
    "parse_model_ref",
    "online_model",
    "is_online_identifier",
]
