"""
Photon user interface components.

- theme: colours injected into the renderers
- renderers: result view and model listings as rich Text
- model_selector: numbered interactive model picker
"""

from photon_cli.ui.model_selector import run_model_selector
from photon_cli.ui.renderers import (
    FALLBACK_MESSAGE,
    LOADING_MESSAGE,
    format_model_info,
    format_model_list,
    render_fallback,
    render_result,
)
from photon_cli.ui.theme import DEFAULT_THEME, PLAIN_THEME, ResultTheme

__all__ = [
    "ResultTheme",
    "DEFAULT_THEME",
    "PLAIN_THEME",
    "render_result",
    "render_fallback",
    "format_model_info",
    "format_model_list",
    "run_model_selector",
    "FALLBACK_MESSAGE",
    "LOADING_MESSAGE",
]
