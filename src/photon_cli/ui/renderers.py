# src/photon_cli/ui/renderers.py
"""Renderers for research results and model listings.

All functions return rich ``Text`` and take the theme as an argument, so
nothing here touches a console directly.
"""

from __future__ import annotations

from collections.abc import Mapping

from rich.text import Text

from photon_cli.model_management import Model
from photon_cli.research.formatter import BULLET, FormattedResult
from photon_cli.ui.theme import DEFAULT_THEME, ResultTheme

FALLBACK_MESSAGE = "Lost in the tunnel of knowledge. Please try again later."
LOADING_MESSAGE = "THINKING.."

_RULE = "✨ ========================== ✨"


def render_result(result: FormattedResult, theme: ResultTheme = DEFAULT_THEME) -> Text:
    """Render the summary and numbered key points."""
    text = Text()
    text.append("\n")
    text.append("✨ === PHOTON RESEARCH RESULTS === ✨", style=theme.title)
    text.append("\n\n")
    text.append("✨ SUMMARY:", style=theme.heading)
    text.append("\n")
    text.append(result.summary, style=theme.body)
    text.append("\n")

    if result.has_key_points:
        text.append("\n")
        text.append("💡 KEY POINTS:", style=theme.key_points_heading)
        text.append("\n")
        for i, point in enumerate(result.key_points, start=1):
            text.append(BULLET, style=theme.bullet)
            text.append(f" {i}. ")
            text.append(point, style=theme.body)
            text.append("\n")

    text.append("\n")
    text.append(_RULE, style=theme.title)
    text.append("\n")
    return text


def render_fallback(theme: ResultTheme = DEFAULT_THEME) -> Text:
    """Shown when the answer did not arrive before the deadline."""
    return Text(f"\n{FALLBACK_MESSAGE}\n", style=theme.error)


def format_model_info(model: Model, theme: ResultTheme = DEFAULT_THEME) -> Text:
    """Detailed description of one model."""
    rows: list[tuple[str, str, str]] = [
        ("📋 Model:", model.name, theme.title),
        ("🏢 Provider:", model.provider, theme.label),
        ("📝 Description:", model.description, theme.key_points_heading),
        ("🎯 Best For:", model.best_for, theme.accent),
        ("🔧 Features:", ", ".join(model.features), theme.bullet),
        ("📏 Context:", f"{model.context_len} tokens", theme.label),
    ]
    if model.is_thinking:
        rows.append(
            ("🧠 Special:", "Supports reasoning with <think> tokens", theme.key_points_heading)
        )
    if model.is_multimodal:
        rows.append(("🖼️  Multimodal:", "Supports text and images", theme.heading))

    text = Text()
    for label, value, style in rows:
        text.append(label, style=style)
        text.append(" ")
        text.append(value, style=theme.body)
        text.append("\n")
    return text


def format_model_list(
    models: Mapping[str, Model],
    current_model: str | None = None,
    theme: ResultTheme = DEFAULT_THEME,
) -> Text:
    """All models in display order, marking the current one."""
    text = Text()
    text.append("✨ Available Models:", style=theme.title)
    text.append("\n\n")

    for model_id, model in models.items():
        text.append(f"{model_id:<12}", style=theme.heading)
        text.append(" ")
        text.append(model.name, style=theme.body)
        if model_id == current_model:
            text.append(" (current)", style=theme.current)
        text.append("\n")
        text.append(" " * 13)
        text.append(model.description, style=theme.bullet)
        text.append("\n\n")
    return text
