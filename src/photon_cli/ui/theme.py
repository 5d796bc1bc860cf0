# src/photon_cli/ui/theme.py
"""Result view colours, passed to the renderers rather than held globally."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ResultTheme:
    """Rich style strings used by the renderers."""

    title: str = "bold cyan"
    heading: str = "bold yellow"
    key_points_heading: str = "bold green"
    body: str = "white"
    bullet: str = "cyan"
    label: str = "bold blue"
    accent: str = "magenta"
    current: str = "bold green"
    error: str = "bold red"
    spinner: str = "color(69)"


DEFAULT_THEME = ResultTheme()

# No colours at all, for pipes and tests
PLAIN_THEME = ResultTheme(
    title="",
    heading="",
    key_points_heading="",
    body="",
    bullet="",
    label="",
    accent="",
    current="",
    error="",
    spinner="",
)
