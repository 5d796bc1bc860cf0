# src/photon_cli/ui/model_selector.py
"""Interactive model picker.

Arrow keys move through the catalog (numbered entry where the terminal
cannot do raw input), starting on the current model. The chosen model's
details are shown before the choice is confirmed; declining goes back to
the list.
"""

from __future__ import annotations

from collections.abc import Mapping

from chuk_term.ui import confirm, select_from_list
from rich.console import Console

from photon_cli.model_management import Model
from photon_cli.ui.renderers import format_model_info
from photon_cli.ui.theme import DEFAULT_THEME, ResultTheme

CANCEL_CHOICE = "Cancel"
SELECT_MESSAGE = "🤖 Select AI Model:"


def model_label(model_id: str, model: Model, current_model: str | None = None) -> str:
    """List entry for one model, e.g. ``DeepSeek R1 (deepseek-r1) (current)``."""
    label = f"{model.name} ({model_id})"
    if model_id == current_model:
        label += " (current)"
    return label


def run_model_selector(
    models: Mapping[str, Model],
    current_model: str | None = None,
    console: Console | None = None,
    theme: ResultTheme = DEFAULT_THEME,
    show_details: bool = True,
) -> str | None:
    """
    Let the user pick a model.

    Args:
        models: Catalog in display order
        current_model: Id the cursor starts on
        console: Console for the details view
        theme: Styles for the details view
        show_details: Show the model's details and ask for confirmation

    Returns:
        The selected model id, or None if the user cancelled
    """
    if not models:
        return None
    console = console or Console()

    labels = {
        model_label(model_id, model, current_model): model_id
        for model_id, model in models.items()
    }
    choices = [*labels, CANCEL_CHOICE]
    default = next(
        (label for label, model_id in labels.items() if model_id == current_model),
        choices[0],
    )

    while True:
        choice = select_from_list(
            SELECT_MESSAGE, choices, default=default, use_arrow_keys=True
        )
        if not choice or choice == CANCEL_CHOICE:
            return None

        model_id = labels[choice]
        if not show_details:
            return model_id

        model = models[model_id]
        console.print()
        console.print(format_model_info(model, theme))
        if confirm(f"Use {model.name}?", default=True):
            return model_id
        default = choice
