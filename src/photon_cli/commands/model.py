# src/photon_cli/commands/model.py
"""``ptn model`` subcommands: list, current, set, info, reset."""

from __future__ import annotations

import logging
from typing import Optional

import typer
from chuk_term.ui import output
from rich.console import Console

from photon_cli.config.settings import PhotonConfig
from photon_cli.core.model_resolver import ModelResolver
from photon_cli.exceptions import ConfigError, ModelNotFoundError
from photon_cli.model_management import get_registry
from photon_cli.ui.model_selector import run_model_selector
from photon_cli.ui.renderers import format_model_info, format_model_list

logger = logging.getLogger(__name__)

console = Console()

model_app = typer.Typer(
    name="model",
    help="Manage and configure AI models for research queries",
    no_args_is_help=True,
)


@model_app.command("list")
def list_models() -> None:
    """Display all available AI models with their descriptions."""
    config = PhotonConfig.load()
    console.print(format_model_list(get_registry().list_models(), config.get_current_model()))


@model_app.command("current")
def current_model() -> None:
    """Display the currently selected AI model."""
    config = PhotonConfig.load()

    try:
        resolved = ModelResolver().resolve(config.get_model_ref())
    except ModelNotFoundError as e:
        output.error(f"Error: {e.message}")
        raise typer.Exit(1)

    if resolved.model is None:
        output.info(f"🤖 Current Model: {resolved.display_name} (online)")
        return

    output.info("🤖 Current Model:")
    console.print()
    console.print(format_model_info(resolved.model))


@model_app.command("set")
def set_model(
    model_id: Optional[str] = typer.Argument(
        None, help="Model id (omit for interactive selection)"
    ),
) -> None:
    """Set the AI model to use for research queries."""
    config = PhotonConfig.load()
    registry = get_registry()

    if model_id is None:
        model_id = run_model_selector(
            registry.list_models(), config.get_current_model(), console=console
        )

    if not model_id:
        output.warning("No model selected")
        return

    try:
        model = registry.get_model(model_id)
        config.set_current_model(model_id)
    except ModelNotFoundError as e:
        output.error(f"Error: {e.message}")
        raise typer.Exit(1)
    except ConfigError as e:
        output.error(f"Error setting model: {e.message}")
        raise typer.Exit(1)

    output.success(f"✅ Model set to: {model.name}")
    output.info("Next queries will use this model")


@model_app.command("info")
def model_info(model_id: str = typer.Argument(..., help="Model id")) -> None:
    """Display detailed information about a specific AI model."""
    try:
        model = get_registry().get_model(model_id)
    except ModelNotFoundError as e:
        output.error(f"Error: {e.message}")
        raise typer.Exit(1)

    console.print(format_model_info(model))


@model_app.command("reset")
def reset_model() -> None:
    """Reset the current model selection to the default model."""
    config = PhotonConfig.load()
    registry = get_registry()
    default_id = registry.default_model_id()

    try:
        config.set_current_model(default_id)
    except ConfigError as e:
        output.error(f"Error resetting model: {e.message}")
        raise typer.Exit(1)

    output.success(f"✅ Model reset to default: {registry.get_model(default_id).name}")
