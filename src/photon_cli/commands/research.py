# src/photon_cli/commands/research.py
"""The research command: ask a question, show the structured answer."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import typer
from chuk_term.ui import output
from rich.console import Console

from photon_cli.config.env_vars import EnvVar, get_env_positive_float
from photon_cli.config.settings import PhotonConfig
from photon_cli.constants.timeouts import QUERY_DEADLINE
from photon_cli.core.model_resolver import ModelResolver
from photon_cli.exceptions import ConfigError, MissingCredentialError, ModelNotFoundError
from photon_cli.model_management import ModelRef, online_model, parse_model_ref
from photon_cli.research.client import OpenRouterClient
from photon_cli.research.service import ResearchOutcome, ResearchService
from photon_cli.ui.renderers import LOADING_MESSAGE, render_fallback, render_result
from photon_cli.ui.theme import DEFAULT_THEME, ResultTheme

logger = logging.getLogger(__name__)

console = Console()


def choose_model_ref(
    config: PhotonConfig, online: str | None = None, model: str | None = None
) -> ModelRef:
    """``--online`` beats ``--model``, which beats the configured model."""
    if online:
        return online_model(online)
    if model:
        return parse_model_ref(model)
    return config.get_model_ref()


def run_research(
    question: str,
    ref: ModelRef,
    api_key: str | None,
    deadline: float,
    resolver: ModelResolver | None = None,
) -> ResearchOutcome:
    """Run one query to completion (or deadline) on a fresh event loop."""
    service = ResearchService(OpenRouterClient(api_key), resolver)
    return asyncio.run(service.research_with_deadline(question, ref, deadline))


def show_outcome(
    outcome: ResearchOutcome, theme: ResultTheme = DEFAULT_THEME
) -> None:
    if outcome.fallback or outcome.result is None:
        console.print(render_fallback(theme))
        return
    console.print(render_result(outcome.result, theme))


def ask_command(
    question: str = typer.Argument(..., help="Question to research"),
    online: Optional[str] = typer.Option(
        None,
        "--online",
        help="Use any OpenRouter model by API name (bypasses local list)",
    ),
    model: Optional[str] = typer.Option(
        None, "--model", "-m", help="Model id for this query only"
    ),
    deadline: Optional[float] = typer.Option(
        None, "--deadline", help="Seconds to wait before giving up", min=0.1
    ),
) -> None:
    """Research a question and show a summary with key points."""
    config = PhotonConfig.load()

    try:
        config.validate_settings()
    except MissingCredentialError as e:
        output.error(f"Configuration error: {e.message}")
        output.hint(f"Please set {e.env_var} environment variable")
        output.hint(f'Example: export {e.env_var}="your-api-key"')
        raise typer.Exit(1)
    except ConfigError as e:
        output.error(f"Configuration error: {e.message}")
        raise typer.Exit(1)

    ref = choose_model_ref(config, online=online, model=model)
    if deadline is None:
        deadline = get_env_positive_float(EnvVar.QUERY_DEADLINE, QUERY_DEADLINE)

    try:
        with console.status(
            LOADING_MESSAGE, spinner="dots", spinner_style=DEFAULT_THEME.spinner
        ):
            outcome = run_research(
                question, ref, config.get_openrouter_key(), deadline
            )
    except ModelNotFoundError as e:
        output.error(f"Error: {e.message}")
        raise typer.Exit(1)

    show_outcome(outcome)
