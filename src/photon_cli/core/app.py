# src/photon_cli/core/app.py
"""Core application setup and configuration."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from photon_cli.commands.model import model_app
from photon_cli.commands.research import ask_command
from photon_cli.config.env_vars import EnvVar, get_env
from photon_cli.config.logging import setup_logging
from photon_cli.config.settings import load_env_files
from photon_cli.constants import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)

ASK_COMMAND = "ask"

# Root options that consume the following token as their value
_VALUE_OPTIONS = {"--log-level", "--log-file"}

# ask options that consume the following token as their value
_ASK_VALUE_OPTIONS = {"--online", "--model", "-m", "--deadline"}


def _is_option(token: str, flags: set[str], value_options: set[str]) -> int:
    """How many tokens an option occupies (0 if ``token`` is not one of them)."""
    if token in value_options:
        return 2
    if token in flags:
        return 1
    if token.startswith("--") and "=" in token and token.split("=", 1)[0] in value_options:
        return 1
    return 0


def _protect_question(args: list[str], start: int) -> list[str]:
    """Insert ``--`` before a question that starts with a dash, e.g. ``-5 degrees?``."""
    index = start
    while index < len(args):
        token = args[index]
        if token in ("--", "--help"):
            return args
        width = _is_option(token, set(), _ASK_VALUE_OPTIONS)
        if width:
            index += width
            continue
        if token.startswith("-") and token != "-":
            return [*args[:index], "--", *args[index:]]
        return args
    return args


def route_args(args: list[str], commands: set[str]) -> list[str]:
    """
    Make ``ptn QUESTION`` and ``ptn --online NAME QUESTION`` mean ``ptn ask ...``.

    Root options are skipped; at the first other token, if it is not a
    known command or a help/version flag, ``ask`` is inserted before it.
    A question that begins with ``-`` is kept from being read as an option.
    """
    index = 0
    while index < len(args):
        token = args[index]
        if token in ("--help", "--version"):
            return args
        width = _is_option(token, {"-v", "--verbose", "-q", "--quiet"}, _VALUE_OPTIONS)
        if width:
            index += width
            continue
        if token == ASK_COMMAND:
            return _protect_question(args, index + 1)
        if token in commands:
            return args
        routed = [*args[:index], ASK_COMMAND, *args[index:]]
        return _protect_question(routed, index + 1)
    return args


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


class PhotonApp:
    """Main Photon CLI application."""

    def __init__(self) -> None:
        self.typer_app = typer.Typer(
            add_completion=False,
            no_args_is_help=True,
            help="Photon is a lightning-fast terminal research tool that "
            "delivers packets of pure knowledge at light speed.",
        )
        self._setup_main_callback()
        self._register_commands()

    def _setup_main_callback(self) -> None:
        """Setup the main callback that configures logging and the environment."""

        @self.typer_app.callback()
        def main_callback(
            quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
            log_level: Optional[str] = typer.Option(
                None, "--log-level", help="Set log level"
            ),
            log_file: Optional[str] = typer.Option(
                None, "--log-file", help="Also write debug logs to this file"
            ),
            version: bool = typer.Option(
                False,
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the version and exit",
            ),
        ) -> None:
            """Packets of pure knowledge at light speed."""
            level = log_level or get_env(EnvVar.LOG_LEVEL, "WARNING") or "WARNING"
            try:
                setup_logging(
                    level=level, quiet=quiet, verbose=verbose, log_file=log_file
                )
            except ValueError as e:
                raise typer.BadParameter(str(e), param_hint="--log-level")

            loaded = load_env_files()
            logger.debug(f"Environment files loaded: {loaded or 'none'}")

    def _register_commands(self) -> None:
        self.typer_app.command(ASK_COMMAND)(ask_command)
        self.typer_app.add_typer(model_app, name="model")

    @property
    def command_names(self) -> set[str]:
        return {ASK_COMMAND, "model"}

    def __call__(self, args: list[str] | None = None):
        """Run the CLI, routing a bare question to the ask command."""
        argv = list(sys.argv[1:] if args is None else args)
        return self.typer_app(args=route_args(argv, self.command_names), prog_name="ptn")


def create_app() -> PhotonApp:
    """
    Factory function to create the application.

    Returns:
        Configured PhotonApp instance
    """
    return PhotonApp()
