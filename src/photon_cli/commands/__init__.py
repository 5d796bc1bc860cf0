"""CLI commands."""

from photon_cli.commands.model import model_app
from photon_cli.commands.research import ask_command

__all__ = ["model_app", "ask_command"]
