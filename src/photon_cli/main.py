# src/photon_cli/main.py
"""Entry-point for the Photon CLI"""

from __future__ import annotations

import signal
import sys

from photon_cli.core.app import create_app


def setup_signal_handlers() -> None:
    """Setup signal handlers for clean shutdown."""

    def handler(sig, _frame):
        sys.exit(130 if sig == signal.SIGINT else 0)

    signal.signal(signal.SIGINT, handler)
    signal.signal(signal.SIGTERM, handler)


def main() -> None:
    """Main entry point."""
    setup_signal_handlers()
    app = create_app()
    app()


if __name__ == "__main__":
    main()
