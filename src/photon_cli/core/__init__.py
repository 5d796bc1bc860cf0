"""Core application wiring: CLI app and model resolution."""
