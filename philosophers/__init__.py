"""Dining philosophers simulation: argument parsing, the threaded table and a command."""

__version__ = "1.0.0"
__all__ = ["arguments", "table", "cli"]