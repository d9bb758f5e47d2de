"""Command-line argument parsing with int, string and flag arguments, plus a small accumulate command."""

__version__ = "1.0.0"
__all__ = ["arguments", "parser", "cli"]