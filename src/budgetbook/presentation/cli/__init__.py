"""Command-line interface."""

from budgetbook.presentation.cli.app import app, cli

__all__ = ["app", "cli"]
