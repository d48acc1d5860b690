"""Output utilities for CLI commands with clear intent."""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a user-facing message to stderr."""
    click.echo(message, nl=nl, err=True)
