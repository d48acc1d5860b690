"""Error boundary handling for CLI commands.

This module provides a decorator to catch well-known exceptions at CLI entry
points and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from dataface.cli.output import user_output
from dataface.core.context import DatafaceContext
from dataface.core.errors import (
    ComponentNotFoundError,
    ComponentNotInstalledError,
    ConfigInvalidError,
    ConfigMissingError,
    DatafaceError,
)


def error_tip(error: Exception) -> str | None:
    """Follow-up suggestion shown under an error message, if any."""
    if isinstance(error, (ConfigMissingError, ConfigInvalidError)):
        return "Tip: Run `dataface init` to set up your project."
    if isinstance(error, ComponentNotFoundError):
        return "Tip: Run `dataface list` to see the available components."
    if isinstance(error, ComponentNotInstalledError):
        return f"Tip: Run `dataface add {error.name}` first."
    return None


def _is_debug(args: tuple[Any, ...]) -> bool:
    return bool(args) and isinstance(args[0], DatafaceContext) and args[0].debug


T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that catches well-known exceptions and displays clean error messages.

    Apply below @click.pass_obj so the wrapped function receives the context
    first. With --debug the exception propagates with its full traceback.

    Catches:
        - DatafaceError: Configuration, registry and fetch failures
        - FileNotFoundError: Missing files/directories
        - PermissionError: Permission denied errors
        - ValueError: Invalid input

    All other exceptions bubble up normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: DatafaceContext):
            ...
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (DatafaceError, FileNotFoundError, PermissionError, ValueError) as e:
            if _is_debug(args):
                raise
            user_output(click.style("Error: ", fg="red") + str(e))
            tip = error_tip(e)
            if tip is not None:
                user_output()
                user_output(click.style(tip, fg="yellow"))
            raise SystemExit(1) from None

    return wrapper  # type: ignore[return-value]
