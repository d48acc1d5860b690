"""User-facing diagnostic output with mode awareness."""

from abc import ABC, abstractmethod

import click

from dataface.cli.output import user_output


class UserFeedback(ABC):
    """Provides user-facing progress output for core operations.

    Core modules (installer, tailwind setup) report what they did through
    ctx.feedback instead of echoing directly, so commands can silence them and
    tests can capture them.

    Usage:
        ctx.feedback.info("Created components/button/button.tsx")
        ctx.feedback.success("✓ Added button component")
        ctx.feedback.warning("Could not determine the current version")
        ctx.feedback.error("Failed to install dependencies")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show informational message."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show success message."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show warning message."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Show error message."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(message)

    def success(self, message: str) -> None:
        user_output(click.style(message, fg="green"))

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))

    def error(self, message: str) -> None:
        user_output(click.style(message, fg="red"))
