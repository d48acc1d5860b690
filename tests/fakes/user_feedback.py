"""Fake UserFeedback implementation for testing."""

from dataface.core.user_feedback import UserFeedback


class FakeUserFeedback(UserFeedback):
    """Captures feedback messages for test assertions.

    Messages are recorded as "LEVEL: message" strings in call order.
    """

    def __init__(self) -> None:
        self._messages: list[str] = []

    @property
    def messages(self) -> list[str]:
        """Read-only access to captured messages."""
        return self._messages

    def info(self, message: str) -> None:
        self._messages.append(f"INFO: {message}")

    def success(self, message: str) -> None:
        self._messages.append(f"SUCCESS: {message}")

    def warning(self, message: str) -> None:
        self._messages.append(f"WARNING: {message}")

    def error(self, message: str) -> None:
        self._messages.append(f"ERROR: {message}")

    def contains(self, text: str) -> bool:
        """Whether any captured message contains text."""
        return any(text in message for message in self._messages)
