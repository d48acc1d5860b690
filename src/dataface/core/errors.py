"""Error types for dataface operations.

Fatal conditions are exceptions deriving from DatafaceError so the CLI error
boundary can render them without stack traces. Recoverable conditions
(skipped files, failed dependency fetches, failed package installs) are
reported through return values and logging instead.
"""


class DatafaceError(Exception):
    """Base class for all well-known dataface errors."""


class ConfigMissingError(DatafaceError):
    """Raised when components.json does not exist in the project root."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or "No components.json found. Run `dataface init` first.")


class ConfigInvalidError(DatafaceError):
    """Raised when components.json fails validation.

    Attributes:
        field: Dotted path of the offending field (e.g. "tailwind.baseColor")
        reason: Human-readable reason the field was rejected
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f'Invalid configuration: "{field}" {reason}')


class ComponentNotFoundError(DatafaceError):
    """Raised when a component name is absent from the registry."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Component '{name}' not found in registry.")


class ComponentUnavailableError(DatafaceError):
    """Raised when every fetch strategy failed for a component.

    Attributes:
        name: Component that could not be fetched
        attempts: (strategy name, error message) for each failed strategy
    """

    def __init__(self, name: str, attempts: list[tuple[str, str]]) -> None:
        self.name = name
        self.attempts = attempts
        message = f"Component '{name}' could not be fetched from the registry."
        for strategy, error in attempts:
            message += f"\n  {strategy}: {error}"
        super().__init__(message)


class RegistryUnavailableError(DatafaceError):
    """Raised when no registry source could provide a valid registry."""

    def __init__(self) -> None:
        super().__init__(
            "Unable to load component registry. Please check your internet connection."
        )


class ComponentNotInstalledError(DatafaceError):
    """Raised when updating a component that is not present in the project."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Component '{name}' not found in your project. "
            f"Use `dataface add {name}` to add it."
        )


class BackupFailedError(DatafaceError):
    """Raised when an installed component could not be backed up before update."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        self.reason = reason
        super().__init__(f"Failed to back up {name}: {reason}")
