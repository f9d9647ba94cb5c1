"""Custom exceptions for the pres presenter library."""


class PresError(Exception):
    """Base exception for all pres errors."""
    pass


class PresenterNotFoundError(PresError, LookupError):
    """Raised when no presenter class is registered under a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Presenter '{name}' not found in registry")


class PresenterImportError(PresError, ImportError):
    """Raised when a configured presenter import path cannot be loaded."""
    pass


class ConfigurationError(PresError, ValueError):
    """Raised when a pres configuration file is malformed."""
    pass
