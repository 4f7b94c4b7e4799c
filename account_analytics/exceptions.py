"""Custom exception hierarchy for account-analytics."""

from typing import Any


class AccountAnalyticsError(Exception):
    """Base exception for all account-analytics errors."""


class EntityNotFoundError(AccountAnalyticsError):
    """Raised when a lookup by a unique key finds no matching record."""

    def __init__(self, message: str, key: Any = None) -> None:
        super().__init__(message)
        self.key = key


class DuplicateKeyError(AccountAnalyticsError):
    """Raised when two inputs map to the same key while building an index."""

    def __init__(self, key: Any, existing: Any = None, incoming: Any = None) -> None:
        message = f"Duplicate key {key}"
        if existing is not None or incoming is not None:
            message += f" (attempted merging values {existing!r} and {incoming!r})"
        super().__init__(message)
        self.key = key


class InvalidEmailError(AccountAnalyticsError, ValueError):
    """Raised when an email does not split into exactly one local part and domain."""


class ConfigurationError(AccountAnalyticsError):
    """Raised when configuration is invalid or missing."""


class SinkError(AccountAnalyticsError):
    """Raised when a sink operation fails."""
