"""Exception hierarchy for the notifier.

Only fatal conditions are raised: a failed Slack delivery is reported as a
DeliveryResult instead.
"""

from typing import Any


class NotifierError(Exception):
    """Base exception for all errors raised by the notifier."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ConfigurationError(NotifierError):
    """Raised when a required input is missing or malformed."""


class ProviderError(NotifierError):
    """Raised when the CI provider API cannot be read."""

    def __init__(
        self, provider: str, message: str, *, context: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, context=context)
        self.provider = provider

    def __str__(self) -> str:
        return f"{self.provider}: {self.message}"
