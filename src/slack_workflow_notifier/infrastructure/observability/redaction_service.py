import re
from typing import Any

REDACTED = "***"

# Regex patterns for common secrets
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9_\-\.~+/=]+)",
    r"(Authorization:\s*)([a-zA-Z0-9_\-\.~+/=]+)",
    r"(https://hooks\.slack\.com/services/)([A-Za-z0-9/]+)",
]


class RedactionService:
    """Masks registered secret values and well-known secret shapes in text."""

    def __init__(self) -> None:
        self._secrets: set[str] = set()

    def register(self, secret: str) -> None:
        if secret:
            self._secrets.add(secret)

    def redact_text(self, text: str) -> str:
        if not text:
            return text

        redacted_text = text
        # Longest first so a secret containing another is masked whole
        for secret in sorted(self._secrets, key=len, reverse=True):
            redacted_text = redacted_text.replace(secret, REDACTED)
        for pattern in SECRET_PATTERNS:
            redacted_text = re.sub(pattern, rf"\1{REDACTED}", redacted_text, flags=re.IGNORECASE)
        return redacted_text

    def redact_value(self, value: Any) -> Any:
        if isinstance(value, str):
            return self.redact_text(value)
        if isinstance(value, dict):
            return {k: self.redact_value(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self.redact_value(item) for item in value]
        return value

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Structlog processor interface."""
        return {key: self.redact_value(value) for key, value in event_dict.items()}


redaction_service = RedactionService()
