from slack_workflow_notifier.core.application.exceptions.notifier_exceptions import (
    ConfigurationError,
    NotifierError,
    ProviderError,
)

__all__ = ["ConfigurationError", "NotifierError", "ProviderError"]
