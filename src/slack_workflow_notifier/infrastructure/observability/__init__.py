from slack_workflow_notifier.infrastructure.observability.logger_factory_service import (
    configure_logging,
    get_logger,
)
from slack_workflow_notifier.infrastructure.observability.redaction_service import (
    RedactionService,
    redaction_service,
)

__all__ = ["RedactionService", "configure_logging", "get_logger", "redaction_service"]
