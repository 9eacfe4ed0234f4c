import httpx
from pydantic import SecretStr

from slack_workflow_notifier.core.application.ports import NotifierPort
from slack_workflow_notifier.core.domain.notification import DeliveryResult, SlackMessage
from slack_workflow_notifier.infrastructure.observability import get_logger

logger = get_logger(__name__)


class SlackWebhookNotifier(NotifierPort):
    """Posts messages to a Slack incoming webhook, best effort.

    Delivery failures are logged and returned, never raised: a chat
    notification must not fail the pipeline it reports on.
    """

    def __init__(
        self, webhook_url: SecretStr, transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        self._webhook_url = webhook_url
        self._transport = transport

    async def send(self, message: SlackMessage) -> DeliveryResult:
        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    self._webhook_url.get_secret_value(), json=message.to_payload()
                )
                response.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            error = _describe(exc)
            logger.warning("Failed to send Slack message, but not blocking workflow", error=error)
            return DeliveryResult.failed(error)

        logger.info("Slack message sent", channel=message.channel)
        return DeliveryResult.ok()


def _describe(exc: httpx.HTTPError | httpx.InvalidURL) -> str:
    """Describe the failure without echoing the webhook URL."""
    if isinstance(exc, httpx.HTTPStatusError):
        return f"HTTP {exc.response.status_code}: {exc.response.text[:200]}"
    return type(exc).__name__
