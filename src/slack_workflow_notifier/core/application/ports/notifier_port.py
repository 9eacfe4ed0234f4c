from abc import ABC, abstractmethod

from slack_workflow_notifier.core.domain.notification import DeliveryResult, SlackMessage


class NotifierPort(ABC):
    @abstractmethod
    async def send(self, message: SlackMessage) -> DeliveryResult:
        """Delivers the message once. Must not raise on delivery failure."""
        pass
