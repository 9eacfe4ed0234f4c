from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict

GITHUB_FAVICON_URL = "https://github.githubassets.com/favicon.ico"


class AttachmentColor(StrEnum):
    GOOD = "good"
    DANGER = "#e60000"
    WARNING = "warning"


class SlackAttachment(BaseModel):
    model_config = ConfigDict(frozen=True)

    author_name: str
    author_icon: str
    footer: str
    footer_icon: str = GITHUB_FAVICON_URL
    text: str | None = None
    color: AttachmentColor | None = None


class SlackMessage(BaseModel):
    """Incoming-webhook payload carrying a single attachment."""

    model_config = ConfigDict(frozen=True)

    channel: str
    username: str
    icon_emoji: str
    attachments: tuple[SlackAttachment, ...]
    mrkdwn: bool = True

    @property
    def attachment(self) -> SlackAttachment:
        return self.attachments[0]

    def with_attachment(self, **changes: Any) -> "SlackMessage":
        """Return a copy whose first attachment has the given fields replaced."""
        updated = self.attachment.model_copy(update=changes)
        return self.model_copy(update={"attachments": (updated, *self.attachments[1:])})

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
