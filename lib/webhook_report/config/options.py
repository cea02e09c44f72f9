"""
Webhook Options
===============
Delivery options for a webhook target: the endpoint plus the
message-shaping fields reporters use when building a payload.
"""

from typing import Dict, Any, Optional

from .credentials import mask_webhook_url
from .constants import (
    DEFAULT_TIMEOUT_SECONDS,
    DEFAULT_USERNAME,
    DEFAULT_TEXT,
    DEFAULT_ATTACHMENT_COLOR,
    DEFAULT_EXCEPTION_TEXT_FORMAT,
)


class WebHookOptions:
    """
    Options for posting an exception report to a webhook.

    Usage:
        options = WebHookOptions(
            "https://hooks.slack.com/services/T000/B000/XXXX",
            channel_name="#errors",
            username="prod-api",
        )

        urgent = options.copy(attachment_color="warning")
    """

    FIELDS = (
        'webhook_url',
        'webhook_type',
        'channel_name',
        'username',
        'icon_emoji',
        'icon_url',
        'text',
        'attachment_title',
        'attachment_title_link',
        'attachment_main_text',
        'attachment_color',
        'exception_text_format',
        'timeout',
    )

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        webhook_type: Optional[str] = None,
        channel_name: Optional[str] = None,
        username: Optional[str] = DEFAULT_USERNAME,
        icon_emoji: Optional[str] = None,
        icon_url: Optional[str] = None,
        text: Optional[str] = DEFAULT_TEXT,
        attachment_title: Optional[str] = None,
        attachment_title_link: Optional[str] = None,
        attachment_main_text: Optional[str] = None,
        attachment_color: str = DEFAULT_ATTACHMENT_COLOR,
        exception_text_format: str = DEFAULT_EXCEPTION_TEXT_FORMAT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ):
        """
        Initialize webhook options.

        Args:
            webhook_url: Incoming webhook URL of the target
            webhook_type: 'slack', 'discord' or 'generic' (None to detect from URL)
            channel_name: Channel override, where the target supports one
            username: Display name for the posting bot
            icon_emoji: Emoji icon for the posting bot (e.g. ':fire:')
            icon_url: Image icon for the posting bot
            text: Message heading
            attachment_title: Title of the report (defaults to exception type)
            attachment_title_link: URL the title links to
            attachment_main_text: Text shown above the exception details
            attachment_color: Attachment colour name or hex value
            exception_text_format: Template using {type}, {message}, {traceback}
            timeout: Request timeout in seconds
        """
        self.webhook_url = webhook_url
        self.webhook_type = webhook_type
        self.channel_name = channel_name
        self.username = username
        self.icon_emoji = icon_emoji
        self.icon_url = icon_url
        self.text = text
        self.attachment_title = attachment_title
        self.attachment_title_link = attachment_title_link
        self.attachment_main_text = attachment_main_text
        self.attachment_color = attachment_color
        self.exception_text_format = exception_text_format
        self.timeout = timeout

    def to_dict(self) -> Dict[str, Any]:
        """Return all option fields as a dictionary."""
        return {name: getattr(self, name) for name in self.FIELDS}

    def copy(self, **overrides) -> "WebHookOptions":
        """
        Return a copy with some fields replaced.

        Raises:
            TypeError: If an override names an unknown field
        """
        unknown = set(overrides) - set(self.FIELDS)
        if unknown:
            raise TypeError(f"Unknown option fields: {', '.join(sorted(unknown))}")

        values = self.to_dict()
        values.update(overrides)
        return WebHookOptions(**values)

    def __eq__(self, other):
        if not isinstance(other, WebHookOptions):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return (
            f"WebHookOptions(webhook_url={mask_webhook_url(self.webhook_url)!r}, "
            f"webhook_type={self.webhook_type!r}, channel_name={self.channel_name!r})"
        )
