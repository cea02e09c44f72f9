"""
Slack Exception Reporter
========================
Posts exception reports to a Slack incoming webhook.

Message layout:
- Top-level text (options.text) with optional channel/username/icon overrides
- One attachment coloured by options.attachment_color, titled with the
  exception type, carrying the main text and the formatted traceback
"""

import time
from typing import Dict, Any

from .webhook_reporter import WebhookReporter
from ..config.constants import REPORTER_SLACK, MAX_TRACEBACK_LENGTH
from ..config.options import WebHookOptions
from ..utils.exception_utils import (
    get_exception_type_name,
    format_exception_text,
    truncate_text,
)


def format_exception_block(exception: BaseException, options: WebHookOptions) -> str:
    """Render an exception through options.exception_text_format."""
    return options.exception_text_format.format(
        type=get_exception_type_name(exception),
        message=str(exception),
        traceback=truncate_text(format_exception_text(exception), MAX_TRACEBACK_LENGTH),
    )


class SlackReporter(WebhookReporter):
    """Slack incoming webhook reporter."""

    def build_payload(self, exception: BaseException, options: WebHookOptions) -> Dict[str, Any]:
        type_name = get_exception_type_name(exception)
        exception_text = format_exception_block(exception, options)

        if options.attachment_main_text:
            attachment_text = f"{options.attachment_main_text}\n{exception_text}"
        else:
            attachment_text = exception_text

        attachment = {
            'fallback': f"{type_name}: {exception}",
            'color': options.attachment_color,
            'title': options.attachment_title or type_name,
            'text': attachment_text,
            'mrkdwn_in': ['text'],
            'ts': int(time.time()),
        }
        if options.attachment_title_link:
            attachment['title_link'] = options.attachment_title_link

        payload: Dict[str, Any] = {
            'text': options.text or type_name,
            'attachments': [attachment],
        }

        if options.channel_name:
            payload['channel'] = options.channel_name
        if options.username:
            payload['username'] = options.username

        # Slack ignores icon_url when icon_emoji is present
        if options.icon_emoji:
            payload['icon_emoji'] = options.icon_emoji
        elif options.icon_url:
            payload['icon_url'] = options.icon_url

        return payload

    def get_reporter_type(self) -> str:
        return REPORTER_SLACK

    def get_reporter_name(self) -> str:
        return "Slack"
