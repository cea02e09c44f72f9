"""
Discord Exception Reporter
==========================
Posts exception reports to a Discord webhook as a single embed.
"""

from datetime import datetime, timezone
from typing import Dict, Any

from .slack_reporter import format_exception_block
from .webhook_reporter import WebhookReporter
from ..config.constants import (
    REPORTER_DISCORD,
    DISCORD_COLORS,
    DISCORD_MAX_DESCRIPTION_LENGTH,
)
from ..config.options import WebHookOptions
from ..utils.exception_utils import get_exception_type_name, truncate_text


def _discord_color(color: str) -> int:
    """Convert a colour name or '#RRGGBB' value to a Discord integer."""
    if not color:
        return DISCORD_COLORS['danger']
    if color in DISCORD_COLORS:
        return DISCORD_COLORS[color]
    try:
        return int(color.lstrip('#'), 16)
    except ValueError:
        return DISCORD_COLORS['danger']


class DiscordReporter(WebhookReporter):
    """Discord webhook reporter."""

    def build_payload(self, exception: BaseException, options: WebHookOptions) -> Dict[str, Any]:
        type_name = get_exception_type_name(exception)

        description = format_exception_block(exception, options)
        if options.attachment_main_text:
            description = f"{options.attachment_main_text}\n{description}"

        embed: Dict[str, Any] = {
            'title': options.attachment_title or type_name,
            'description': truncate_text(description, DISCORD_MAX_DESCRIPTION_LENGTH),
            'color': _discord_color(options.attachment_color),
            'timestamp': datetime.now(timezone.utc).isoformat(),
        }
        if options.attachment_title_link:
            embed['url'] = options.attachment_title_link

        payload: Dict[str, Any] = {'embeds': [embed]}
        if options.text:
            payload['content'] = options.text
        if options.username:
            payload['username'] = options.username
        if options.icon_url:
            payload['avatar_url'] = options.icon_url

        return payload

    def get_reporter_type(self) -> str:
        return REPORTER_DISCORD

    def get_reporter_name(self) -> str:
        return "Discord"
