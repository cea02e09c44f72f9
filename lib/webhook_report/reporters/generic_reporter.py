"""
Generic Exception Reporter
==========================
Posts a flat JSON document for HTTP endpoints that are not chat services.
"""

from datetime import datetime, timezone
from typing import Dict, Any

from .webhook_reporter import WebhookReporter
from ..config.constants import REPORTER_GENERIC, PACKAGE_NAME, MAX_TRACEBACK_LENGTH
from ..config.options import WebHookOptions
from ..utils.exception_utils import (
    get_exception_type_name,
    format_exception_text,
    truncate_text,
)


class GenericReporter(WebhookReporter):
    """Plain JSON webhook reporter."""

    def build_payload(self, exception: BaseException, options: WebHookOptions) -> Dict[str, Any]:
        return {
            'event': 'exception',
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'exception_type': get_exception_type_name(exception),
            'message': str(exception),
            'traceback': truncate_text(format_exception_text(exception), MAX_TRACEBACK_LENGTH),
            'text': options.text,
            'channel': options.channel_name,
            'source': options.username or PACKAGE_NAME,
        }

    def get_reporter_type(self) -> str:
        return REPORTER_GENERIC

    def get_reporter_name(self) -> str:
        return "Generic"
