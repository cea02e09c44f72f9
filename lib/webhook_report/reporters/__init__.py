"""
Webhook Report - Exception Reporters
====================================
Webhook delivery adapters with a unified send() interface.

Supported:
    - Slack (incoming webhooks, attachment layout)
    - Discord (webhook embeds)
    - Generic (flat JSON POST)
"""

from .base import BaseExceptionReporter
from .webhook_reporter import WebhookReporter
from .slack_reporter import SlackReporter
from .discord_reporter import DiscordReporter
from .generic_reporter import GenericReporter
from .factory import ReporterFactory, detect_reporter_type

__all__ = [
    "BaseExceptionReporter",
    "WebhookReporter",
    "SlackReporter",
    "DiscordReporter",
    "GenericReporter",
    "ReporterFactory",
    "detect_reporter_type",
]
