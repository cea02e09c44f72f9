"""
Webhook Report - Constants and Configuration
=============================================
Shared constants, message defaults, and environment variable names
for the exception report filter.
"""

from typing import Dict, Tuple

# Version identifier for webhook-report
SHARED_VERSION = "1.0.0"
PACKAGE_NAME = "webhook-report"

# =============================================================================
# REPORTER IDENTIFIERS
# =============================================================================

REPORTER_SLACK: str = "slack"
REPORTER_DISCORD: str = "discord"
REPORTER_GENERIC: str = "generic"

# URL fragments used to auto-detect the reporter type
SLACK_URL_MARKERS: Tuple[str, ...] = ("hooks.slack.com",)
DISCORD_URL_MARKERS: Tuple[str, ...] = (
    "discord.com/api/webhooks",
    "discordapp.com/api/webhooks",
)

# =============================================================================
# DELIVERY DEFAULTS
# =============================================================================

# Request timeout for a single webhook POST (seconds)
DEFAULT_TIMEOUT_SECONDS: float = 10.0

DEFAULT_USERNAME: str = "Exception Reporter"
DEFAULT_TEXT: str = "An unhandled exception occurred"
DEFAULT_ATTACHMENT_COLOR: str = "danger"

# {type}, {message} and {traceback} are substituted per report
DEFAULT_EXCEPTION_TEXT_FORMAT: str = "*{type}*: {message}\n```{traceback}```"

USER_AGENT: str = f"{PACKAGE_NAME}/{SHARED_VERSION}"

# =============================================================================
# MESSAGE LIMITS
# =============================================================================

# Slack truncates attachment text around 8000 characters
MAX_TRACEBACK_LENGTH: int = 3500

# Discord embed description limit
DISCORD_MAX_DESCRIPTION_LENGTH: int = 4096

# Named colours mapped to Discord embed integers
DISCORD_COLORS: Dict[str, int] = {
    'danger': 0xFF0000,
    'warning': 0xFFCC00,
    'good': 0x2EB67D,
}

# =============================================================================
# ENVIRONMENT
# =============================================================================

ENV_PREFIX: str = "WEBHOOK_REPORT"
