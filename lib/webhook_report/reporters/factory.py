"""
Reporter Factory
================
Factory for creating exception reporter instances dynamically.

Supports explicit reporter types and auto-detection from the webhook URL.
"""

from typing import Optional

import requests

from .base import BaseExceptionReporter
from .slack_reporter import SlackReporter
from .discord_reporter import DiscordReporter
from .generic_reporter import GenericReporter

from ..config.constants import (
    REPORTER_SLACK,
    REPORTER_DISCORD,
    REPORTER_GENERIC,
    SLACK_URL_MARKERS,
    DISCORD_URL_MARKERS,
)
from ..config.options import WebHookOptions
from ..errors import ConfigurationError


def detect_reporter_type(url: str) -> str:
    """
    Auto-detect reporter type from a webhook URL.

    Args:
        url: Webhook URL

    Returns:
        'slack', 'discord', or 'generic'
    """
    url_lower = (url or "").lower()
    if any(marker in url_lower for marker in SLACK_URL_MARKERS):
        return REPORTER_SLACK
    if any(marker in url_lower for marker in DISCORD_URL_MARKERS):
        return REPORTER_DISCORD
    return REPORTER_GENERIC


class ReporterFactory:
    """
    Factory for creating exception reporter instances.

    Usage:
        # Explicit reporter type
        reporter = ReporterFactory.create("slack")

        # Detect from options (webhook_type, else URL)
        reporter = ReporterFactory.create_for_options(options)
    """

    # Registered reporter classes
    _reporters = {
        REPORTER_SLACK: SlackReporter,
        REPORTER_DISCORD: DiscordReporter,
        REPORTER_GENERIC: GenericReporter,
    }

    @classmethod
    def create(
        cls,
        reporter_type: str,
        session: Optional[requests.Session] = None,
    ) -> BaseExceptionReporter:
        """
        Create a reporter instance.

        Args:
            reporter_type: Reporter type ('slack', 'discord', 'generic')
            session: Optional requests session passed to the reporter

        Returns:
            Reporter instance

        Raises:
            ValueError: If reporter type unknown
        """
        reporter_type = reporter_type.lower().strip()

        if reporter_type not in cls._reporters:
            supported = ", ".join(cls._reporters.keys())
            raise ValueError(
                f"Unknown reporter type: '{reporter_type}'. "
                f"Supported: {supported}"
            )

        reporter_class = cls._reporters[reporter_type]
        return reporter_class(session=session)

    @classmethod
    def create_for_options(
        cls,
        options: WebHookOptions,
        session: Optional[requests.Session] = None,
    ) -> BaseExceptionReporter:
        """
        Create the reporter matching a set of delivery options.

        Uses options.webhook_type when set, otherwise detects the type
        from options.webhook_url.

        Raises:
            ConfigurationError: If options has no webhook_url
            ValueError: If options.webhook_type is unknown
        """
        if not options.webhook_url:
            raise ConfigurationError(
                "WebHookOptions.webhook_url must be set when no reporter is supplied"
            )

        reporter_type = options.webhook_type or detect_reporter_type(options.webhook_url)
        return cls.create(reporter_type, session=session)

    @classmethod
    def get_supported_reporters(cls) -> list:
        """Get list of supported reporter types."""
        return list(cls._reporters.keys())

    @classmethod
    def is_reporter_supported(cls, reporter_type: str) -> bool:
        """Check if a reporter type is supported."""
        return reporter_type.lower().strip() in cls._reporters

    @classmethod
    def register_reporter(cls, reporter_type: str, reporter_class: type) -> None:
        """
        Register a new reporter class.

        The class must accept a `session` keyword argument.

        Args:
            reporter_type: Reporter type identifier
            reporter_class: Class that implements BaseExceptionReporter
        """
        if not issubclass(reporter_class, BaseExceptionReporter):
            raise TypeError(
                "Reporter class must inherit from BaseExceptionReporter"
            )
        cls._reporters[reporter_type.lower().strip()] = reporter_class
