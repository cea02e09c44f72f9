"""
Webhook Report - Base Exception Reporter
========================================
Abstract base class for exception reporters.

All reporters (Slack, Discord, generic JSON, etc.) must implement
this interface to be usable with the ReporterFactory and the
WebHookErrorReportFilter.
"""

from abc import ABC, abstractmethod

from ..config.options import WebHookOptions


class BaseExceptionReporter(ABC):
    """
    Abstract base class for exception reporters.

    A reporter makes exactly one synchronous delivery attempt per call:
    - Returns True when the target confirmed delivery
    - Returns False when the target declined the report without erroring
    - Raises on transport errors (network, serialization, authentication)

    Reporters never retry and never swallow transport errors; the
    report filter decides what a failure means for the caller.
    """

    @abstractmethod
    def send(self, exception: BaseException, options: WebHookOptions) -> bool:
        """
        Send a report of an exception to the webhook target.

        Args:
            exception: The exception to report
            options: Effective delivery options for this report

        Returns:
            True if delivered, False if the target reported failure

        Raises:
            Exception: Any transport-level error, unchanged
        """
        pass

    @abstractmethod
    def get_reporter_type(self) -> str:
        """
        Get reporter type identifier.

        Returns:
            Reporter type string (e.g., 'slack', 'discord')
        """
        pass

    @abstractmethod
    def get_reporter_name(self) -> str:
        """
        Get human-readable reporter name.

        Returns:
            Reporter name (e.g., 'Slack', 'Discord')
        """
        pass
