"""
Error Types
===========
Exceptions raised by the report filter and its reporters.

ConfigurationError is a setup defect and always reaches the caller.
DeliveryFailed is a single failed send and only reaches the caller
when the filter's throw_on_failure switch is on.
"""

from typing import Any, Optional


class WebhookReportError(Exception):
    """
    Base exception for webhook-report errors.

    Attributes:
        message: Human-readable error message
        details: Optional additional context
    """

    def __init__(self, message: str, details: Optional[str] = None):
        self.message = message
        self.details = details
        super().__init__(message)

    def format_full(self) -> str:
        """Format the message together with any details."""
        if self.details:
            return f"{self.message}\nDetails: {self.details}"
        return self.message


class ConfigurationError(WebhookReportError):
    """Delivery options are missing or invalid."""


class DeliveryFailed(WebhookReportError):
    """
    The webhook target declined the report.

    Raised when a reporter returned False without raising. Transport
    errors raised by the reporter are re-raised as-is instead.

    Attributes:
        exception: The exception that was being reported
        options: The delivery options used for the attempt
    """

    def __init__(
        self,
        exception: BaseException,
        options: Any = None,
        message: Optional[str] = None,
    ):
        self.exception = exception
        self.options = options
        if message is None:
            message = (
                f"Failed to deliver report for {type(exception).__name__} "
                f"to the webhook target"
            )
        super().__init__(message, details=str(exception) or None)


__all__ = [
    "WebhookReportError",
    "ConfigurationError",
    "DeliveryFailed",
]
