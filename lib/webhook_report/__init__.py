"""
Webhook Report - Shared Library
===============================
Reports unhandled application exceptions to a chat webhook
(Slack, Discord, or any JSON endpoint).

Usage:
    from webhook_report import WebHookErrorReportFilter, WebHookOptions

    report_filter = WebHookErrorReportFilter(
        WebHookOptions("https://hooks.slack.com/services/..."),
    )
    report_filter.on_exception(exc)
"""

from .errors import (
    WebhookReportError,
    ConfigurationError,
    DeliveryFailed,
)

from .config import (
    WebHookOptions,
    generate_fernet_key,
    encrypt_webhook_url,
    decrypt_webhook_url,
    mask_webhook_url,
    load_options_from_env,
    load_filter_settings,
    SHARED_VERSION,
)

from .reporters import (
    BaseExceptionReporter,
    SlackReporter,
    DiscordReporter,
    GenericReporter,
    ReporterFactory,
)

from .notifications import (
    ExceptionReportingEvent,
    ExceptionReportedEvent,
    NotificationChannel,
)

from .filters import (
    WebHookErrorReportFilter,
    ExceptionRecord,
)

__version__ = SHARED_VERSION

__all__ = [
    # Errors
    "WebhookReportError",
    "ConfigurationError",
    "DeliveryFailed",
    # Config
    "WebHookOptions",
    "generate_fernet_key",
    "encrypt_webhook_url",
    "decrypt_webhook_url",
    "mask_webhook_url",
    "load_options_from_env",
    "load_filter_settings",
    "SHARED_VERSION",
    # Reporters
    "BaseExceptionReporter",
    "SlackReporter",
    "DiscordReporter",
    "GenericReporter",
    "ReporterFactory",
    # Notifications
    "ExceptionReportingEvent",
    "ExceptionReportedEvent",
    "NotificationChannel",
    # Filters
    "WebHookErrorReportFilter",
    "ExceptionRecord",
]
