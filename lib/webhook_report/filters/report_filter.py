"""
Webhook Error Report Filter
===========================
Decides whether an exception is reported to the webhook target, runs
the pre/post report hooks, and applies the failure policy.

Per exception, in order:
1. Skip if already handled and ignore_handled is on
2. Skip if the exception's exact type is in ignore_exception_types
3. Resolve options (default, then reporting hook may replace them)
4. Stop if the reporting hook cancelled the report
5. Raise ConfigurationError if no options were resolved
6. Send once through the reporter, capturing any error it raises
7. Run the reported hook with the outcome
8. Raise the failure if throw_on_failure is on
"""

from typing import Iterable, Optional, Type

from ..config.constants import ENV_PREFIX
from ..config.credentials import mask_webhook_url
from ..config.settings import load_filter_settings
from ..config.options import WebHookOptions
from ..errors import ConfigurationError, DeliveryFailed
from ..notifications.channel import NotificationChannel, ReportingHook, ReportedHook
from ..notifications.events import ExceptionReportingEvent, ExceptionReportedEvent
from ..reporters.base import BaseExceptionReporter
from ..reporters.factory import ReporterFactory
from ..utils.exception_utils import get_exception_type_name


class ExceptionRecord:
    """An observed exception and whether the host already handled it."""

    __slots__ = ('exception', 'handled')

    def __init__(self, exception: BaseException, handled: bool = False):
        object.__setattr__(self, 'exception', exception)
        object.__setattr__(self, 'handled', bool(handled))

    def __setattr__(self, name, value):
        raise AttributeError("ExceptionRecord is read-only")

    def __repr__(self):
        return f"ExceptionRecord(exception={self.exception!r}, handled={self.handled})"


class WebHookErrorReportFilter:
    """
    Exception filter that reports exceptions to a chat webhook.

    Usage:
        report_filter = WebHookErrorReportFilter(
            WebHookOptions("https://hooks.slack.com/services/..."),
            ignore_exception_types=[NotFound],
        )

        @report_filter.set_reporting_hook
        def add_context(event):
            event.options = event.options.copy(attachment_main_text=request_summary())

        # From the host framework's error handler:
        report_filter.on_exception(exc, handled=False)

    Settings are expected to be configured once at startup and left
    alone while exceptions are being reported; the filter holds no
    per-report state of its own.
    """

    def __init__(
        self,
        options: Optional[WebHookOptions] = None,
        reporter: Optional[BaseExceptionReporter] = None,
        ignore_handled: bool = False,
        ignore_exception_types: Optional[Iterable[Type[BaseException]]] = None,
        throw_on_failure: bool = True,
        on_reporting: Optional[ReportingHook] = None,
        on_reported: Optional[ReportedHook] = None,
    ):
        """
        Initialize the report filter.

        Args:
            options: Default delivery options. If omitted, the reporting
                hook must supply them.
            reporter: Reporter to send through. If omitted, one is created
                per report from the effective options' webhook type/URL.
            ignore_handled: Skip exceptions the host already handled
            ignore_exception_types: Exception classes never to report,
                matched on exact type (subclasses are still reported)
            throw_on_failure: Raise to the caller when delivery fails.
                Set False and use the reported hook to handle failures quietly.
            on_reporting: Pre-report hook
            on_reported: Post-report hook
        """
        self.options = options
        self.ignore_handled = ignore_handled
        self.ignore_exception_types = ignore_exception_types
        self.throw_on_failure = throw_on_failure
        self.channel = NotificationChannel(on_reporting, on_reported)
        self._reporter = reporter

    @classmethod
    def from_env(
        cls,
        prefix: str = ENV_PREFIX,
        env_file: Optional[str] = None,
        **overrides,
    ) -> "WebHookErrorReportFilter":
        """
        Create a filter from WEBHOOK_REPORT_* environment variables.

        Keyword overrides take precedence over environment values.
        """
        settings = load_filter_settings(prefix, env_file=env_file)
        settings.update(overrides)
        return cls(**settings)

    @property
    def ignore_exception_types(self) -> frozenset:
        return self._ignore_exception_types

    @ignore_exception_types.setter
    def ignore_exception_types(self, types: Optional[Iterable[Type[BaseException]]]):
        self._ignore_exception_types = frozenset(types or ())

    @property
    def reporter(self) -> Optional[BaseExceptionReporter]:
        return self._reporter

    def set_reporting_hook(self, hook: Optional[ReportingHook]) -> Optional[ReportingHook]:
        """Register the pre-report hook, replacing any previous one."""
        return self.channel.set_reporting_hook(hook)

    def set_reported_hook(self, hook: Optional[ReportedHook]) -> Optional[ReportedHook]:
        """Register the post-report hook, replacing any previous one."""
        return self.channel.set_reported_hook(hook)

    def is_ignored(self, record: ExceptionRecord) -> bool:
        """Check the exclusion rules for an exception record."""
        if self.ignore_handled and record.handled:
            return True
        # exact type match; subclasses of an ignored type are still reported
        return type(record.exception) in self._ignore_exception_types

    def on_exception(self, exception: BaseException, handled: bool = False) -> None:
        """
        Report an exception observed by the host framework.

        Args:
            exception: The exception to report
            handled: Whether the host has already handled it

        Raises:
            ConfigurationError: If no delivery options could be resolved
            DeliveryFailed: If the target declined the report and
                throw_on_failure is set
            Exception: The reporter's own error, if it raised and
                throw_on_failure is set, or any error raised by a hook
        """
        self.process(ExceptionRecord(exception, handled))

    def process(self, record: ExceptionRecord) -> None:
        """Run the report pipeline for an already-built exception record."""
        exception = record.exception

        if self.is_ignored(record):
            print(f"[REPORT] Skipping {get_exception_type_name(exception)} (ignored)")
            return

        options = self.options

        if self.channel.has_reporting_hook:
            reporting_event = ExceptionReportingEvent(exception, options, record.handled)
            self.channel.notify_reporting(reporting_event)
            if reporting_event.cancel_report:
                print(f"[REPORT] Report of {get_exception_type_name(exception)} cancelled by hook")
                return
            options = reporting_event.options

        if options is None:
            raise ConfigurationError(
                "WebHookErrorReportFilter.options must be set as it contains the details "
                "for connecting to the webhook target.",
                details=(
                    "Pass options to the constructor, assign report_filter.options, "
                    "or set event.options in a reporting hook."
                ),
            )

        reported_event = ExceptionReportedEvent(exception, options)
        try:
            reporter = self._reporter
            if reporter is None:
                reporter = ReporterFactory.create_for_options(options)
            reported_event.report_succeeded = bool(reporter.send(exception, options))
        except Exception as e:
            reported_event.report_exception = e
            print(
                f"[REPORT] Error sending report to {mask_webhook_url(options.webhook_url)}: "
                f"{type(e).__name__}: {e}"
            )

        if reported_event.report_succeeded:
            print(f"[REPORT] Reported {get_exception_type_name(exception)}")

        self.channel.notify_reported(reported_event)

        if reported_event.failed and self.throw_on_failure:
            if reported_event.report_exception is not None:
                raise reported_event.report_exception
            raise DeliveryFailed(exception, options)
