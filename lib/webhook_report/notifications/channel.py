"""
Notification Channel
====================
Holds the two optional extension points of the report filter.

- Reporting hook: runs before the send; may change options or cancel
- Reported hook: runs after the send; observes the outcome

Each slot holds at most one callable. Registering again replaces the
previous one. Hooks run synchronously on the thread that raised the
report, and any error they raise propagates to that caller.
"""

from typing import Callable, Optional

from .events import ExceptionReportingEvent, ExceptionReportedEvent

ReportingHook = Callable[[ExceptionReportingEvent], None]
ReportedHook = Callable[[ExceptionReportedEvent], None]


class NotificationChannel:
    """
    Pre/post report hook registrations.

    Usage:
        channel = NotificationChannel()

        @channel.set_reporting_hook
        def route(event):
            if isinstance(event.exception, PaymentError):
                event.options = payments_options

        channel.set_reported_hook(lambda event: audit(event.report_succeeded))
    """

    def __init__(
        self,
        reporting_hook: Optional[ReportingHook] = None,
        reported_hook: Optional[ReportedHook] = None,
    ):
        self._reporting_hook = reporting_hook
        self._reported_hook = reported_hook

    def set_reporting_hook(self, hook: Optional[ReportingHook]) -> Optional[ReportingHook]:
        """
        Register the pre-report hook, replacing any previous one.

        Returns the hook so this can be used as a decorator. Pass None
        to unregister.
        """
        if hook is not None and not callable(hook):
            raise TypeError("Reporting hook must be callable")
        self._reporting_hook = hook
        return hook

    def set_reported_hook(self, hook: Optional[ReportedHook]) -> Optional[ReportedHook]:
        """
        Register the post-report hook, replacing any previous one.

        Returns the hook so this can be used as a decorator. Pass None
        to unregister.
        """
        if hook is not None and not callable(hook):
            raise TypeError("Reported hook must be callable")
        self._reported_hook = hook
        return hook

    def clear(self) -> None:
        """Remove both hooks."""
        self._reporting_hook = None
        self._reported_hook = None

    @property
    def has_reporting_hook(self) -> bool:
        return self._reporting_hook is not None

    @property
    def has_reported_hook(self) -> bool:
        return self._reported_hook is not None

    def notify_reporting(self, event: ExceptionReportingEvent) -> bool:
        """
        Run the pre-report hook, if registered.

        Returns:
            True if a hook ran
        """
        if self._reporting_hook is None:
            return False
        self._reporting_hook(event)
        return True

    def notify_reported(self, event: ExceptionReportedEvent) -> bool:
        """
        Run the post-report hook, if registered.

        Returns:
            True if a hook ran
        """
        if self._reported_hook is None:
            return False
        self._reported_hook(event)
        return True
