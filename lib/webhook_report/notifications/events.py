"""
Report Events
=============
Values handed to the pre-report and post-report hooks.

Both are created fresh for every reported exception and dropped once
the post-report hook returns.
"""

from typing import Optional

from ..config.options import WebHookOptions


class ExceptionReportingEvent:
    """
    Passed to the pre-report hook before anything is sent.

    The hook may replace `options` (or fill them in when the filter has
    none) and may set `cancel_report` to skip the report entirely.
    """

    def __init__(
        self,
        exception: BaseException,
        options: Optional[WebHookOptions] = None,
        handled: bool = False,
    ):
        self.exception = exception
        self.options = options
        self.handled = handled
        self.cancel_report = False

    def cancel(self) -> None:
        """Cancel the pending report."""
        self.cancel_report = True

    def __repr__(self):
        return (
            f"ExceptionReportingEvent(exception={self.exception!r}, "
            f"cancel_report={self.cancel_report})"
        )


class ExceptionReportedEvent:
    """
    Passed to the post-report hook after the send attempt.

    Attributes:
        exception: The exception that was reported
        options: The options actually used for the attempt
        report_succeeded: Whether the reporter confirmed delivery
        report_exception: Error raised by the reporter, if any
    """

    def __init__(
        self,
        exception: BaseException,
        options: WebHookOptions,
        report_succeeded: bool = False,
        report_exception: Optional[BaseException] = None,
    ):
        self.exception = exception
        self.options = options
        self.report_succeeded = report_succeeded
        self.report_exception = report_exception

    @property
    def failed(self) -> bool:
        return not self.report_succeeded

    def __repr__(self):
        return (
            f"ExceptionReportedEvent(exception={self.exception!r}, "
            f"report_succeeded={self.report_succeeded}, "
            f"report_exception={self.report_exception!r})"
        )
