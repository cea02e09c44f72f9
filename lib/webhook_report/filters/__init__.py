"""
Filters module - Exception report decision pipeline.
"""

from .report_filter import WebHookErrorReportFilter, ExceptionRecord

__all__ = [
    "WebHookErrorReportFilter",
    "ExceptionRecord",
]
