"""
Notifications module - Pre/post report hooks and their event values.
"""

from .events import ExceptionReportingEvent, ExceptionReportedEvent
from .channel import NotificationChannel, ReportingHook, ReportedHook

__all__ = [
    "ExceptionReportingEvent",
    "ExceptionReportedEvent",
    "NotificationChannel",
    "ReportingHook",
    "ReportedHook",
]
