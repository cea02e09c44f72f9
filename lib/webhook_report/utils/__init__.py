"""
Utilities module - Exception formatting and type resolution helpers.
"""

from .exception_utils import (
    get_exception_type_name,
    format_exception_text,
    truncate_text,
    resolve_exception_type,
)

__all__ = [
    "get_exception_type_name",
    "format_exception_text",
    "truncate_text",
    "resolve_exception_type",
]
