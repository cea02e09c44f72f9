"""
Exception Utilities
===================
Helpers for naming, formatting, and resolving exception types.
"""

import importlib
import traceback
from typing import Optional, Type

from ..errors import ConfigurationError


def get_exception_type_name(exception: BaseException) -> str:
    """
    Get the qualified type name of an exception.

    Builtins are returned bare ('ValueError'); everything else is
    module-qualified ('requests.exceptions.Timeout').
    """
    exc_type = type(exception)
    module = exc_type.__module__
    if module in (None, 'builtins'):
        return exc_type.__qualname__
    return f"{module}.{exc_type.__qualname__}"


def truncate_text(text: Optional[str], max_length: int, suffix: str = "...") -> Optional[str]:
    """
    Truncate text to max_length characters, keeping the tail.

    The tail of a traceback holds the raising frame, so the head is
    what gets dropped.
    """
    if text is None or len(text) <= max_length:
        return text
    if max_length <= len(suffix):
        return text[-max_length:]
    return suffix + text[-(max_length - len(suffix)):]


def format_exception_text(exception: BaseException, limit: Optional[int] = None) -> str:
    """
    Format an exception with its traceback.

    Args:
        exception: Exception to format
        limit: Optional stack depth limit

    Returns:
        Traceback text, or 'Type: message' if the exception was never raised
    """
    if exception.__traceback__ is None:
        return "".join(traceback.format_exception_only(type(exception), exception)).strip()

    lines = traceback.format_exception(
        type(exception), exception, exception.__traceback__, limit=limit
    )
    return "".join(lines).strip()


def resolve_exception_type(dotted_name: str) -> Type[BaseException]:
    """
    Resolve a dotted name to an exception class.

    Bare names are looked up in builtins:
        'TimeoutError' -> builtins.TimeoutError
        'requests.exceptions.Timeout' -> requests.exceptions.Timeout

    Raises:
        ConfigurationError: If the name can't be imported or isn't an exception
    """
    name = (dotted_name or "").strip()
    if not name:
        raise ConfigurationError("Exception type name is empty")

    module_name, _, attr = name.rpartition('.')
    if not module_name:
        module_name = 'builtins'

    try:
        module = importlib.import_module(module_name)
        exc_type = getattr(module, attr)
    except (ImportError, AttributeError) as e:
        raise ConfigurationError(f"Cannot resolve exception type '{name}'", details=str(e))

    if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
        raise ConfigurationError(f"'{name}' is not an exception type")

    return exc_type
