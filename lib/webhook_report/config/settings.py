"""
Environment Settings
====================
Builds delivery options and filter settings from environment variables.

Variables (default prefix WEBHOOK_REPORT):
    WEBHOOK_REPORT_URL                  Plain webhook URL
    WEBHOOK_REPORT_URL_ENCRYPTED        Fernet-encrypted webhook URL
    WEBHOOK_REPORT_ENCRYPTION_KEY       Key for the encrypted URL
    WEBHOOK_REPORT_TYPE                 slack | discord | generic
    WEBHOOK_REPORT_CHANNEL              Channel override
    WEBHOOK_REPORT_USERNAME             Bot display name
    WEBHOOK_REPORT_ICON_EMOJI           Bot emoji icon
    WEBHOOK_REPORT_ICON_URL             Bot image icon
    WEBHOOK_REPORT_TEXT                 Message heading
    WEBHOOK_REPORT_COLOR                Attachment colour
    WEBHOOK_REPORT_TIMEOUT              Request timeout (seconds)
    WEBHOOK_REPORT_IGNORE_HANDLED       Skip already-handled exceptions
    WEBHOOK_REPORT_THROW_ON_FAILURE     Raise when delivery fails
    WEBHOOK_REPORT_IGNORE_EXCEPTION_TYPES
                                        Comma-separated dotted type names
"""

import os
from typing import Dict, Any, Optional

from dotenv import load_dotenv

from .constants import ENV_PREFIX
from .credentials import decrypt_webhook_url
from .options import WebHookOptions
from ..errors import ConfigurationError
from ..utils.exception_utils import resolve_exception_type

_TRUE_VALUES = frozenset(['1', 'true', 'yes', 'on'])
_FALSE_VALUES = frozenset(['0', 'false', 'no', 'off', ''])

# Option fields read directly from {prefix}_{suffix}
_OPTION_ENV_FIELDS = {
    'TYPE': 'webhook_type',
    'CHANNEL': 'channel_name',
    'USERNAME': 'username',
    'ICON_EMOJI': 'icon_emoji',
    'ICON_URL': 'icon_url',
    'TEXT': 'text',
    'COLOR': 'attachment_color',
}


def parse_bool(value: Optional[str], default: bool = False) -> bool:
    """
    Parse a boolean environment value.

    Raises:
        ConfigurationError: If the value isn't a recognised boolean
    """
    if value is None:
        return default

    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value: '{value}'")


def _load_env_file(env_file: Optional[str]) -> None:
    if env_file is not None:
        load_dotenv(env_file)


def _get_webhook_url(prefix: str) -> Optional[str]:
    url = os.getenv(f"{prefix}_URL")
    if url:
        return url

    encrypted_url = os.getenv(f"{prefix}_URL_ENCRYPTED")
    if not encrypted_url:
        return None

    encryption_key = os.getenv(f"{prefix}_ENCRYPTION_KEY")
    if not encryption_key:
        raise ConfigurationError(
            f"{prefix}_URL_ENCRYPTED is set but {prefix}_ENCRYPTION_KEY is missing"
        )
    return decrypt_webhook_url(encrypted_url, encryption_key)


def load_options_from_env(
    prefix: str = ENV_PREFIX,
    env_file: Optional[str] = None,
) -> Optional[WebHookOptions]:
    """
    Build WebHookOptions from environment variables.

    Args:
        prefix: Environment variable prefix
        env_file: Optional .env file to load first

    Returns:
        Configured options, or None if no webhook URL is set

    Raises:
        ConfigurationError: If a value is present but invalid
    """
    _load_env_file(env_file)

    webhook_url = _get_webhook_url(prefix)
    if not webhook_url:
        return None

    kwargs: Dict[str, Any] = {'webhook_url': webhook_url}
    for suffix, field in _OPTION_ENV_FIELDS.items():
        value = os.getenv(f"{prefix}_{suffix}")
        if value:
            kwargs[field] = value

    timeout = os.getenv(f"{prefix}_TIMEOUT")
    if timeout:
        try:
            kwargs['timeout'] = float(timeout)
        except ValueError:
            raise ConfigurationError(f"Invalid {prefix}_TIMEOUT value: '{timeout}'")

    return WebHookOptions(**kwargs)


def load_filter_settings(
    prefix: str = ENV_PREFIX,
    env_file: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Load all report filter settings from environment variables.

    Returns:
        Dictionary with 'options', 'ignore_handled', 'throw_on_failure'
        and 'ignore_exception_types', ready to pass to the filter.
    """
    _load_env_file(env_file)

    type_names = os.getenv(f"{prefix}_IGNORE_EXCEPTION_TYPES", "")
    ignore_types = [
        resolve_exception_type(name)
        for name in type_names.split(',')
        if name.strip()
    ]

    return {
        'options': load_options_from_env(prefix),
        'ignore_handled': parse_bool(os.getenv(f"{prefix}_IGNORE_HANDLED"), default=False),
        'throw_on_failure': parse_bool(os.getenv(f"{prefix}_THROW_ON_FAILURE"), default=True),
        'ignore_exception_types': ignore_types,
    }
