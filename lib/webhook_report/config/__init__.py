"""
Configuration module - Options, credentials, and constants management.
"""

from .options import WebHookOptions

from .credentials import (
    generate_fernet_key,
    encrypt_webhook_url,
    decrypt_webhook_url,
    mask_webhook_url,
    mask_options,
)

from .settings import (
    load_options_from_env,
    load_filter_settings,
    parse_bool,
)

from .constants import (
    SHARED_VERSION,
    ENV_PREFIX,
    DEFAULT_TIMEOUT_SECONDS,
    MAX_TRACEBACK_LENGTH,
    # Reporter identifiers
    REPORTER_SLACK,
    REPORTER_DISCORD,
    REPORTER_GENERIC,
)

__all__ = [
    # Options
    "WebHookOptions",
    # Credentials
    "generate_fernet_key",
    "encrypt_webhook_url",
    "decrypt_webhook_url",
    "mask_webhook_url",
    "mask_options",
    # Settings
    "load_options_from_env",
    "load_filter_settings",
    "parse_bool",
    # Constants
    "SHARED_VERSION",
    "ENV_PREFIX",
    "DEFAULT_TIMEOUT_SECONDS",
    "MAX_TRACEBACK_LENGTH",
    # Reporter identifiers
    "REPORTER_SLACK",
    "REPORTER_DISCORD",
    "REPORTER_GENERIC",
]
