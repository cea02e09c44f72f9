"""
Webhook Credentials
===================
Encrypted webhook URLs and masking for safe logging.

An incoming webhook URL is a bearer secret: anyone holding it can post
to the channel. Deployments may keep it Fernet-encrypted in the
environment and supply the key separately.

To generate a new key:
    from cryptography.fernet import Fernet
    print(Fernet.generate_key().decode())

Or use: generate_fernet_key() from this module.
"""

from typing import Dict, Any, Optional
from urllib.parse import urlsplit

from cryptography.fernet import Fernet, InvalidToken

from ..errors import ConfigurationError


def generate_fernet_key() -> str:
    """
    Generate a new Fernet encryption key.

    Returns:
        Base64-encoded Fernet key string
    """
    return Fernet.generate_key().decode()


def _get_fernet(encryption_key: str) -> Fernet:
    try:
        return Fernet(encryption_key.encode())
    except (ValueError, TypeError, AttributeError) as e:
        raise ConfigurationError(f"Invalid encryption key format: {e}")


def encrypt_webhook_url(webhook_url: str, encryption_key: str) -> str:
    """
    Encrypt a webhook URL for storage in the environment.

    Args:
        webhook_url: Plain webhook URL
        encryption_key: Fernet key string

    Returns:
        Fernet token string
    """
    fernet = _get_fernet(encryption_key)
    return fernet.encrypt(webhook_url.encode()).decode()


def decrypt_webhook_url(encrypted_url: str, encryption_key: str) -> str:
    """
    Decrypt an encrypted webhook URL.

    Args:
        encrypted_url: Fernet-encrypted URL
        encryption_key: Fernet key string

    Returns:
        Decrypted webhook URL

    Raises:
        ConfigurationError: If the key is malformed or decryption fails
    """
    if not encryption_key:
        raise ConfigurationError("An encryption key is required to decrypt the webhook URL")

    fernet = _get_fernet(encryption_key)
    try:
        return fernet.decrypt(encrypted_url.encode()).decode()
    except InvalidToken:
        raise ConfigurationError(
            "Failed to decrypt webhook URL",
            details="The token is invalid or was encrypted with a different key",
        )


def mask_webhook_url(webhook_url: Optional[str]) -> Optional[str]:
    """
    Mask the secret path of a webhook URL for logging.

    Keeps scheme and host so the target is still recognisable:
        https://hooks.slack.com/services/T00/B00/abcdefgh
        -> https://hooks.slack.com/serv...efgh

    Args:
        webhook_url: URL to mask

    Returns:
        Masked URL, or the input unchanged if empty
    """
    if not webhook_url:
        return webhook_url

    parts = urlsplit(webhook_url)
    if not parts.netloc:
        return "***"

    path = parts.path.lstrip('/')
    if len(path) > 8:
        masked_path = f"{path[:4]}...{path[-4:]}"
    elif path:
        masked_path = "***"
    else:
        masked_path = ""

    return f"{parts.scheme}://{parts.netloc}/{masked_path}"


def mask_options(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Create a masked copy of an options dictionary for safe logging.

    Args:
        data: Dictionary potentially containing webhook URLs

    Returns:
        Dictionary with URL values masked
    """
    if not isinstance(data, dict):
        return data

    masked = data.copy()
    for field in ('webhook_url', 'url'):
        if masked.get(field):
            masked[field] = mask_webhook_url(masked[field])

    for field in ('webhook_url_encrypted', 'encryption_key'):
        if masked.get(field):
            masked[field] = "***"

    return masked
