"""Credential management using system keyring.

The Up personal access token is stored in the operating system's keyring
(Keychain on macOS, Secret Service on Linux, Credential Locker on Windows).
Falls back to the UP_ACCESS_TOKEN environment variable, which may also be
set in a .env file.
"""

import os
from typing import Optional

import keyring
from dotenv import load_dotenv
from keyring.errors import PasswordDeleteError

from upbank.models.credentials import AccessToken

# Keyring service name
SERVICE_NAME = "upbank"

KEY_ACCESS_TOKEN = "access_token"
ENV_ACCESS_TOKEN = "UP_ACCESS_TOKEN"

# Credential configuration: key names and their validation models
CREDENTIALS = {
    KEY_ACCESS_TOKEN: AccessToken,
}


def get(key: str) -> Optional[str]:
    """Get a credential from keyring."""
    return keyring.get_password(SERVICE_NAME, key)


def store_credential(key: str, value: str) -> bool:
    """Store a credential in keyring with validation."""
    if not value:
        return True  # Allow empty values

    model_class = CREDENTIALS.get(key)
    if model_class:
        model_class(value=value)  # Let Pydantic ValidationError propagate

    keyring.set_password(SERVICE_NAME, key, value)
    return True


def delete(key: str) -> bool:
    """Delete a credential from keyring. Returns False if it was not stored."""
    try:
        keyring.delete_password(SERVICE_NAME, key)
    except PasswordDeleteError:
        return False
    return True


def mask(value: Optional[str], show_chars: int = 4) -> str:
    """Mask a credential value for display."""
    if value is None:
        return "<not set>"

    if len(value) <= show_chars:
        return "*" * len(value)

    return "*" * (len(value) - show_chars) + value[-show_chars:]


def get_access_token() -> Optional[AccessToken]:
    """Get validated access token from keyring, falling back to the environment."""
    raw = get(KEY_ACCESS_TOKEN)
    if not raw:
        load_dotenv()
        raw = os.getenv(ENV_ACCESS_TOKEN)
    return AccessToken(value=raw) if raw else None


def set_access_token(token: str) -> bool:
    """Set access token with validation."""
    return store_credential(KEY_ACCESS_TOKEN, token)


def clear_access_token() -> bool:
    return delete(KEY_ACCESS_TOKEN)
