"""Client options and bearer-token management."""

import logging
import os
from typing import Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)

SERVICE_NAME = "gqlhttp"


class ClientOptions(BaseModel):
    endpoint: str
    authorization: Optional[str] = None
    timeout: float = 30.0


def bearer(token: str) -> str:
    """Format a bearer ``Authorization`` header value."""
    return f"bearer {token}"


def load_token(env_var: str, account: Optional[str] = None) -> Optional[str]:
    """Load an API token from the environment or the system keyring.

    Priority order:
    1. Environment variable ``env_var``
    2. System keyring, under ``account`` (defaults to ``env_var``)

    Returns:
        The token, or None if not found
    """
    token = os.environ.get(env_var)
    if token:
        logger.info(f"Loaded token from environment variable {env_var}")
        return token

    # Fall back to keyring
    try:
        import keyring
        token = keyring.get_password(SERVICE_NAME, account or env_var)
        if token:
            logger.info("Loaded token from keyring")
            return token
    except Exception as e:
        logger.warning(f"Could not read from keyring: {e}")

    return None


def save_token(account: str, token: str) -> bool:
    """Save a token to the system keyring.

    Returns:
        True if saved successfully, False otherwise
    """
    try:
        import keyring
        keyring.set_password(SERVICE_NAME, account, token)
        logger.info("Token saved to keyring")
        return True
    except Exception as e:
        logger.warning(f"Could not save to keyring: {e}")
        return False


def delete_token(account: str) -> bool:
    """Delete a token from the system keyring.

    Returns:
        True if deleted successfully, False otherwise
    """
    try:
        import keyring
        keyring.delete_password(SERVICE_NAME, account)
        logger.info("Token deleted from keyring")
        return True
    except Exception as e:
        logger.warning(f"Could not delete from keyring: {e}")
        return False
