# gitup/credentials.py
import getpass
import logging
from typing import Optional, Protocol

import keyring
from keyring.backends import fail, null
from keyring.errors import KeyringError

from .errors import CredentialStoreError

logger = logging.getLogger(__name__)

# keyring picks the platform store itself (macOS Keychain on macOS)
SERVICE_NAME = "GitUp"


class CredentialStore(Protocol):
    def save(self, token: str) -> None: ...

    def load(self) -> Optional[str]: ...


def _current_user() -> str:
    try:
        return getpass.getuser()
    except (KeyError, OSError):
        return ""


class KeychainCredentialStore:
    """Token storage in the system keyring, keyed by user name under service ``GitUp``."""

    def __init__(self, account: Optional[str] = None, service: str = SERVICE_NAME):
        self.account = account if account is not None else _current_user()
        self.service = service

    def save(self, token: str) -> None:
        try:
            keyring.set_password(self.service, self.account, token)
        except KeyringError as e:
            raise CredentialStoreError(f"keyring refused the token: {e}") from e

    def load(self) -> Optional[str]:
        try:
            token = keyring.get_password(self.service, self.account)
        except KeyringError as e:
            logger.debug("keyring lookup failed: %s", e)
            return None
        if not token:
            logger.debug("no keyring entry for %s/%s", self.account, self.service)
            return None
        return token.strip() or None


class NullCredentialStore:
    """Used where no secure store exists; the token then lives in the config file."""

    def save(self, token: str) -> None:
        raise CredentialStoreError("secure credential storage is not available on this platform")

    def load(self) -> Optional[str]:
        return None


class MemoryCredentialStore:
    def __init__(self, token: Optional[str] = None):
        self.token = token

    def save(self, token: str) -> None:
        self.token = token

    def load(self) -> Optional[str]:
        return self.token


def default_credential_store() -> CredentialStore:
    backend = keyring.get_keyring()
    if isinstance(backend, (fail.Keyring, null.Keyring)):
        logger.debug("no usable keyring backend (%s)", type(backend).__name__)
        return NullCredentialStore()
    return KeychainCredentialStore()
