"""Credential vault: where the signed-in user's identifiers are kept."""

from typing import Protocol

USER_UID_KEY = "userUID"
USER_EMAIL_KEY = "userEmail"
AUTH_TOKEN_KEY = "authToken"


class CredentialVault(Protocol):
    """Secure key/value storage for credentials."""

    def save(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def get(self, key: str) -> str | None:
        """Read a value, or None if absent."""
        ...

    def delete(self, key: str) -> None:
        """Remove a value; absent keys are ignored."""
        ...


class InMemoryCredentialVault:
    """In-memory implementation of CredentialVault for development and testing."""

    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def save(self, key: str, value: str) -> None:
        self._items[key] = value

    def get(self, key: str) -> str | None:
        return self._items.get(key)

    def delete(self, key: str) -> None:
        self._items.pop(key, None)
