"""Credential providers attached to every outgoing call."""

from abc import ABC, abstractmethod

from pydantic import SecretStr


class Credentials(ABC):
    """Provides the authorization value sent with each call."""

    @abstractmethod
    def authorization(self) -> str:
        """Return the value of the ``authorization`` metadata entry."""
        ...


class KeyCredentials(Credentials):
    """Credentials using a key ID and key secret pair."""

    def __init__(self, key_id: str, key_secret: SecretStr | str) -> None:
        """Initialize key credentials.

        Args:
            key_id: Key identifier.
            key_secret: Key secret, kept masked in reprs.
        """
        if isinstance(key_secret, str):
            key_secret = SecretStr(key_secret)
        self.key_id = key_id
        self._key_secret = key_secret

    def authorization(self) -> str:
        return f"keysecret {self.key_id} {self._key_secret.get_secret_value()}"

    def __repr__(self) -> str:
        return f"KeyCredentials(key_id={self.key_id!r}, key_secret={self._key_secret!r})"
