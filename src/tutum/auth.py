"""Authentication providers for Tutum SDK.

Supports:
- Token: Bearer token authentication
- APIKey: Tutum username + API key (``Authorization: ApiKey user:key``)
- Header: a pre-built Authorization header value (e.g. from TUTUM_AUTH)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field


class AuthProvider(ABC):
    """Base authentication provider interface.

    All authentication methods must implement this interface.
    """

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Return authentication headers for requests.

        Returns:
            Dictionary of headers to include in requests.
        """
        ...

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        """Check if credentials are available.

        Returns:
            True if valid credentials are available.
        """
        ...


@dataclass
class TokenAuth(AuthProvider):
    """Bearer token authentication.

    Example:
        ```python
        auth = TokenAuth(token="3f9a...")
        client = TutumClient(auth=auth)
        ```

    Attributes:
        token: API token.
    """

    token: str = field(repr=False)  # Never log tokens

    def get_headers(self) -> dict[str, str]:
        """Return Bearer token header."""
        return {"Authorization": f"Bearer {self.token}"}

    @property
    def is_authenticated(self) -> bool:
        return bool(self.token)


@dataclass
class APIKeyAuth(AuthProvider):
    """Username and API key authentication.

    Example:
        ```python
        auth = APIKeyAuth(username="alice", api_key="0123abcd")
        client = TutumClient(auth=auth)
        ```

    Attributes:
        username: Tutum account username.
        api_key: API key generated for that account.
    """

    username: str
    api_key: str = field(repr=False)  # Never log API keys

    def get_headers(self) -> dict[str, str]:
        """Return ApiKey header.

        Returns:
            Dict with ``Authorization: ApiKey <username>:<api_key>``.
        """
        return {"Authorization": f"ApiKey {self.username}:{self.api_key}"}

    @property
    def is_authenticated(self) -> bool:
        return bool(self.username and self.api_key)


@dataclass
class HeaderAuth(AuthProvider):
    """Pre-built Authorization header.

    Used when the full header value is handed over, e.g. through the
    TUTUM_AUTH environment variable set inside Tutum-managed containers.
    """

    value: str = field(repr=False)

    def get_headers(self) -> dict[str, str]:
        return {"Authorization": self.value}

    @property
    def is_authenticated(self) -> bool:
        return bool(self.value)
