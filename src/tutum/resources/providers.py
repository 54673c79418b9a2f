"""Provider resource operations."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from tutum.models.common import Page
from tutum.models.provider import Provider
from tutum.resources._base import AsyncResource, SyncResource


class Providers(SyncResource):
    """Cloud providers supported by the service.

    Example:
        ```python
        for provider in client.providers.list().objects:
            print(provider.name, provider.available)

        digitalocean = client.providers.get("digitalocean")
        ```
    """

    _resource = "provider"

    def list(self, page: int | None = None) -> Page[Provider]:
        """List supported cloud providers."""
        return self._list(Provider, page)

    def iterate(self, start_page: int = 1) -> Iterator[Provider]:
        return self._iterate(Provider, start_page)

    def get(self, name: str) -> Provider:
        """Get a provider by name.

        Args:
            name: Provider name, e.g. "digitalocean".
        """
        return self._retrieve(Provider, name)


class AsyncProviders(AsyncResource):
    """Async provider operations."""

    _resource = "provider"

    async def list(self, page: int | None = None) -> Page[Provider]:
        return await self._list(Provider, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[Provider]:
        return self._iterate(Provider, start_page)

    async def get(self, name: str) -> Provider:
        return await self._retrieve(Provider, name)
