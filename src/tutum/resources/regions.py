"""Region resource operations."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from tutum.models.common import Page
from tutum.models.provider import Region
from tutum.resources._base import AsyncResource, SyncResource


class Regions(SyncResource):
    """Regions of all supported cloud providers."""

    _resource = "region"

    def list(self, page: int | None = None) -> Page[Region]:
        """List regions of all providers.

        Args:
            page: Page number, server default when omitted.
        """
        return self._list(Region, page)

    def iterate(self, start_page: int = 1) -> Iterator[Region]:
        return self._iterate(Region, start_page)

    def get(self, provider: str, name: str) -> Region:
        """Get a region of a provider.

        Args:
            provider: Provider name, e.g. "digitalocean".
            name: Region name, e.g. "lon1".
        """
        return self._retrieve(Region, provider, name)


class AsyncRegions(AsyncResource):
    """Async region operations."""

    _resource = "region"

    async def list(self, page: int | None = None) -> Page[Region]:
        return await self._list(Region, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[Region]:
        return self._iterate(Region, start_page)

    async def get(self, provider: str, name: str) -> Region:
        return await self._retrieve(Region, provider, name)
