"""Node type resource operations."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from tutum.models.common import Page
from tutum.models.provider import NodeType
from tutum.resources._base import AsyncResource, SyncResource


class NodeTypes(SyncResource):
    """Machine sizes offered by the supported cloud providers."""

    _resource = "nodetype"

    def list(self, page: int | None = None) -> Page[NodeType]:
        """List node types of all providers."""
        return self._list(NodeType, page)

    def iterate(self, start_page: int = 1) -> Iterator[NodeType]:
        return self._iterate(NodeType, start_page)

    def get(self, provider: str, name: str) -> NodeType:
        """Get a node type of a provider.

        Args:
            provider: Provider name, e.g. "digitalocean".
            name: Node type name, e.g. "1gb".
        """
        return self._retrieve(NodeType, provider, name)


class AsyncNodeTypes(AsyncResource):
    """Async node type operations."""

    _resource = "nodetype"

    async def list(self, page: int | None = None) -> Page[NodeType]:
        return await self._list(NodeType, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[NodeType]:
        return self._iterate(NodeType, start_page)

    async def get(self, provider: str, name: str) -> NodeType:
        return await self._retrieve(NodeType, provider, name)
