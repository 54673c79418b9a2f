"""Node resource for Tutum SDK."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import Any

from tutum.exceptions import ValidationError
from tutum.models.common import Page
from tutum.models.node import Node
from tutum.resources._base import AsyncResource, SyncResource, TagsInput, _Resource, tags_payload


class _NodeRequests(_Resource):
    _resource = "node"

    def _update_payload(
        self, node: Node | str, tags: TagsInput | None
    ) -> tuple[str, dict[str, Any]]:
        if isinstance(node, Node):
            uuid = node.uuid
            if tags is None:
                tags = node.tags
        else:
            uuid = node

        if not uuid:
            raise ValidationError("A node UUID is required", errors={"uuid": ["Missing"]})
        if tags is None:
            raise ValidationError(f"No tags given for node {uuid}", errors={"tags": ["Missing"]})
        return uuid, {"tags": tags_payload(tags)}


class Nodes(_NodeRequests, SyncResource):
    """Nodes resource for managing single compute instances.

    Example:
        ```python
        node = client.nodes.get("7eaf7fff-882c-4f3d-9a8f-a22317ac00ce")

        # Replace the tags of the node
        client.nodes.update(node, tags=["web", "production"])

        # Only nodes without running containers can be terminated
        client.nodes.terminate(node.uuid)
        ```
    """

    def list(self, page: int | None = None) -> Page[Node]:
        """List current and recently terminated nodes.

        Args:
            page: Page number, server default when omitted.
        """
        return self._list(Node, page)

    def iterate(self, start_page: int = 1) -> Iterator[Node]:
        """Iterate over all nodes, fetching pages on demand."""
        return self._iterate(Node, start_page)

    def get(self, uuid: str) -> Node:
        """Get a specific node.

        Args:
            uuid: The node UUID.
        """
        return self._retrieve(Node, uuid)

    def deploy(self, uuid: str) -> Node:
        """Deploy and provision a recently created node."""
        data = self._http.post(self._path(uuid, "deploy"))
        return self._parse(Node, data)

    def update(self, node: Node | str, *, tags: TagsInput | None = None) -> Node:
        """Replace the tags of a node.

        The given tags replace the node's tags wholesale; tags not listed are
        removed.

        Args:
            node: A Node record or a UUID. With a record and no ``tags``, the
                record's own tags are sent.
            tags: Tag names (or Tag records).

        Returns:
            Updated node.
        """
        uuid, payload = self._update_payload(node, tags)
        data = self._http.patch(self._path(uuid), json=payload)
        return self._parse(Node, data)

    def upgrade_docker(self, uuid: str) -> Node:
        """Upgrade the Docker daemon of the node.

        Containers running on the node are restarted.
        """
        data = self._http.post(self._path(uuid, "docker-upgrade"))
        return self._parse(Node, data)

    def terminate(self, uuid: str) -> Node:
        """Terminate a node.

        Only nodes with no running containers can be terminated; otherwise
        the API rejects the call and an APIError is raised.
        """
        data = self._http.delete(self._path(uuid))
        if data is None:
            return self.get(uuid)
        return self._parse(Node, data)


class AsyncNodes(_NodeRequests, AsyncResource):
    """Async nodes resource."""

    async def list(self, page: int | None = None) -> Page[Node]:
        return await self._list(Node, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[Node]:
        return self._iterate(Node, start_page)

    async def get(self, uuid: str) -> Node:
        return await self._retrieve(Node, uuid)

    async def deploy(self, uuid: str) -> Node:
        data = await self._http.post(self._path(uuid, "deploy"))
        return self._parse(Node, data)

    async def update(self, node: Node | str, *, tags: TagsInput | None = None) -> Node:
        """Replace the tags of a node."""
        uuid, payload = self._update_payload(node, tags)
        data = await self._http.patch(self._path(uuid), json=payload)
        return self._parse(Node, data)

    async def upgrade_docker(self, uuid: str) -> Node:
        data = await self._http.post(self._path(uuid, "docker-upgrade"))
        return self._parse(Node, data)

    async def terminate(self, uuid: str) -> Node:
        """Terminate a node. Rejected while containers are running."""
        data = await self._http.delete(self._path(uuid))
        if data is None:
            return await self.get(uuid)
        return self._parse(Node, data)
