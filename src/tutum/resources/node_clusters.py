"""Node cluster resource for Tutum SDK."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator
from typing import TYPE_CHECKING, Any

from tutum.exceptions import ValidationError
from tutum.models.common import Page
from tutum.models.node_cluster import NodeCluster
from tutum.resources._base import AsyncResource, SyncResource, TagsInput, _Resource, tags_payload

if TYPE_CHECKING:
    from tutum.models.provider import NodeType, Region


class _NodeClusterRequests(_Resource):
    """Request payloads for node cluster operations."""

    _resource = "nodecluster"

    def _create_payload(
        self,
        name: str | None,
        region: Region | str | None,
        node_type: NodeType | str | None,
        target_num_nodes: int,
        tags: TagsInput | None,
        disk: int | None,
        provider_options: dict[str, Any] | None,
    ) -> dict[str, Any]:
        region_uri = self._reference(region, "region")
        node_type_uri = self._reference(node_type, "nodetype")

        errors = {}
        if not name or not name.strip():
            errors["name"] = ["This field is required."]
        if not region_uri:
            errors["region"] = ["This field is required."]
        if not node_type_uri:
            errors["node_type"] = ["This field is required."]
        if errors:
            raise ValidationError(
                "Missing required node cluster fields: " + ", ".join(errors),
                errors=errors,
            )

        payload: dict[str, Any] = {
            "name": name,
            "region": region_uri,
            "node_type": node_type_uri,
            "target_num_nodes": target_num_nodes,
        }
        if tags is not None:
            payload["tags"] = tags_payload(tags)
        if disk is not None:
            payload["disk"] = disk
        if provider_options:
            payload["provider_options"] = provider_options
        return payload

    def _update_payload(
        self,
        cluster: NodeCluster | str,
        name: str | None,
        target_num_nodes: int | None,
        tags: TagsInput | None,
        node_type: NodeType | str | None,
        region: Region | str | None,
    ) -> tuple[str, dict[str, Any]]:
        payload: dict[str, Any] = {}
        if isinstance(cluster, NodeCluster):
            uuid = cluster.uuid
            payload = {
                "name": cluster.name,
                "target_num_nodes": cluster.target_num_nodes,
                "tags": tags_payload(cluster.tags),
                "node_type": cluster.node_type,
                "region": cluster.region,
            }
            payload = {k: v for k, v in payload.items() if v is not None}
        else:
            uuid = cluster

        if name is not None:
            payload["name"] = name
        if target_num_nodes is not None:
            payload["target_num_nodes"] = target_num_nodes
        if tags is not None:
            payload["tags"] = tags_payload(tags)
        if node_type is not None:
            payload["node_type"] = self._reference(node_type, "nodetype")
        if region is not None:
            payload["region"] = self._reference(region, "region")

        if not uuid:
            raise ValidationError("A node cluster UUID is required", errors={"uuid": ["Missing"]})
        if not payload:
            raise ValidationError("Nothing to update on node cluster " + uuid)
        return uuid, payload


class NodeClusters(_NodeClusterRequests, SyncResource):
    """Node clusters resource for provisioning groups of nodes.

    Example:
        ```python
        from tutum import TutumClient

        client = TutumClient(token="your-token")

        cluster = client.node_clusters.create(
            name="mycluster",
            region="digitalocean/lon1",
            node_type="digitalocean/1gb",
            target_num_nodes=2,
        )
        client.node_clusters.deploy(cluster.uuid)

        # Scale out
        client.node_clusters.update(cluster.uuid, target_num_nodes=4)

        # Not reversible
        client.node_clusters.terminate(cluster.uuid)
        ```
    """

    def list(self, page: int | None = None) -> Page[NodeCluster]:
        """List current and recently terminated node clusters.

        Args:
            page: Page number, server default when omitted.

        Returns:
            Page of node clusters.
        """
        return self._list(NodeCluster, page)

    def iterate(self, start_page: int = 1) -> Iterator[NodeCluster]:
        """Iterate over all node clusters, fetching pages on demand."""
        return self._iterate(NodeCluster, start_page)

    def get(self, uuid: str) -> NodeCluster:
        """Get a specific node cluster.

        Args:
            uuid: The node cluster UUID.

        Returns:
            Node cluster details.
        """
        return self._retrieve(NodeCluster, uuid)

    def create(
        self,
        name: str | None = None,
        region: Region | str | None = None,
        node_type: NodeType | str | None = None,
        *,
        target_num_nodes: int = 1,
        tags: TagsInput | None = None,
        disk: int | None = None,
        provider_options: dict[str, Any] | None = None,
    ) -> NodeCluster:
        """Create a new node cluster.

        The cluster is created in the ``Init`` state; call :meth:`deploy` to
        provision its nodes.

        Args:
            name: Cluster name.
            region: Region record, "provider/name" slug or resource URI.
            node_type: Node type record, "provider/name" slug or resource URI.
            target_num_nodes: Number of nodes to provision.
            tags: Tag names (or Tag records) to attach.
            disk: Disk size in GB, where the provider supports it.
            provider_options: Provider specific options.

        Returns:
            Created node cluster.

        Raises:
            ValidationError: If name, region or node_type is missing. No
                request is sent in that case.
        """
        payload = self._create_payload(
            name, region, node_type, target_num_nodes, tags, disk, provider_options
        )
        data = self._http.post(self._path(), json=payload)
        return self._parse(NodeCluster, data)

    def deploy(self, uuid: str) -> NodeCluster:
        """Deploy and provision a recently created node cluster."""
        data = self._http.post(self._path(uuid, "deploy"))
        return self._parse(NodeCluster, data)

    def update(
        self,
        cluster: NodeCluster | str,
        *,
        name: str | None = None,
        target_num_nodes: int | None = None,
        tags: TagsInput | None = None,
        node_type: NodeType | str | None = None,
        region: Region | str | None = None,
    ) -> NodeCluster:
        """Update a node cluster; the service applies the changes right away.

        Args:
            cluster: A NodeCluster record (its mutable fields are sent) or a UUID.
            name: New cluster name.
            target_num_nodes: New node count.
            tags: Replacement tag set.
            node_type: New node type.
            region: New region.

        Returns:
            Updated node cluster.
        """
        uuid, payload = self._update_payload(
            cluster, name, target_num_nodes, tags, node_type, region
        )
        data = self._http.patch(self._path(uuid), json=payload)
        return self._parse(NodeCluster, data)

    def upgrade_docker(self, uuid: str) -> NodeCluster:
        """Upgrade the Docker daemon on every node of the cluster."""
        data = self._http.post(self._path(uuid, "docker-upgrade"))
        return self._parse(NodeCluster, data)

    def terminate(self, uuid: str) -> NodeCluster:
        """Terminate all the nodes of a cluster and the cluster itself.

        This is not reversible.

        Returns:
            The node cluster record in its terminating/terminated state.
        """
        data = self._http.delete(self._path(uuid))
        if data is None:
            return self.get(uuid)
        return self._parse(NodeCluster, data)


class AsyncNodeClusters(_NodeClusterRequests, AsyncResource):
    """Async node clusters resource."""

    async def list(self, page: int | None = None) -> Page[NodeCluster]:
        """List node clusters."""
        return await self._list(NodeCluster, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[NodeCluster]:
        """Iterate over all node clusters."""
        return self._iterate(NodeCluster, start_page)

    async def get(self, uuid: str) -> NodeCluster:
        """Get a specific node cluster."""
        return await self._retrieve(NodeCluster, uuid)

    async def create(
        self,
        name: str | None = None,
        region: Region | str | None = None,
        node_type: NodeType | str | None = None,
        *,
        target_num_nodes: int = 1,
        tags: TagsInput | None = None,
        disk: int | None = None,
        provider_options: dict[str, Any] | None = None,
    ) -> NodeCluster:
        """Create a new node cluster."""
        payload = self._create_payload(
            name, region, node_type, target_num_nodes, tags, disk, provider_options
        )
        data = await self._http.post(self._path(), json=payload)
        return self._parse(NodeCluster, data)

    async def deploy(self, uuid: str) -> NodeCluster:
        """Deploy a node cluster."""
        data = await self._http.post(self._path(uuid, "deploy"))
        return self._parse(NodeCluster, data)

    async def update(
        self,
        cluster: NodeCluster | str,
        *,
        name: str | None = None,
        target_num_nodes: int | None = None,
        tags: TagsInput | None = None,
        node_type: NodeType | str | None = None,
        region: Region | str | None = None,
    ) -> NodeCluster:
        """Update a node cluster."""
        uuid, payload = self._update_payload(
            cluster, name, target_num_nodes, tags, node_type, region
        )
        data = await self._http.patch(self._path(uuid), json=payload)
        return self._parse(NodeCluster, data)

    async def upgrade_docker(self, uuid: str) -> NodeCluster:
        """Upgrade the Docker daemon on every node of the cluster."""
        data = await self._http.post(self._path(uuid, "docker-upgrade"))
        return self._parse(NodeCluster, data)

    async def terminate(self, uuid: str) -> NodeCluster:
        """Terminate a node cluster. Not reversible."""
        data = await self._http.delete(self._path(uuid))
        if data is None:
            return await self.get(uuid)
        return self._parse(NodeCluster, data)
