"""Provider catalog models: providers, regions and node types."""

from __future__ import annotations

from pydantic import Field

from tutum.models.common import CatalogMixin


class Provider(CatalogMixin):
    """A supported cloud provider."""

    regions: list[str] = Field(default_factory=list, description="Region resource URIs")


class Region(CatalogMixin):
    """A datacenter of a cloud provider."""

    provider: str | None = Field(None, description="Provider resource URI")
    node_types: list[str] = Field(default_factory=list, description="Node type resource URIs")


class NodeType(CatalogMixin):
    """A machine size offered by a cloud provider."""

    provider: str | None = Field(None, description="Provider resource URI")
    regions: list[str] = Field(default_factory=list, description="Region resource URIs")
