"""API resource modules."""

from tutum.resources.actions import Actions, AsyncActions
from tutum.resources.node_clusters import AsyncNodeClusters, NodeClusters
from tutum.resources.node_types import AsyncNodeTypes, NodeTypes
from tutum.resources.nodes import AsyncNodes, Nodes
from tutum.resources.providers import AsyncProviders, Providers
from tutum.resources.regions import AsyncRegions, Regions

__all__ = [
    # Audit trail
    "Actions",
    "AsyncActions",
    # Catalog
    "Providers",
    "AsyncProviders",
    "Regions",
    "AsyncRegions",
    "NodeTypes",
    "AsyncNodeTypes",
    # Infrastructure
    "NodeClusters",
    "AsyncNodeClusters",
    "Nodes",
    "AsyncNodes",
]
