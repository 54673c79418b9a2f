"""Pydantic models for Tutum SDK."""

from tutum.models.action import Action, ActionState
from tutum.models.common import ListMeta, Page, Tag
from tutum.models.node import Node, NodeState
from tutum.models.node_cluster import NodeCluster, NodeClusterState
from tutum.models.provider import NodeType, Provider, Region

__all__ = [
    # Common
    "ListMeta",
    "Page",
    "Tag",
    # Action
    "Action",
    "ActionState",
    # Catalog
    "Provider",
    "Region",
    "NodeType",
    # Node cluster
    "NodeCluster",
    "NodeClusterState",
    # Node
    "Node",
    "NodeState",
]
