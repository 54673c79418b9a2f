"""Node cluster models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import Field

from tutum.models.common import Tag, Timestamp, TutumModel


class NodeClusterState(str, Enum):
    """Node cluster lifecycle state."""

    INIT = "Init"
    DEPLOYING = "Deploying"
    DEPLOYED = "Deployed"
    PARTLY_DEPLOYED = "Partly deployed"
    SCALING = "Scaling"
    UPGRADING = "Upgrading"
    EMPTY_CLUSTER = "Empty cluster"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"


class NodeCluster(TutumModel):
    """A named group of nodes of one node type in one region."""

    uuid: str
    resource_uri: str | None = None
    name: str
    state: NodeClusterState | str | None = None
    node_type: str | None = Field(None, description="Node type resource URI")
    region: str | None = Field(None, description="Region resource URI")
    nodes: list[str] = Field(default_factory=list, description="Node resource URIs")
    target_num_nodes: int = 1
    current_num_nodes: int = 0
    disk: int | None = None
    tags: list[Tag] = Field(default_factory=list)
    provider_options: dict[str, Any] | None = None
    deployed_datetime: Timestamp = None
    destroyed_datetime: Timestamp = None

    @property
    def is_terminated(self) -> bool:
        return self.state == NodeClusterState.TERMINATED
