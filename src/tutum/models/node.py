"""Node models."""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from tutum.models.common import Tag, Timestamp, TutumModel


class NodeState(str, Enum):
    """Node lifecycle state."""

    INIT = "Init"
    DEPLOYING = "Deploying"
    DEPLOYED = "Deployed"
    UNREACHABLE = "Unreachable"
    UPGRADING = "Upgrading"
    TERMINATING = "Terminating"
    TERMINATED = "Terminated"


class Node(TutumModel):
    """A single compute instance."""

    uuid: str
    resource_uri: str | None = None
    external_fqdn: str | None = None
    state: NodeState | str | None = None
    node_cluster: str | None = Field(None, description="Node cluster resource URI")
    node_type: str | None = Field(None, description="Node type resource URI")
    region: str | None = Field(None, description="Region resource URI")
    docker_version: str | None = None
    public_ip: str | None = None
    current_num_containers: int = 0
    cpu: int | None = None
    memory: int | None = None
    disk: int | None = None
    tags: list[Tag] = Field(default_factory=list)
    last_seen: Timestamp = None
    deployed_datetime: Timestamp = None
    destroyed_datetime: Timestamp = None

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]

    @property
    def is_terminated(self) -> bool:
        return self.state == NodeState.TERMINATED
