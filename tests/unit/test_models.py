"""Tests for response models and their decoding."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import httpx
import pytest
import respx

from tutum.client import TutumClient
from tutum.exceptions import InvalidResponseError, RequestUnsuccessfulError, ValidationError
from tutum.models import Node, NodeCluster, NodeClusterState, Page, Tag
from tutum.resources._base import resource_uri, tags_payload

API = "https://api.example.com/api/v1"


def test_rfc2822_timestamps(sample_node: dict[str, Any]) -> None:
    node = Node.model_validate(sample_node)

    assert node.deployed_datetime == datetime(2014, 10, 16, 11, 26, 3, tzinfo=timezone.utc)
    assert node.destroyed_datetime is None


def test_iso_timestamps_accepted(sample_node: dict[str, Any]) -> None:
    node = Node.model_validate({**sample_node, "last_seen": "2014-10-16T12:00:00Z"})

    assert node.last_seen == datetime(2014, 10, 16, 12, 0, tzinfo=timezone.utc)


def test_unknown_state_kept(sample_node_cluster: dict[str, Any]) -> None:
    """States added by the service later still decode."""
    cluster = NodeCluster.model_validate({**sample_node_cluster, "state": "Hibernating"})

    assert cluster.state == "Hibernating"
    assert not cluster.is_terminated


def test_partly_deployed_state(sample_node_cluster: dict[str, Any]) -> None:
    cluster = NodeCluster.model_validate({**sample_node_cluster, "state": "Partly deployed"})

    assert cluster.state == NodeClusterState.PARTLY_DEPLOYED


def test_extra_fields_preserved(sample_node: dict[str, Any]) -> None:
    node = Node.model_validate({**sample_node, "nickname": "web-1"})

    assert node.model_extra == {"nickname": "web-1"}


def test_page_without_meta() -> None:
    page = Page[Tag].model_validate({"objects": [{"name": "web"}]})

    assert page.objects == [Tag(name="web")]
    assert not page.has_next


@respx.mock
def test_invalid_record_is_transport_error(client: TutumClient) -> None:
    """A 2xx body that does not describe a node cannot be interpreted."""
    respx.get(f"{API}/node/abc/").mock(return_value=httpx.Response(200, json={"state": 3}))

    with pytest.raises(InvalidResponseError) as exc_info:
        client.nodes.get("abc")

    assert isinstance(exc_info.value, RequestUnsuccessfulError)


@respx.mock
def test_invalid_page_is_transport_error(client: TutumClient) -> None:
    respx.get(f"{API}/node/").mock(
        return_value=httpx.Response(200, json={"objects": "not a list"})
    )

    with pytest.raises(InvalidResponseError):
        client.nodes.list()


def test_resource_uri() -> None:
    assert resource_uri("v1", "nodecluster") == "/api/v1/nodecluster/"
    assert resource_uri("v1", "node", "abc", "deploy") == "/api/v1/node/abc/deploy/"
    assert resource_uri("v2", "region", "digitalocean", "lon1") == "/api/v2/region/digitalocean/lon1/"


@pytest.mark.parametrize("parts", [("",), (" ",), ("digitalocean", ""), ("/",)])
def test_resource_uri_rejects_blank_parts(parts: tuple[str, ...]) -> None:
    with pytest.raises(ValidationError):
        resource_uri("v1", "region", *parts)


def test_tags_payload_accepts_mixed_input() -> None:
    tags = ["web", Tag(name="db"), {"name": "web"}, {"name": "cache"}]

    assert tags_payload(tags) == [{"name": "web"}, {"name": "db"}, {"name": "cache"}]
