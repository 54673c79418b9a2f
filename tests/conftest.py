"""Pytest configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import respx

from tutum._http import HttpClient
from tutum.auth import TokenAuth
from tutum.client import AsyncTutumClient, TutumClient

BASE_URL = "https://api.example.com"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep tests away from the real ~/.tutum/config.toml and TUTUM_* variables."""
    config_file = tmp_path / "config.toml"
    monkeypatch.setattr("tutum._config.CONFIG_FILE", config_file)
    for var in (
        "TUTUM_TOKEN",
        "TUTUM_USER",
        "TUTUM_APIKEY",
        "TUTUM_AUTH",
        "TUTUM_API_URL",
        "TUTUM_API_VERSION",
        "TUTUM_TIMEOUT",
        "TUTUM_MAX_RETRIES",
        "TUTUM_DEBUG",
        "TUTUM_VERIFY_SSL",
    ):
        monkeypatch.delenv(var, raising=False)
    return config_file


@pytest.fixture
def token() -> str:
    """Test API token."""
    return "test-token-12345"


@pytest.fixture
def base_url() -> str:
    """Test API base URL."""
    return BASE_URL


@pytest.fixture
def mock_api(base_url: str) -> Generator[respx.MockRouter, None, None]:
    """Mock API router."""
    with respx.mock(base_url=base_url, assert_all_called=False) as router:
        yield router


@pytest.fixture
def http(token: str, base_url: str) -> Generator[HttpClient, None, None]:
    """Low level HTTP client without retry delays worth waiting for."""
    client = HttpClient(base_url=base_url, auth=TokenAuth(token=token), max_retries=2)
    yield client
    client.close()


@pytest.fixture
def client(token: str, base_url: str) -> Generator[TutumClient, None, None]:
    """Create a test TutumClient."""
    c = TutumClient(token=token, base_url=base_url, max_retries=0)
    yield c
    c.close()


@pytest.fixture
def async_client(token: str, base_url: str) -> AsyncTutumClient:
    """Create a test AsyncTutumClient."""
    return AsyncTutumClient(token=token, base_url=base_url, max_retries=0)


def _page_of(objects: list[dict[str, Any]], *, next_page: str | None = None) -> dict[str, Any]:
    """Wrap records in the list envelope returned by the API."""
    return {
        "meta": {
            "limit": 25,
            "offset": 0,
            "total_count": len(objects),
            "next": next_page,
            "previous": None,
        },
        "objects": objects,
    }


@pytest.fixture
def page_of() -> Callable[..., dict[str, Any]]:
    """Factory for list envelopes."""
    return _page_of


# Sample response data
@pytest.fixture
def sample_action() -> dict[str, Any]:
    """Sample action response."""
    return {
        "uuid": "6d5a1b4c-7c1e-4d2b-9f42-6b0b0d6a3c11",
        "resource_uri": "/api/v1/action/6d5a1b4c-7c1e-4d2b-9f42-6b0b0d6a3c11/",
        "type": "Node Cluster",
        "action": "Node Cluster Deploy",
        "method": "POST",
        "path": "/api/v1/nodecluster/403e9a3c-1111-4a0b-8d8c-59c5f4c5d5a1/deploy/",
        "user": "alice",
        "user_agent": "tutum-sdk-python/0.3.0",
        "start_date": "Thu, 16 Oct 2014 11:24:58 +0000",
        "end_date": "Thu, 16 Oct 2014 11:26:03 +0000",
        "state": "Success",
        "ip": "10.0.0.1",
        "location": "London, United Kingdom",
        "body": "",
        "logs": "Provisioning node 1/1",
        "is_user_action": True,
        "can_be_canceled": False,
        "can_be_retried": False,
    }


@pytest.fixture
def sample_provider() -> dict[str, Any]:
    """Sample provider response."""
    return {
        "name": "digitalocean",
        "label": "Digital Ocean",
        "available": True,
        "regions": ["/api/v1/region/digitalocean/lon1/", "/api/v1/region/digitalocean/ams2/"],
        "resource_uri": "/api/v1/provider/digitalocean/",
    }


@pytest.fixture
def sample_region() -> dict[str, Any]:
    """Sample region response."""
    return {
        "name": "lon1",
        "label": "London 1",
        "available": True,
        "provider": "/api/v1/provider/digitalocean/",
        "node_types": ["/api/v1/nodetype/digitalocean/1gb/"],
        "resource_uri": "/api/v1/region/digitalocean/lon1/",
    }


@pytest.fixture
def sample_node_type() -> dict[str, Any]:
    """Sample node type response."""
    return {
        "name": "1gb",
        "label": "1GB",
        "available": True,
        "provider": "/api/v1/provider/digitalocean/",
        "regions": ["/api/v1/region/digitalocean/lon1/"],
        "resource_uri": "/api/v1/nodetype/digitalocean/1gb/",
    }


@pytest.fixture
def sample_node_cluster() -> dict[str, Any]:
    """Sample node cluster response."""
    return {
        "uuid": "403e9a3c-1111-4a0b-8d8c-59c5f4c5d5a1",
        "resource_uri": "/api/v1/nodecluster/403e9a3c-1111-4a0b-8d8c-59c5f4c5d5a1/",
        "name": "mycluster",
        "state": "Deployed",
        "node_type": "/api/v1/nodetype/digitalocean/1gb/",
        "region": "/api/v1/region/digitalocean/lon1/",
        "nodes": ["/api/v1/node/7eaf7fff-882c-4f3d-9a8f-a22317ac00ce/"],
        "target_num_nodes": 1,
        "current_num_nodes": 1,
        "disk": 30,
        "tags": [{"name": "web"}],
        "provider_options": None,
        "deployed_datetime": "Thu, 16 Oct 2014 11:26:03 +0000",
        "destroyed_datetime": None,
    }


@pytest.fixture
def sample_node() -> dict[str, Any]:
    """Sample node response."""
    return {
        "uuid": "7eaf7fff-882c-4f3d-9a8f-a22317ac00ce",
        "resource_uri": "/api/v1/node/7eaf7fff-882c-4f3d-9a8f-a22317ac00ce/",
        "external_fqdn": "7eaf7fff-alice.node.tutum.io",
        "state": "Deployed",
        "node_cluster": "/api/v1/nodecluster/403e9a3c-1111-4a0b-8d8c-59c5f4c5d5a1/",
        "node_type": "/api/v1/nodetype/digitalocean/1gb/",
        "region": "/api/v1/region/digitalocean/lon1/",
        "docker_version": "1.5.0",
        "public_ip": "178.62.0.10",
        "current_num_containers": 0,
        "cpu": 1,
        "memory": 1024,
        "disk": 30,
        "tags": [{"name": "web"}, {"name": "london"}],
        "last_seen": "Thu, 16 Oct 2014 12:00:00 +0000",
        "deployed_datetime": "Thu, 16 Oct 2014 11:26:03 +0000",
        "destroyed_datetime": None,
    }
