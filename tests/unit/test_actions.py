"""Tests for the actions resource."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

import httpx
import respx

from tutum.client import TutumClient
from tutum.models import ActionState

API = "https://api.example.com/api/v1"
ACTION_UUID = "6d5a1b4c-7c1e-4d2b-9f42-6b0b0d6a3c11"


class TestActions:
    """Test action operations."""

    @respx.mock
    def test_list(self, client: TutumClient, sample_action: dict[str, Any], page_of: Any) -> None:
        respx.get(f"{API}/action/").mock(
            return_value=httpx.Response(200, json=page_of([sample_action]))
        )

        page = client.actions.list()

        assert len(page.objects) == 1
        assert page.objects[0].action == "Node Cluster Deploy"

    @respx.mock
    def test_get(self, client: TutumClient, sample_action: dict[str, Any]) -> None:
        respx.get(f"{API}/action/{ACTION_UUID}/").mock(
            return_value=httpx.Response(200, json=sample_action)
        )

        action = client.actions.get(ACTION_UUID)

        assert action.uuid == ACTION_UUID
        assert action.state == ActionState.SUCCESS
        assert action.start_date is not None
        assert action.start_date.tzinfo is not None
        assert action.start_date.utcoffset() == timedelta(0)
        assert action.end_date > action.start_date
        assert action.is_user_action
