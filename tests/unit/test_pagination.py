"""Tests for page based listing and iteration."""

from __future__ import annotations

from typing import Any

import httpx
import respx

from tutum.client import TutumClient

API = "https://api.example.com/api/v1"


def _node(n: int) -> dict[str, Any]:
    return {"uuid": f"node-{n}", "state": "Deployed", "tags": []}


def _paged(pages: dict[int, list[dict[str, Any]]], page_of: Any):
    """Serve each page number from pages; a missing number is an empty page."""
    last = max(pages)

    def handler(request: httpx.Request) -> httpx.Response:
        number = int(request.url.params.get("page", "1"))
        next_page = f"/api/v1/node/?page={number + 1}" if number < last else None
        return httpx.Response(200, json=page_of(pages.get(number, []), next_page=next_page))

    return handler


class TestPagination:
    @respx.mock
    def test_page_param_sent(self, client: TutumClient, page_of: Any) -> None:
        route = respx.get(f"{API}/node/").mock(
            return_value=httpx.Response(200, json=page_of([]))
        )

        client.nodes.list(page=3)

        assert route.calls.last.request.url.params["page"] == "3"

    @respx.mock
    def test_consecutive_pages_are_disjoint(self, client: TutumClient, page_of: Any) -> None:
        respx.get(f"{API}/node/").mock(
            side_effect=_paged({1: [_node(1), _node(2)], 2: [_node(3)]}, page_of)
        )

        first = client.nodes.list(page=1)
        second = client.nodes.list(page=2)

        assert first.has_next
        assert not second.has_next
        first_ids = {n.uuid for n in first.objects}
        second_ids = {n.uuid for n in second.objects}
        assert first_ids.isdisjoint(second_ids)

    @respx.mock
    def test_iterate_walks_all_pages(self, client: TutumClient, page_of: Any) -> None:
        route = respx.get(f"{API}/node/").mock(
            side_effect=_paged({1: [_node(1), _node(2)], 2: [_node(3)], 3: [_node(4)]}, page_of)
        )

        uuids = [node.uuid for node in client.nodes.iterate()]

        assert uuids == ["node-1", "node-2", "node-3", "node-4"]
        assert route.call_count == 3

    @respx.mock
    def test_iterate_from_later_page(self, client: TutumClient, page_of: Any) -> None:
        respx.get(f"{API}/node/").mock(
            side_effect=_paged({1: [_node(1)], 2: [_node(2)]}, page_of)
        )

        assert [node.uuid for node in client.nodes.iterate(start_page=2)] == ["node-2"]

    @respx.mock
    def test_iterate_stops_on_empty_page(self, client: TutumClient, page_of: Any) -> None:
        """An empty page ends iteration even if the server reports a next link."""
        route = respx.get(f"{API}/node/").mock(
            return_value=httpx.Response(200, json=page_of([], next_page="/api/v1/node/?page=2"))
        )

        assert list(client.nodes.iterate()) == []
        assert route.call_count == 1
