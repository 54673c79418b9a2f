"""Tests for HTTP client error mapping and retries."""

from __future__ import annotations

from unittest.mock import patch

import httpx
import pytest
import respx

from tutum._http import HttpClient
from tutum.auth import APIKeyAuth, TokenAuth
from tutum.exceptions import (
    APIError,
    AuthenticationError,
    ConflictError,
    ConnectionError,
    InvalidResponseError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
    RequestUnsuccessfulError,
    ServerError,
    TimeoutError,
    ValidationError,
)

URL = "https://api.example.com/api/v1/node/"


class TestHttpClientAuth:
    """Test auth header injection."""

    @respx.mock
    def test_injects_bearer_token(self) -> None:
        """Token auth should send a Bearer header."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, json={"objects": []}))

        client = HttpClient(base_url="https://api.example.com", auth=TokenAuth(token="abc"))
        client.get("/api/v1/node/")

        request = route.calls.last.request
        assert request.headers["Authorization"] == "Bearer abc"

    @respx.mock
    def test_injects_api_key(self) -> None:
        """ApiKey auth should send username and key."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, json={"objects": []}))

        auth = APIKeyAuth(username="alice", api_key="0123abcd")
        client = HttpClient(base_url="https://api.example.com", auth=auth)
        client.get("/api/v1/node/")

        request = route.calls.last.request
        assert request.headers["Authorization"] == "ApiKey alice:0123abcd"

    @respx.mock
    def test_default_headers(self) -> None:
        """Requests should carry JSON and user agent headers."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, json={}))

        client = HttpClient(base_url="https://api.example.com")
        client.get("/api/v1/node/")

        request = route.calls.last.request
        assert request.headers["Accept"] == "application/json"
        assert request.headers["User-Agent"].startswith("tutum-sdk-python/")
        assert "Authorization" not in request.headers

    @respx.mock
    def test_none_params_are_dropped(self, http: HttpClient) -> None:
        """None query values should not be sent."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, json={}))

        http.get("/api/v1/node/", params={"page": None})

        assert route.calls.last.request.url.query == b""


class TestResponseHandling:
    """Test status code to exception mapping."""

    @respx.mock
    def test_no_content_returns_none(self, http: HttpClient) -> None:
        respx.delete(URL).mock(return_value=httpx.Response(204))

        assert http.delete("/api/v1/node/") is None

    @respx.mock
    def test_invalid_json_is_transport_error(self, http: HttpClient) -> None:
        """A 2xx body that is not JSON cannot be interpreted."""
        respx.get(URL).mock(return_value=httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(InvalidResponseError):
            http.get("/api/v1/node/")

    @pytest.mark.parametrize(
        ("status", "exc_type"),
        [
            (400, ValidationError),
            (401, AuthenticationError),
            (403, PermissionDeniedError),
            (404, NotFoundError),
            (405, ConflictError),
            (409, ConflictError),
            (422, ValidationError),
            (418, APIError),
        ],
    )
    @respx.mock
    def test_client_errors_are_domain_errors(
        self, http: HttpClient, status: int, exc_type: type[APIError]
    ) -> None:
        """4xx responses map to APIError subclasses with the server message."""
        respx.get(URL).mock(
            return_value=httpx.Response(status, json={"error": "Something is off"})
        )

        with pytest.raises(exc_type) as exc_info:
            http.get("/api/v1/node/")

        assert isinstance(exc_info.value, APIError)
        assert not isinstance(exc_info.value, RequestUnsuccessfulError)
        assert exc_info.value.status_code == status
        assert exc_info.value.message == "Something is off"

    @respx.mock
    def test_validation_error_keeps_field_errors(self, http: HttpClient) -> None:
        respx.post(URL).mock(
            return_value=httpx.Response(
                400, json={"nodecluster": {"name": ["This field is required."]}}
            )
        )

        with pytest.raises(ValidationError) as exc_info:
            http.post("/api/v1/node/", json={})

        assert exc_info.value.errors == {"nodecluster": {"name": ["This field is required."]}}
        assert exc_info.value.message == "HTTP 400: Bad Request"

    @respx.mock
    def test_rate_limit_retry_after(self, http: HttpClient) -> None:
        route = respx.get(URL).mock(
            return_value=httpx.Response(
                429, json={"detail": "Slow down"}, headers={"Retry-After": "30"}
            )
        )

        with pytest.raises(RateLimitError) as exc_info:
            http.get("/api/v1/node/")

        assert exc_info.value.retry_after == 30
        assert exc_info.value.message == "Slow down"
        assert route.call_count == 1

    @respx.mock
    def test_plain_text_error_message(self, http: HttpClient) -> None:
        respx.get(URL).mock(return_value=httpx.Response(404, text="Not found"))

        with pytest.raises(NotFoundError) as exc_info:
            http.get("/api/v1/node/")

        assert exc_info.value.message == "HTTP 404: Not Found"

    @respx.mock
    def test_redirect_is_not_a_domain_error(self, http: HttpClient) -> None:
        """Redirects are not followed and cannot be interpreted."""
        respx.get(URL).mock(
            return_value=httpx.Response(302, headers={"Location": "https://elsewhere.example.com/"})
        )

        with pytest.raises(InvalidResponseError) as exc_info:
            http.get("/api/v1/node/")

        assert not isinstance(exc_info.value, APIError)
        assert "302" in exc_info.value.message


class TestRetries:
    """Test the retry policy."""

    @respx.mock
    def test_get_retried_on_server_error(self, http: HttpClient) -> None:
        """Idempotent requests are retried after a 5xx."""
        route = respx.get(URL).mock(
            side_effect=[
                httpx.Response(503, json={"error": "Unavailable"}),
                httpx.Response(200, json={"objects": []}),
            ]
        )

        with patch("tutum._http.time.sleep") as sleep:
            result = http.get("/api/v1/node/")

        assert result == {"objects": []}
        assert route.call_count == 2
        sleep.assert_called_once()

    @respx.mock
    def test_get_gives_up_after_max_retries(self, http: HttpClient) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(500, json={"error": "Boom"}))

        with patch("tutum._http.time.sleep"):
            with pytest.raises(ServerError) as exc_info:
                http.get("/api/v1/node/")

        assert route.call_count == 3
        assert exc_info.value.status_code == 500
        assert isinstance(exc_info.value, RequestUnsuccessfulError)

    @respx.mock
    def test_post_not_retried(self, http: HttpClient) -> None:
        """Mutating requests are sent once even on a 5xx."""
        route = respx.post(URL).mock(return_value=httpx.Response(502))

        with patch("tutum._http.time.sleep") as sleep:
            with pytest.raises(ServerError):
                http.post("/api/v1/node/")

        assert route.call_count == 1
        sleep.assert_not_called()

    @respx.mock
    def test_domain_errors_not_retried(self, http: HttpClient) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(404, json={"error": "Nope"}))

        with pytest.raises(NotFoundError):
            http.get("/api/v1/node/")

        assert route.call_count == 1

    @respx.mock
    def test_timeout(self, http: HttpClient) -> None:
        route = respx.get(URL).mock(side_effect=httpx.ReadTimeout)

        with patch("tutum._http.time.sleep"):
            with pytest.raises(TimeoutError):
                http.get("/api/v1/node/")

        assert route.call_count == 3

    @respx.mock
    def test_connection_error(self, http: HttpClient) -> None:
        respx.delete(URL).mock(side_effect=httpx.ConnectError)

        with pytest.raises(ConnectionError) as exc_info:
            http.delete("/api/v1/node/")

        assert isinstance(exc_info.value, RequestUnsuccessfulError)

    @respx.mock
    def test_negative_max_retries_sends_once(self) -> None:
        """A negative retry budget still makes exactly one attempt."""
        route = respx.get(URL).mock(return_value=httpx.Response(200, json={"objects": []}))

        client = HttpClient(base_url="https://api.example.com", max_retries=-1)

        assert client.get("/api/v1/node/") == {"objects": []}
        assert route.call_count == 1

    @respx.mock
    def test_negative_max_retries_surfaces_failure(self) -> None:
        route = respx.get(URL).mock(return_value=httpx.Response(503))

        client = HttpClient(base_url="https://api.example.com", max_retries=-1)
        with patch("tutum._http.time.sleep") as sleep:
            with pytest.raises(ServerError):
                client.get("/api/v1/node/")

        assert route.call_count == 1
        sleep.assert_not_called()
