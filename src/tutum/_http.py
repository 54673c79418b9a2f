"""HTTP client infrastructure for Tutum SDK.

Handles:
- Authentication via AuthProvider
- Retries with exponential backoff for idempotent requests
- Error mapping into domain (APIError) and transport (RequestUnsuccessfulError) failures
"""

from __future__ import annotations

import contextlib
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx

from tutum._version import __version__
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

if TYPE_CHECKING:
    from tutum.auth import AuthProvider

logger = logging.getLogger("tutum.http")

DEFAULT_HEADERS = {
    "User-Agent": f"tutum-sdk-python/{__version__}",
    "Accept": "application/json",
    "Content-Type": "application/json",
}

# Only these are replayed after a transport failure.
IDEMPOTENT_METHODS = frozenset({"GET", "HEAD", "OPTIONS"})


class _BaseHttpClient:
    """Request bookkeeping and response mapping shared by both clients."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._auth = auth
        self._timeout = timeout
        self._max_retries = max_retries

    @property
    def base_url(self) -> str:
        return self._base_url

    def _get_auth_headers(self) -> dict[str, str]:
        """Get authentication headers from auth provider."""
        if self._auth is None:
            return {}
        return self._auth.get_headers()

    def _attempts(self, method: str) -> int:
        """Number of tries allowed for a request with this method."""
        if method.upper() in IDEMPOTENT_METHODS:
            return max(self._max_retries, 0) + 1
        return 1

    @staticmethod
    def _backoff(attempt: int) -> float:
        return 2**attempt * 0.1

    def _handle_response(self, response: httpx.Response) -> Any:
        """Handle HTTP response and map errors."""
        if response.status_code == 204 or not response.content:
            if response.is_success:
                return None
            data = None
        else:
            try:
                data = response.json()
            except ValueError as e:
                if response.is_success:
                    raise InvalidResponseError(
                        f"Response body is not valid JSON: {e}", response=response
                    ) from e
                data = None

        if response.is_success:
            return data

        status = response.status_code
        message = self._extract_error_message(data, response)

        if status >= 500:
            raise ServerError(f"Server error: {message}", status_code=status, response=response)

        # Redirects are not followed; the API never answers with one.
        if 300 <= status < 400:
            location = response.headers.get("Location", "-")
            raise InvalidResponseError(
                f"Unexpected redirect ({status}) to {location}", response=response
            )

        if status in (400, 422):
            errors = data if isinstance(data, (dict, list)) else None
            raise ValidationError(message, errors=errors, status_code=status, response=response)

        if status == 401:
            raise AuthenticationError(message, status_code=status, response=response)

        if status == 403:
            raise PermissionDeniedError(message, status_code=status, response=response)

        if status == 404:
            raise NotFoundError(message, status_code=status, response=response)

        if status in (405, 409):
            raise ConflictError(message, status_code=status, response=response)

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            retry_after_int: int | None = None
            if retry_after:
                with contextlib.suppress(ValueError):
                    retry_after_int = int(retry_after)
            raise RateLimitError(
                message,
                retry_after=retry_after_int,
                status_code=status,
                response=response,
            )

        raise APIError(message, status_code=status, response=response)

    def _extract_error_message(self, data: Any, response: httpx.Response) -> str:
        """Extract error message from response."""
        if isinstance(data, dict):
            for key in ("message", "error_message", "detail"):
                if key in data:
                    return str(data[key])
            if "error" in data:
                error = data["error"]
                if isinstance(error, str):
                    return error
                if isinstance(error, dict) and "message" in error:
                    return error["message"]
        elif isinstance(data, str) and data:
            return data

        return f"HTTP {response.status_code}: {response.reason_phrase}"


class HttpClient(_BaseHttpClient):
    """Synchronous HTTP client for Tutum API."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        verify_ssl: bool = True,
    ) -> None:
        super().__init__(base_url, auth=auth, timeout=timeout, max_retries=max_retries)

        self._client = httpx.Client(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> HttpClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Perform GET request."""
        return self._request("GET", path, params=params)

    def post(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform POST request."""
        return self._request("POST", path, json=json)

    def patch(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform PATCH request."""
        return self._request("PATCH", path, json=json)

    def delete(self, path: str) -> Any:
        """Perform DELETE request."""
        return self._request("DELETE", path)

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform HTTP request, retrying idempotent ones on transport failures."""
        attempts = self._attempts(method)
        last_exception: RequestUnsuccessfulError | None = None

        for attempt in range(attempts):
            if attempt:
                logger.warning(
                    "Retrying %s %s (attempt %d/%d): %s",
                    method,
                    path,
                    attempt + 1,
                    attempts,
                    last_exception,
                )
                time.sleep(self._backoff(attempt))

            try:
                response = self._client.request(
                    method,
                    path,
                    params=_filter_none(params) if params else None,
                    json=json,
                    headers=self._get_auth_headers(),
                )
                logger.debug("%s %s -> %s", method, path, response.status_code)
                return self._handle_response(response)

            except httpx.TimeoutException as e:
                last_exception = TimeoutError(f"Request timed out: {e}")

            except httpx.TransportError as e:
                last_exception = ConnectionError(f"Failed to connect: {e}")

            except ServerError as e:
                last_exception = e

        if last_exception:
            raise last_exception
        raise RequestUnsuccessfulError(f"{method} {path} was not attempted")


class AsyncHttpClient(_BaseHttpClient):
    """Asynchronous HTTP client for Tutum API."""

    def __init__(
        self,
        base_url: str,
        auth: AuthProvider | None = None,
        timeout: float = 60.0,
        max_retries: int = 3,
        verify_ssl: bool = True,
    ) -> None:
        super().__init__(base_url, auth=auth, timeout=timeout, max_retries=max_retries)

        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=DEFAULT_HEADERS.copy(),
            timeout=timeout,
            verify=verify_ssl,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> AsyncHttpClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def get(self, path: str, *, params: dict[str, Any] | None = None) -> Any:
        """Perform GET request."""
        return await self._request("GET", path, params=params)

    async def post(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform POST request."""
        return await self._request("POST", path, json=json)

    async def patch(self, path: str, *, json: dict[str, Any] | None = None) -> Any:
        """Perform PATCH request."""
        return await self._request("PATCH", path, json=json)

    async def delete(self, path: str) -> Any:
        """Perform DELETE request."""
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        """Perform HTTP request, retrying idempotent ones on transport failures."""
        import anyio

        attempts = self._attempts(method)
        last_exception: RequestUnsuccessfulError | None = None

        for attempt in range(attempts):
            if attempt:
                logger.warning(
                    "Retrying %s %s (attempt %d/%d): %s",
                    method,
                    path,
                    attempt + 1,
                    attempts,
                    last_exception,
                )
                await anyio.sleep(self._backoff(attempt))

            try:
                response = await self._client.request(
                    method,
                    path,
                    params=_filter_none(params) if params else None,
                    json=json,
                    headers=self._get_auth_headers(),
                )
                logger.debug("%s %s -> %s", method, path, response.status_code)
                return self._handle_response(response)

            except httpx.TimeoutException as e:
                last_exception = TimeoutError(f"Request timed out: {e}")

            except httpx.TransportError as e:
                last_exception = ConnectionError(f"Failed to connect: {e}")

            except ServerError as e:
                last_exception = e

        if last_exception:
            raise last_exception
        raise RequestUnsuccessfulError(f"{method} {path} was not attempted")


def _filter_none(params: dict[str, Any]) -> dict[str, Any]:
    """Remove None values from params dict."""
    return {k: v for k, v in params.items() if v is not None}
