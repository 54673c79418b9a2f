"""Tutum SDK Client.

Main entry point for interacting with the Tutum API.
"""

from __future__ import annotations

import os
from typing import Any

from tutum._config import TutumConfig
from tutum._http import AsyncHttpClient, HttpClient
from tutum._logging import setup_logging
from tutum.auth import APIKeyAuth, AuthProvider, HeaderAuth, TokenAuth
from tutum.resources.actions import Actions, AsyncActions
from tutum.resources.node_clusters import AsyncNodeClusters, NodeClusters
from tutum.resources.node_types import AsyncNodeTypes, NodeTypes
from tutum.resources.nodes import AsyncNodes, Nodes
from tutum.resources.providers import AsyncProviders, Providers
from tutum.resources.regions import AsyncRegions, Regions


def resolve_auth(
    token: str | None = None,
    username: str | None = None,
    api_key: str | None = None,
    auth: AuthProvider | None = None,
    config: TutumConfig | None = None,
) -> AuthProvider:
    """Resolve authentication provider from parameters, environment, and config.

    Priority order:
    1. Explicit auth provider
    2. Explicit token
    3. Explicit username/api_key
    4. TUTUM_TOKEN env var
    5. TUTUM_USER/TUTUM_APIKEY env vars
    6. TUTUM_AUTH env var (full Authorization header value)
    7. Config file (token, then [auth] user/apikey)

    Returns:
        Resolved AuthProvider instance.

    Raises:
        ValueError: If no authentication credentials are provided.
    """
    if auth is not None:
        return auth

    if token:
        return TokenAuth(token=token)

    if username and api_key:
        return APIKeyAuth(username=username, api_key=api_key)

    env_token = os.environ.get("TUTUM_TOKEN")
    if env_token:
        return TokenAuth(token=env_token)

    env_user = os.environ.get("TUTUM_USER")
    env_apikey = os.environ.get("TUTUM_APIKEY")
    if env_user and env_apikey:
        return APIKeyAuth(username=env_user, api_key=env_apikey)

    env_auth = os.environ.get("TUTUM_AUTH")
    if env_auth:
        return HeaderAuth(value=env_auth)

    if config:
        if config.token:
            return TokenAuth(token=config.token)
        if config.auth.user and config.auth.apikey:
            return APIKeyAuth(username=config.auth.user, api_key=config.auth.apikey)

    raise ValueError(
        "No authentication credentials provided. "
        "Provide one of: token, username/api_key, or auth provider. "
        "Or set environment variables: TUTUM_TOKEN, or TUTUM_USER/TUTUM_APIKEY."
    )


class TutumClient:
    """Synchronous client for the Tutum API.

    Example:
        ```python
        from tutum import TutumClient

        with TutumClient(username="alice", api_key="0123abcd") as client:
            for cluster in client.node_clusters.list().objects:
                print(cluster.name, cluster.state)

            region = client.regions.get("digitalocean", "lon1")
            node_type = client.node_types.get("digitalocean", "1gb")
            cluster = client.node_clusters.create("web", region, node_type)
            client.node_clusters.deploy(cluster.uuid)
        ```

    Environment variables:
        TUTUM_TOKEN: API token (Bearer auth)
        TUTUM_USER / TUTUM_APIKEY: username and API key (ApiKey auth)
        TUTUM_AUTH: full Authorization header value
        TUTUM_API_URL: Base URL (default: https://dashboard.tutum.co)
        TUTUM_API_VERSION: API version (default: v1)
        TUTUM_TIMEOUT: Request timeout in seconds (default: 60)
        TUTUM_MAX_RETRIES: Max retries of idempotent requests (default: 3)
        TUTUM_DEBUG: Log every request to stderr
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        username: str | None = None,
        api_key: str | None = None,
        auth: AuthProvider | None = None,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        verify_ssl: bool | None = None,
    ) -> None:
        """Initialize the Tutum client.

        Args:
            token: API token for Bearer auth.
            username: Account username for ApiKey auth (requires api_key).
            api_key: API key for ApiKey auth (requires username).
            auth: Explicit AuthProvider instance to use.
            base_url: API base URL. Falls back to TUTUM_API_URL env var.
            api_version: API version used in every path, e.g. "v1".
            timeout: Request timeout in seconds.
            max_retries: Maximum number of retries for idempotent requests.
            verify_ssl: Whether to verify SSL certificates.
        """
        config = TutumConfig.load()
        if config.debug:
            setup_logging(debug=True)

        self._base_url = base_url or config.base_url
        self._api_version = api_version or config.api_version
        self._timeout = timeout if timeout is not None else config.timeout
        self._max_retries = max_retries if max_retries is not None else config.max_retries
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl

        self._auth = resolve_auth(
            token=token,
            username=username,
            api_key=api_key,
            auth=auth,
            config=config,
        )

        self._http = HttpClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            max_retries=self._max_retries,
            verify_ssl=self._verify_ssl,
        )

        self.actions = Actions(self._http, self._api_version)
        self.providers = Providers(self._http, self._api_version)
        self.regions = Regions(self._http, self._api_version)
        self.node_types = NodeTypes(self._http, self._api_version)
        self.node_clusters = NodeClusters(self._http, self._api_version)
        self.nodes = Nodes(self._http, self._api_version)

    def close(self) -> None:
        """Close the client and release resources."""
        self._http.close()

    def __enter__(self) -> TutumClient:
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"TutumClient(base_url={self._base_url!r}, api_version={self._api_version!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_version(self) -> str:
        return self._api_version


class AsyncTutumClient:
    """Asynchronous client for the Tutum API.

    Example:
        ```python
        import asyncio
        from tutum import AsyncTutumClient

        async def main():
            async with AsyncTutumClient(token="your-token") as client:
                nodes = await client.nodes.list()
                async for action in client.actions.iterate():
                    print(action.action, action.state)

        asyncio.run(main())
        ```
    """

    def __init__(
        self,
        token: str | None = None,
        *,
        username: str | None = None,
        api_key: str | None = None,
        auth: AuthProvider | None = None,
        base_url: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        verify_ssl: bool | None = None,
    ) -> None:
        """Initialize the async Tutum client.

        Takes the same arguments as TutumClient.
        """
        config = TutumConfig.load()
        if config.debug:
            setup_logging(debug=True)

        self._base_url = base_url or config.base_url
        self._api_version = api_version or config.api_version
        self._timeout = timeout if timeout is not None else config.timeout
        self._max_retries = max_retries if max_retries is not None else config.max_retries
        self._verify_ssl = verify_ssl if verify_ssl is not None else config.verify_ssl

        self._auth = resolve_auth(
            token=token,
            username=username,
            api_key=api_key,
            auth=auth,
            config=config,
        )

        self._http = AsyncHttpClient(
            base_url=self._base_url,
            auth=self._auth,
            timeout=self._timeout,
            max_retries=self._max_retries,
            verify_ssl=self._verify_ssl,
        )

        self.actions = AsyncActions(self._http, self._api_version)
        self.providers = AsyncProviders(self._http, self._api_version)
        self.regions = AsyncRegions(self._http, self._api_version)
        self.node_types = AsyncNodeTypes(self._http, self._api_version)
        self.node_clusters = AsyncNodeClusters(self._http, self._api_version)
        self.nodes = AsyncNodes(self._http, self._api_version)

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._http.close()

    async def __aenter__(self) -> AsyncTutumClient:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return f"AsyncTutumClient(base_url={self._base_url!r}, api_version={self._api_version!r})"

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_version(self) -> str:
        return self._api_version
