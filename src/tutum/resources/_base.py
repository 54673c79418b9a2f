"""Base resource classes and helpers shared by all resources."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeVar

import pydantic

from tutum._config import DEFAULT_API_VERSION
from tutum.exceptions import InvalidResponseError, ValidationError
from tutum.models.common import Page, Tag, TutumModel

if TYPE_CHECKING:
    from tutum._http import AsyncHttpClient, HttpClient

M = TypeVar("M", bound=TutumModel)

TagsInput = Iterable[str | Tag | dict[str, Any]]


def resource_uri(api_version: str, resource: str, *parts: str) -> str:
    """Build the URI of a collection or record.

    >>> resource_uri("v1", "region", "digitalocean", "lon1")
    '/api/v1/region/digitalocean/lon1/'

    Raises:
        ValidationError: If one of the parts is blank.
    """
    segments = [resource]
    for part in parts:
        text = str(part).strip().strip("/")
        if not text:
            raise ValidationError(
                f"A {resource} identifier cannot be blank", errors={resource: ["Blank identifier"]}
            )
        segments.append(text)
    return f"/api/{api_version}/" + "".join(f"{s}/" for s in segments)


def tags_payload(tags: TagsInput) -> list[dict[str, Any]]:
    """Normalize tags into the wire format, dropping duplicate names."""
    seen: set[str] = set()
    payload = []
    for tag in tags:
        if isinstance(tag, Tag):
            name = tag.name
        elif isinstance(tag, dict):
            name = tag["name"]
        else:
            name = str(tag)
        if name in seen:
            continue
        seen.add(name)
        payload.append({"name": name})
    return payload


class _Resource:
    """Path building and payload decoding common to sync and async resources."""

    _resource: str = ""

    def __init__(self, api_version: str = DEFAULT_API_VERSION) -> None:
        self._api_version = api_version

    def _path(self, *parts: str) -> str:
        return resource_uri(self._api_version, self._resource, *parts)

    def _reference(self, value: Any, resource: str) -> str | None:
        """Turn a record, a "provider/name" slug or a URI into a resource URI."""
        if value is None:
            return None
        if isinstance(value, TutumModel):
            uri = getattr(value, "resource_uri", None)
            if uri:
                return uri
            provider = getattr(value, "provider", None)
            name = getattr(value, "name", None)
            if provider and name:
                provider_name = provider.rstrip("/").rsplit("/", 1)[-1]
                return resource_uri(self._api_version, resource, provider_name, name)
            raise ValidationError(f"Cannot build a {resource} reference from {value!r}")

        text = str(value).strip()
        if not text:
            return None
        if text.startswith("/api/"):
            return text if text.endswith("/") else f"{text}/"
        return resource_uri(self._api_version, resource, *text.strip("/").split("/"))

    @staticmethod
    def _parse(model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except pydantic.ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected {model.__name__} payload: {e.error_count()} validation error(s)"
            ) from e

    @staticmethod
    def _parse_page(model: type[M], data: Any) -> Page[M]:
        try:
            return Page[model].model_validate(data)  # type: ignore[valid-type]
        except pydantic.ValidationError as e:
            raise InvalidResponseError(
                f"Unexpected {model.__name__} list payload: {e.error_count()} validation error(s)"
            ) from e

    @staticmethod
    def _page_params(page: int | None) -> dict[str, Any]:
        return {"page": page}


class SyncResource(_Resource):
    """Base class for synchronous API resources."""

    def __init__(self, http: HttpClient, api_version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(api_version)
        self._http = http

    def _list(self, model: type[M], page: int | None = None) -> Page[M]:
        data = self._http.get(self._path(), params=self._page_params(page))
        return self._parse_page(model, data)

    def _iterate(self, model: type[M], start_page: int = 1) -> Iterator[M]:
        page_no = start_page
        while True:
            page = self._list(model, page_no)
            yield from page.objects
            if not page.objects or not page.has_next:
                return
            page_no += 1

    def _retrieve(self, model: type[M], *parts: str) -> M:
        data = self._http.get(self._path(*parts))
        return self._parse(model, data)


class AsyncResource(_Resource):
    """Base class for asynchronous API resources."""

    def __init__(self, http: AsyncHttpClient, api_version: str = DEFAULT_API_VERSION) -> None:
        super().__init__(api_version)
        self._http = http

    async def _list(self, model: type[M], page: int | None = None) -> Page[M]:
        data = await self._http.get(self._path(), params=self._page_params(page))
        return self._parse_page(model, data)

    async def _iterate(self, model: type[M], start_page: int = 1) -> AsyncIterator[M]:
        page_no = start_page
        while True:
            page = await self._list(model, page_no)
            for item in page.objects:
                yield item
            if not page.objects or not page.has_next:
                return
            page_no += 1

    async def _retrieve(self, model: type[M], *parts: str) -> M:
        data = await self._http.get(self._path(*parts))
        return self._parse(model, data)
