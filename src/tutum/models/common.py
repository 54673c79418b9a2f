"""Common models shared across resources."""

from __future__ import annotations

from datetime import datetime
from email.utils import parsedate_to_datetime
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

T = TypeVar("T")


def _parse_timestamp(value: Any) -> Any:
    """Accept RFC 2822 dates ("Thu, 16 Oct 2014 11:24:58 +0000") besides ISO 8601."""
    if isinstance(value, str) and value and not value[0].isdigit():
        try:
            return parsedate_to_datetime(value)
        except (TypeError, ValueError):
            return value
    return value


Timestamp = Annotated[datetime | None, BeforeValidator(_parse_timestamp)]


class TutumModel(BaseModel):
    """Base model for all Tutum models.

    Unknown keys sent by the server are kept so newer API fields survive a
    round trip through the SDK.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )


class Tag(TutumModel):
    """A tag attached to a node cluster or node."""

    name: str


class ListMeta(TutumModel):
    """Pagination metadata returned with every list."""

    limit: int | None = None
    offset: int = 0
    total_count: int | None = None
    next: str | None = None
    previous: str | None = None


class Page(TutumModel, Generic[T]):
    """One page of a paginated collection."""

    meta: ListMeta = Field(default_factory=ListMeta)
    objects: list[T] = Field(default_factory=list)

    @property
    def has_next(self) -> bool:
        """Whether the server reports a following page."""
        return self.meta.next is not None


class CatalogMixin(TutumModel):
    """Fields shared by provider, region and node type catalog entries."""

    name: str
    label: str | None = None
    available: bool = True
    resource_uri: str | None = None
