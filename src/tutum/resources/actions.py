"""Action resource operations."""

from __future__ import annotations

from collections.abc import AsyncIterator, Iterator

from tutum.models.action import Action
from tutum.models.common import Page
from tutum.resources._base import AsyncResource, SyncResource


class Actions(SyncResource):
    """Action operations.

    Actions are the audit trail of the account, listed in chronological order.
    """

    _resource = "action"

    def list(self, page: int | None = None) -> Page[Action]:
        """List actions.

        Args:
            page: Page number, server default when omitted.

        Returns:
            Page of actions
        """
        return self._list(Action, page)

    def iterate(self, start_page: int = 1) -> Iterator[Action]:
        """Iterate over all actions, fetching pages on demand."""
        return self._iterate(Action, start_page)

    def get(self, uuid: str) -> Action:
        """Get an action by UUID.

        Args:
            uuid: Action UUID

        Returns:
            Action
        """
        return self._retrieve(Action, uuid)


class AsyncActions(AsyncResource):
    """Async action operations."""

    _resource = "action"

    async def list(self, page: int | None = None) -> Page[Action]:
        """List actions."""
        return await self._list(Action, page)

    def iterate(self, start_page: int = 1) -> AsyncIterator[Action]:
        """Iterate over all actions."""
        return self._iterate(Action, start_page)

    async def get(self, uuid: str) -> Action:
        """Get an action by UUID."""
        return await self._retrieve(Action, uuid)
