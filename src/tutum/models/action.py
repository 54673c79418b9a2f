"""Action models."""

from __future__ import annotations

from enum import Enum

from tutum.models.common import Timestamp, TutumModel


class ActionState(str, Enum):
    """Action state."""

    PENDING = "Pending"
    IN_PROGRESS = "In progress"
    CANCELING = "Canceling"
    SUCCESS = "Success"
    FAILED = "Failed"
    CANCELED = "Canceled"


class Action(TutumModel):
    """Audit record of an operation performed against the API."""

    uuid: str
    resource_uri: str | None = None
    type: str | None = None
    action: str | None = None
    method: str | None = None
    path: str | None = None
    user: str | None = None
    user_agent: str | None = None
    start_date: Timestamp = None
    end_date: Timestamp = None
    state: ActionState | str | None = None
    ip: str | None = None
    location: str | None = None
    body: str | None = None
    logs: str | None = None
    is_user_action: bool = False
    can_be_canceled: bool = False
    can_be_retried: bool = False
