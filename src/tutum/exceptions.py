"""Tutum SDK exceptions.

All exceptions inherit from TutumError for easy catching. Below it there are
two families:

- APIError: the service understood the request and rejected it
  (bad input, conflicting state, missing resource). Never retried.
- RequestUnsuccessfulError: the request could not be completed or the
  response could not be interpreted. Safe to retry at the caller's discretion.
"""

from __future__ import annotations

from typing import Any


class TutumError(Exception):
    """Base exception for all Tutum SDK errors."""

    def __init__(self, message: str, *, response: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.response = response

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class APIError(TutumError):
    """The API rejected the request.

    The message is the one returned by the server.
    """

    def __init__(
        self, message: str, *, status_code: int | None = None, response: Any = None
    ) -> None:
        super().__init__(message, response=response)
        self.status_code = status_code


class ValidationError(APIError):
    """Request payload or parameters were rejected.

    Check errors for per-field details when the server provides them.
    """

    def __init__(
        self,
        message: str,
        *,
        errors: dict[str, Any] | list[Any] | None = None,
        status_code: int | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.errors = errors or {}


class AuthenticationError(APIError):
    """Invalid or missing credentials.

    Check TUTUM_TOKEN, or TUTUM_USER and TUTUM_APIKEY.
    """


class PermissionDeniedError(APIError):
    """Credentials are valid but not allowed to perform the operation."""


class NotFoundError(APIError):
    """Resource not found.

    The requested action, provider, region, node type, node cluster or node
    does not exist.
    """


class ConflictError(APIError):
    """The resource is in a state that does not allow the operation.

    Raised e.g. when deploying a terminated node or terminating a node that
    still runs containers.
    """


class RateLimitError(APIError):
    """Rate limit exceeded.

    Check retry_after for when to retry.
    """

    def __init__(
        self,
        message: str,
        *,
        retry_after: int | None = None,
        status_code: int | None = 429,
        response: Any = None,
    ) -> None:
        super().__init__(message, status_code=status_code, response=response)
        self.retry_after = retry_after


class RequestUnsuccessfulError(TutumError):
    """The request could not be completed."""


class ConnectionError(RequestUnsuccessfulError):
    """Failed to connect to the Tutum API.

    Check network connectivity and api_url configuration.
    """


class TimeoutError(RequestUnsuccessfulError):
    """Request timed out.

    Consider increasing the timeout.
    """


class ServerError(RequestUnsuccessfulError):
    """The API answered with a 5xx status."""

    def __init__(
        self, message: str, *, status_code: int | None = None, response: Any = None
    ) -> None:
        super().__init__(message, response=response)
        self.status_code = status_code


class InvalidResponseError(RequestUnsuccessfulError):
    """The response body could not be decoded into the expected shape."""
