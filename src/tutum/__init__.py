"""
Tutum SDK - Python client for the Tutum infrastructure API.

Providers, regions, node types, node clusters and nodes, one method per endpoint.
"""

import logging

from tutum._version import __version__
from tutum.auth import APIKeyAuth, AuthProvider, HeaderAuth, TokenAuth
from tutum.client import AsyncTutumClient, TutumClient
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
    TutumError,
    ValidationError,
)
from tutum.models import (
    Action,
    ActionState,
    Node,
    NodeCluster,
    NodeClusterState,
    NodeState,
    NodeType,
    Page,
    Provider,
    Region,
    Tag,
)

logging.getLogger("tutum").addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Clients
    "TutumClient",
    "AsyncTutumClient",
    # Auth
    "AuthProvider",
    "TokenAuth",
    "APIKeyAuth",
    "HeaderAuth",
    # Models
    "Action",
    "ActionState",
    "Provider",
    "Region",
    "NodeType",
    "NodeCluster",
    "NodeClusterState",
    "Node",
    "NodeState",
    "Page",
    "Tag",
    # Exceptions
    "TutumError",
    "APIError",
    "ValidationError",
    "AuthenticationError",
    "PermissionDeniedError",
    "NotFoundError",
    "ConflictError",
    "RateLimitError",
    # Transport exceptions
    "RequestUnsuccessfulError",
    "ConnectionError",
    "TimeoutError",
    "ServerError",
    "InvalidResponseError",
]
