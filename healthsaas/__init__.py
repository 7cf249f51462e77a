"""
HealthSaaS client layer

Typed access to the community-health backend API plus the locally persisted
staff session.
"""

from .errors import (
    ApiConnectionError,
    ApiError,
    ApiHttpError,
    InvalidRequestError,
    MalformedResponseError,
)
from .integrations.api_client import ApiClient, get_api_client
from .storage.session_store import SessionStore, get_session_store

__all__ = [
    "ApiClient",
    "get_api_client",
    "SessionStore",
    "get_session_store",
    "ApiError",
    "ApiHttpError",
    "ApiConnectionError",
    "MalformedResponseError",
    "InvalidRequestError",
]
