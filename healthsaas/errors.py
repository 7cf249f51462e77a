"""Failure types raised by the HealthSaaS API client."""
from __future__ import annotations

from typing import Optional

GENERIC_FAILURE_MESSAGE = "Request failed"


class ApiError(Exception):
    """Base class for every failure surfaced by the client layer."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return self.message


class ApiHttpError(ApiError):
    """The backend answered with a non-success status code."""


class ApiConnectionError(ApiError):
    """The request never produced an HTTP response."""


class MalformedResponseError(ApiError):
    """A success status arrived with a body that is not a usable envelope."""


class InvalidRequestError(ApiError):
    """The argument record could not be turned into a request body; nothing was sent."""
