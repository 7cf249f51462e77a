"""
HealthSaaS API Client

Every backend call made by the console goes through ApiClient.request, which
builds the URL, sets the JSON headers, parses the response envelope and turns
every kind of failure into an ApiError.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Mapping, Optional, Type

import requests
from pydantic import ValidationError

from healthsaas.config.settings import get_settings
from healthsaas.errors import (
    GENERIC_FAILURE_MESSAGE,
    ApiConnectionError,
    ApiHttpError,
    MalformedResponseError,
)
from healthsaas.integrations.ai_assistant import AIAssistantAPI
from healthsaas.integrations.analytics import AnalyticsAPI
from healthsaas.integrations.auth import AuthAPI
from healthsaas.integrations.households import HouseholdsAPI
from healthsaas.integrations.patients import PatientsAPI
from healthsaas.integrations.visits import VisitsAPI
from healthsaas.models.domain import ApiResponse
from healthsaas.utils.logging import get_logger, log_with_context

logger = get_logger(__name__)

JSON_CONTENT_TYPE = "application/json"


def error_message(response: requests.Response) -> str:
    """Extract the human-readable message from a failed response."""
    try:
        body = response.json()
    except ValueError:
        return GENERIC_FAILURE_MESSAGE

    detail = body.get("detail") if isinstance(body, dict) else None
    if detail is None or detail == "":
        return f"HTTP error! status: {response.status_code}"
    if isinstance(detail, str):
        return detail
    return json.dumps(detail, default=str)


class ApiClient:
    """Client for the HealthSaaS backend, one attribute per resource."""

    def __init__(
        self,
        base_url: str,
        default_headers: Optional[Mapping[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._default_headers = dict(default_headers or {})
        self._timeout = timeout

        self.auth = AuthAPI(self)
        self.households = HouseholdsAPI(self)
        self.patients = PatientsAPI(self)
        self.visits = VisitsAPI(self)
        self.analytics = AnalyticsAPI(self)
        self.ai = AIAssistantAPI(self)

    @property
    def base_url(self) -> str:
        return self._base_url

    def build_headers(self, headers: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Merge default and caller headers; the JSON content type is always present."""
        merged = {**self._default_headers, **dict(headers or {})}
        for name in list(merged):
            if name.lower() == "content-type":
                del merged[name]
        merged["Content-Type"] = JSON_CONTENT_TYPE
        return merged

    def request(
        self,
        endpoint: str,
        *,
        method: str = "GET",
        params: Optional[Mapping[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Mapping[str, str]] = None,
        data_model: Optional[Type[Any]] = None,
    ) -> ApiResponse[Any]:
        """
        Issue one HTTP request and return the parsed response envelope.

        Args:
            endpoint: Path relative to the base URL, starting with "/"
            method: HTTP method
            params: Query parameters
            json: JSON-serializable request body
            headers: Extra headers; they cannot remove the JSON content type
            data_model: Type the envelope's ``data`` is validated against

        Returns:
            The ``{message, data}`` envelope

        Raises:
            ApiConnectionError: No HTTP response was received
            ApiHttpError: Non-success status; carries the server's detail
            MalformedResponseError: Success status with an unusable body
        """
        url = f"{self._base_url}{endpoint}"
        logger.info(f"{method} {url}")

        try:
            response = requests.request(
                method,
                url,
                params=params,
                json=json,
                headers=self.build_headers(headers),
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            log_with_context(
                logger, logging.ERROR, f"{method} {url} failed before a response arrived: {e}",
                context={"method": method, "url": url, "error": type(e).__name__},
            )
            raise ApiConnectionError(f"{GENERIC_FAILURE_MESSAGE}: {e}") from e

        status = response.status_code
        if not 200 <= status < 300:
            message = error_message(response)
            log_with_context(
                logger, logging.WARNING, f"{method} {url} returned HTTP {status}: {message}",
                context={"method": method, "url": url, "status": status},
            )
            raise ApiHttpError(message, status)

        try:
            body = response.json()
        except ValueError as e:
            log_with_context(
                logger, logging.ERROR, f"{method} {url} returned HTTP {status} with a non-JSON body",
                context={"method": method, "url": url, "status": status},
            )
            raise MalformedResponseError(f"Invalid JSON in response from {endpoint}: {e}", status) from e

        envelope_type = ApiResponse[data_model] if data_model is not None else ApiResponse[Any]
        try:
            return envelope_type.model_validate(body)
        except ValidationError as e:
            log_with_context(
                logger, logging.ERROR, f"{method} {url} returned an unexpected response shape",
                context={"method": method, "url": url, "status": status, "errors": e.error_count()},
            )
            raise MalformedResponseError(f"Unexpected response shape from {endpoint}: {e}", status) from e


# Global client instance
_api_client: Optional[ApiClient] = None


def get_api_client() -> ApiClient:
    """Get or create the client for the configured base URL."""
    global _api_client
    if _api_client is None:
        settings = get_settings()
        _api_client = ApiClient(settings.api.base_url, timeout=settings.api.request_timeout)
    return _api_client
