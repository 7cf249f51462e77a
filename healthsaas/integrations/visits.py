"""Clinical visit endpoints."""
from __future__ import annotations

from typing import Any, Mapping, Union

from healthsaas.integrations.base import ResourceAPI, request_body
from healthsaas.models.domain import ApiResponse, VisitCreate, VisitCreated, VisitPage


class VisitsAPI(ResourceAPI):

    def list(self, limit: int = 100, skip: int = 0) -> ApiResponse[VisitPage]:
        return self._client.request(
            "/visits",
            params={"limit": limit, "skip": skip},
            data_model=VisitPage,
        )

    def create(self, fields: Union[VisitCreate, Mapping[str, Any]]) -> ApiResponse[VisitCreated]:
        """
        Log a visit.

        With ``use_ai`` set the backend also asks the assistant for a
        recommendation and returns it as ``data.ai_recommendation``, passed
        through untouched.
        """
        return self._client.request(
            "/visits",
            method="POST",
            json=request_body(VisitCreate, fields),
            data_model=VisitCreated,
        )
