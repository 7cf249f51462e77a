"""Household registration endpoints."""
from __future__ import annotations

from typing import Any, Mapping, Union

from healthsaas.integrations.base import ResourceAPI, path_segment, request_body
from healthsaas.models.domain import (
    ApiResponse,
    HouseholdCreate,
    HouseholdCreated,
    HouseholdPage,
    HouseholdUpdate,
)


class HouseholdsAPI(ResourceAPI):

    def list(self, limit: int = 100, skip: int = 0) -> ApiResponse[HouseholdPage]:
        return self._client.request(
            "/households",
            params={"limit": limit, "skip": skip},
            data_model=HouseholdPage,
        )

    def create(self, fields: Union[HouseholdCreate, Mapping[str, Any]]) -> ApiResponse[HouseholdCreated]:
        return self._client.request(
            "/households",
            method="POST",
            json=request_body(HouseholdCreate, fields),
            data_model=HouseholdCreated,
        )

    def update(self, household_id: str, fields: Union[HouseholdUpdate, Mapping[str, Any]]) -> ApiResponse[Any]:
        return self._client.request(
            f"/households/{path_segment(household_id)}",
            method="PUT",
            json=request_body(HouseholdUpdate, fields),
        )

    def delete(self, household_id: str) -> ApiResponse[Any]:
        return self._client.request(f"/households/{path_segment(household_id)}", method="DELETE")
