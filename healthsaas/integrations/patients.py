"""Patient enrollment endpoints."""
from __future__ import annotations

from typing import Any, Mapping, Union

from healthsaas.integrations.base import ResourceAPI, path_segment, request_body
from healthsaas.models.domain import (
    ApiResponse,
    PatientCreate,
    PatientCreated,
    PatientPage,
    PatientUpdate,
)


class PatientsAPI(ResourceAPI):

    def list(self, limit: int = 100, skip: int = 0) -> ApiResponse[PatientPage]:
        return self._client.request(
            "/patients",
            params={"limit": limit, "skip": skip},
            data_model=PatientPage,
        )

    def create(self, fields: Union[PatientCreate, Mapping[str, Any]]) -> ApiResponse[PatientCreated]:
        """Enroll a patient; without a risk_level the server assigns its default."""
        return self._client.request(
            "/patients",
            method="POST",
            json=request_body(PatientCreate, fields),
            data_model=PatientCreated,
        )

    def update(self, patient_id: str, fields: Union[PatientUpdate, Mapping[str, Any]]) -> ApiResponse[Any]:
        return self._client.request(
            f"/patients/{path_segment(patient_id)}",
            method="PUT",
            json=request_body(PatientUpdate, fields),
        )

    def delete(self, patient_id: str) -> ApiResponse[Any]:
        return self._client.request(f"/patients/{path_segment(patient_id)}", method="DELETE")
