"""AI assistant endpoints. One request per call; no streaming, no retry."""
from __future__ import annotations

from typing import Any, Dict, Mapping, Union

from healthsaas.integrations.base import ResourceAPI, request_body
from healthsaas.models.domain import AIStatus, ApiResponse, HealthRecommendationRequest


class AIAssistantAPI(ResourceAPI):

    def get_recommendation(
        self, context: Union[HealthRecommendationRequest, Mapping[str, Any]]
    ) -> ApiResponse[Dict[str, Any]]:
        """Ask for a recommendation; the payload shape is defined by the provider."""
        return self._client.request(
            "/ai/health-recommendation",
            method="POST",
            json=request_body(HealthRecommendationRequest, context),
            data_model=Dict[str, Any],
        )

    def get_status(self) -> ApiResponse[AIStatus]:
        return self._client.request("/ai/status", data_model=AIStatus)
