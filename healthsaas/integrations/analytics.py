"""Read-only dashboard endpoints."""
from __future__ import annotations

from healthsaas.integrations.base import ResourceAPI
from healthsaas.models.domain import ApiResponse, DashboardStats, RecentActivity


class AnalyticsAPI(ResourceAPI):

    def get_dashboard_stats(self) -> ApiResponse[DashboardStats]:
        return self._client.request("/analytics/dashboard", data_model=DashboardStats)

    def get_recent_activity(self, limit: int = 5) -> ApiResponse[RecentActivity]:
        return self._client.request(
            "/analytics/recent-activity",
            params={"limit": limit},
            data_model=RecentActivity,
        )
