"""
Backend API access for the HealthSaaS console.
"""

from .api_client import ApiClient, get_api_client

__all__ = [
    "ApiClient",
    "get_api_client",
]
