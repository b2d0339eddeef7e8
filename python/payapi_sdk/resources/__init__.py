"""
Location: python/payapi_sdk/resources/__init__.py

Summary:
    Per-resource API clients.
"""

from .base import BaseResource, format_url_path
from .persons import PersonsResource
from .webhook_endpoints import WebhookEndpointsResource

__all__ = [
    "BaseResource",
    "PersonsResource",
    "WebhookEndpointsResource",
    "format_url_path",
]
