"""
Location: python/payapi_sdk/resources/webhook_endpoints.py

Summary:
    Client for the /webhook_endpoints API: create, retrieve, update,
    delete and list registered webhook URLs.

Example:
    from payapi_sdk.params import WebhookEndpointParams

    endpoint = await client.webhook_endpoints.create(
        WebhookEndpointParams(
            url="https://example.com/hooks",
            enabled_events=["charge.succeeded"],
        )
    )
"""

from typing import Optional

from ..iterator import ListIterator
from ..params import ListParams, WebhookEndpointListParams, WebhookEndpointParams
from ..types import ListMeta, WebhookEndpoint, WebhookEndpointList
from .base import BaseResource, format_url_path


class WebhookEndpointsResource(BaseResource):
    """Resource for webhook endpoint operations."""

    async def create(self, params: Optional[WebhookEndpointParams] = None) -> WebhookEndpoint:
        """
        Create a new webhook endpoint.

        Args:
            params: Endpoint URL, enabled events and options

        Returns:
            The created endpoint, including its signing secret
        """
        return await self._call("POST", "/webhook_endpoints", params, WebhookEndpoint)

    async def get(
        self,
        id: str,
        params: Optional[WebhookEndpointParams] = None,
    ) -> WebhookEndpoint:
        """Retrieve a webhook endpoint by id."""
        path = format_url_path("/webhook_endpoints/{}", id)
        return await self._call("GET", path, params, WebhookEndpoint)

    async def update(
        self,
        id: str,
        params: Optional[WebhookEndpointParams] = None,
    ) -> WebhookEndpoint:
        """Update a webhook endpoint's properties."""
        path = format_url_path("/webhook_endpoints/{}", id)
        return await self._call("POST", path, params, WebhookEndpoint)

    async def delete(
        self,
        id: str,
        params: Optional[WebhookEndpointParams] = None,
    ) -> WebhookEndpoint:
        """
        Delete a webhook endpoint.

        Returns:
            The deleted endpoint reference, with ``deleted`` set
        """
        path = format_url_path("/webhook_endpoints/{}", id)
        return await self._call("DELETE", path, params, WebhookEndpoint)

    def list(
        self,
        params: Optional[WebhookEndpointListParams] = None,
    ) -> ListIterator[WebhookEndpoint]:
        """
        Iterate over all webhook endpoints.

        No request is made until iteration starts.
        """

        async def fetch_page(page_params: ListParams) -> tuple[list[WebhookEndpoint], ListMeta]:
            page = await self._call("GET", "/webhook_endpoints", page_params, WebhookEndpointList)
            return page.data, page

        return ListIterator(params or WebhookEndpointListParams(), fetch_page)
