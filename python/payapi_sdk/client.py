"""
Location: python/payapi_sdk/client.py

Summary:
    Main PayApiClient class for payapi-sdk. Wires a configured HTTP
    backend to every resource client.

Usage:
    The primary entry point for using the SDK. Create a PayApiClient with
    an API key, then call the resource clients hanging off it.

Example:
    from payapi_sdk import PayApiClient
    from payapi_sdk.params import PersonListParams

    async with PayApiClient("sk_test_123") as client:
        endpoint = await client.webhook_endpoints.get("we_123")
        async for person in client.persons.list(PersonListParams(account="acct_123")):
            print(person.first_name)
"""

from typing import Optional

from .backend import Backend, HttpBackend
from .config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, ClientConfig
from .resources import PersonsResource, WebhookEndpointsResource


class PayApiClient:
    """
    Main payapi-sdk client.

    Attributes:
        config: Configuration used to build the default backend
        backend: Transport shared by all resources
        persons: Client for /accounts/{account}/persons
        webhook_endpoints: Client for /webhook_endpoints
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_version: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        config: Optional[ClientConfig] = None,
        backend: Optional[Backend] = None,
    ):
        """
        Initialize the PayApiClient.

        Args:
            api_key: Secret API key
            base_url: API root including the version prefix
            api_version: Optional pinned API version
            timeout: Request timeout in seconds (default 80)
            config: Complete configuration; takes precedence over the
                individual arguments above
            backend: Optional Backend to use instead of an HttpBackend
        """
        self.config = config or ClientConfig(
            api_key=api_key,
            base_url=base_url,
            api_version=api_version,
            timeout=timeout,
        )
        self.backend = backend or HttpBackend(self.config)

        self.persons = PersonsResource(self.backend)
        self.webhook_endpoints = WebhookEndpointsResource(self.backend)

    async def close(self) -> None:
        """
        Close the backend and release resources.

        Backends without a close() method are left alone.
        """
        close = getattr(self.backend, "close", None)
        if close is not None:
            await close()

    async def __aenter__(self) -> "PayApiClient":
        """Enter async context manager."""
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context manager and close resources."""
        await self.close()
