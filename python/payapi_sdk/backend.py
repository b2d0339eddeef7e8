"""
Location: python/payapi_sdk/backend.py

Summary:
    HTTP transport shared by every resource client. Turns a (method, path,
    params) call into an authenticated httpx request and returns the
    decoded JSON body, raising a PayApiError subclass on failure.

Usage:
    PayApiClient builds one HttpBackend and hands it to each resource.
    Anything implementing the Backend protocol can be substituted, which
    is how the resource tests run without a network.

Example:
    from payapi_sdk.backend import HttpBackend
    from payapi_sdk.config import ClientConfig

    async with HttpBackend(ClientConfig(api_key="sk_test_123")) as backend:
        data = await backend.call("GET", "/webhook_endpoints/we_123", None, None)
"""

import logging
from typing import Any, Optional, Protocol

import httpx

from .config import ClientConfig
from .errors import APIConnectionError, APIError, AuthenticationError, error_from_response
from .form import encode_query
from .params import Params

logger = logging.getLogger(__name__)

API_HEADERS = {
    "ACCOUNT": "Stripe-Account",
    "VERSION": "Stripe-Version",
    "IDEMPOTENCY_KEY": "Idempotency-Key",
    "REQUEST_ID": "Request-Id",
}

# Verbs whose parameters travel in the query string instead of the body
_QUERY_METHODS = ("GET", "DELETE")


class Backend(Protocol):
    """
    Protocol for the transport used by resource clients.

    Implementations issue one request per call and return the decoded JSON
    object. Failures are raised, never returned.
    """

    async def call(
        self,
        method: str,
        path: str,
        key: Optional[str],
        params: Optional[Params],
    ) -> dict[str, Any]:
        """
        Issue a request and return the decoded response body.

        Args:
            method: HTTP method ("GET", "POST" or "DELETE")
            path: Path relative to the API root, e.g. "/webhook_endpoints"
            key: API key overriding the configured one, or None
            params: Request parameters, or None

        Returns:
            Decoded JSON object
        """
        ...


class HttpBackend:
    """
    Backend implementation on top of httpx.AsyncClient.

    Attributes:
        config: Client configuration (API key, base URL, version, timeout)
    """

    def __init__(
        self,
        config: ClientConfig,
        http: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize the backend.

        Args:
            config: Client configuration
            http: Optional preconfigured httpx.AsyncClient
        """
        self.config = config
        self._http = http or httpx.AsyncClient(timeout=config.timeout)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> "HttpBackend":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def call(
        self,
        method: str,
        path: str,
        key: Optional[str],
        params: Optional[Params],
    ) -> dict[str, Any]:
        """
        Issue a request and return the decoded response body.

        GET and DELETE parameters are sent as a query string, everything
        else as a form-encoded body.

        Raises:
            AuthenticationError: If no API key is available
            APIConnectionError: If the request could not be sent
            APIError: If the API responded with an error or a non-JSON body
        """
        method = method.upper()
        api_key = key or self.config.api_key
        if not api_key:
            raise AuthenticationError(
                "No API key provided. Pass api_key to the client or set PAYAPI_API_KEY."
            )

        url = f"{self.config.base_url}{path}"
        headers = self._build_headers(api_key, params)
        encoded = encode_query(params)
        content = None

        if method in _QUERY_METHODS:
            if encoded:
                url = f"{url}?{encoded}"
        else:
            headers["Content-Type"] = "application/x-www-form-urlencoded"
            content = encoded

        logger.debug("Requesting %s %s", method, path)
        try:
            response = await self._http.request(
                method,
                url,
                content=content,
                headers=headers,
            )
        except httpx.TransportError as exc:
            raise APIConnectionError(
                f"Could not connect to {self.config.base_url}: {exc}"
            ) from exc

        return self._handle_response(response)

    def _build_headers(self, api_key: str, params: Optional[Params]) -> dict[str, str]:
        headers = {
            "Authorization": f"Bearer {api_key}",
            "User-Agent": self.config.user_agent,
            "Accept": "application/json",
        }
        if self.config.api_version:
            headers[API_HEADERS["VERSION"]] = self.config.api_version
        if params is not None:
            if params.idempotency_key:
                headers[API_HEADERS["IDEMPOTENCY_KEY"]] = params.idempotency_key
            if params.stripe_account:
                headers[API_HEADERS["ACCOUNT"]] = params.stripe_account
        return headers

    def _handle_response(self, response: httpx.Response) -> dict[str, Any]:
        """
        Decode a response or raise the matching APIError.

        Args:
            response: The httpx response

        Returns:
            Decoded JSON object for 2xx responses
        """
        request_id = response.headers.get(API_HEADERS["REQUEST_ID"].lower())
        logger.debug(
            "Response %s (request id %s)", response.status_code, request_id
        )

        try:
            body = response.json()
        except ValueError:
            body = None

        if not response.is_success:
            raise error_from_response(response.status_code, body, request_id)

        if not isinstance(body, dict):
            raise APIError(
                f"Invalid JSON in API response (HTTP {response.status_code})",
                http_status=response.status_code,
                request_id=request_id,
            )
        return body
