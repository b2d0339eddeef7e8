"""
Tests for payapi_sdk.client module.

Tests PayApiClient construction, resource wiring and lifecycle.
"""

from unittest.mock import patch

from payapi_sdk.backend import HttpBackend
from payapi_sdk.client import PayApiClient
from payapi_sdk.config import ClientConfig
from payapi_sdk.params import PersonListParams, PersonParams
from payapi_sdk.resources import PersonsResource, WebhookEndpointsResource


class TestPayApiClientInit:
    """Tests for PayApiClient initialization."""

    def test_basic_init(self):
        """Test basic client initialization."""
        client = PayApiClient("sk_test_123")

        assert client.config.api_key == "sk_test_123"
        assert client.config.base_url == "https://api.stripe.com/v1"
        assert client.config.timeout == 80.0
        assert isinstance(client.backend, HttpBackend)

    def test_removes_trailing_slash(self):
        """Test that trailing slash is removed from base_url."""
        client = PayApiClient("sk_test_123", base_url="http://localhost:12111/v1/")
        assert client.config.base_url == "http://localhost:12111/v1"

    def test_with_custom_options(self):
        client = PayApiClient("sk_test_123", api_version="2019-05-16", timeout=30.0)

        assert client.config.api_version == "2019-05-16"
        assert client.config.timeout == 30.0

    def test_config_takes_precedence(self):
        config = ClientConfig(api_key="sk_test_config", timeout=5)
        client = PayApiClient("sk_test_ignored", config=config)

        assert client.config is config
        assert client.backend.config is config

    def test_resources_share_backend(self, mock_backend):
        client = PayApiClient("sk_test_123", backend=mock_backend)

        assert isinstance(client.persons, PersonsResource)
        assert isinstance(client.webhook_endpoints, WebhookEndpointsResource)
        assert client.persons.backend is mock_backend
        assert client.webhook_endpoints.backend is mock_backend


class TestPayApiClientContextManager:
    """Tests for PayApiClient async context manager."""

    async def test_async_context_manager(self, mock_backend):
        """Test using client as async context manager."""
        async with PayApiClient(backend=mock_backend) as client:
            assert client is not None

        mock_backend.close.assert_awaited_once()

    async def test_close_http_backend(self):
        client = PayApiClient("sk_test_123")
        await client.close()
        assert client.backend._http.is_closed

    async def test_close_backend_without_close(self):
        class MinimalBackend:
            async def call(self, method, path, key, params):
                return {}

        client = PayApiClient(backend=MinimalBackend())
        # Should not raise
        await client.close()


class TestPayApiClientRequests:
    """End-to-end calls through the real HttpBackend with a patched transport."""

    async def test_get_webhook_endpoint(self, mock_response, sample_webhook_endpoint):
        client = PayApiClient("sk_test_123")

        with patch.object(client.backend._http, "request") as mock_request:
            mock_request.return_value = mock_response(body=sample_webhook_endpoint)

            endpoint = await client.webhook_endpoints.get("we_123")

            assert endpoint.id == sample_webhook_endpoint["id"]
            args, _ = mock_request.call_args
            assert args == ("GET", "https://api.stripe.com/v1/webhook_endpoints/we_123")

    async def test_create_person(self, mock_response, sample_person):
        client = PayApiClient("sk_test_123")

        with patch.object(client.backend._http, "request") as mock_request:
            mock_request.return_value = mock_response(body=sample_person)

            person = await client.persons.create(
                PersonParams(account="acct_123", first_name="Jenny")
            )

            assert person.first_name == "Jenny"
            args, kwargs = mock_request.call_args
            assert args == ("POST", "https://api.stripe.com/v1/accounts/acct_123/persons")
            assert kwargs["content"] == "first_name=Jenny"

    async def test_list_persons_across_pages(self, mock_response, make_page):
        client = PayApiClient("sk_test_123")

        with patch.object(client.backend._http, "request") as mock_request:
            mock_request.side_effect = [
                mock_response(body=make_page(["person_1"], has_more=True)),
                mock_response(body=make_page(["person_2"], has_more=False)),
            ]

            ids = [
                p.id
                async for p in client.persons.list(PersonListParams(account="acct_123", limit=1))
            ]

            assert ids == ["person_1", "person_2"]
            second_url = mock_request.call_args_list[1][0][1]
            assert second_url == (
                "https://api.stripe.com/v1/accounts/acct_123/persons"
                "?starting_after=person_1&limit=1"
            )
