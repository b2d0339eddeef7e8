"""
Shared pytest fixtures for payapi-sdk tests.

This module provides common fixtures used across all test files,
including sample API payloads and a mock backend.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def sample_person():
    """Fully expanded person as returned by the API."""
    return {
        "id": "person_1EnJ3ZLkdIwHu7ixEhyVAIy6",
        "object": "person",
        "account": "acct_1EnJ3ZLkdIwHu7ix",
        "address": {
            "city": "San Francisco",
            "country": "US",
            "line1": "510 Townsend St",
            "line2": None,
            "postal_code": "94103",
            "state": "CA",
        },
        "created": 1561137629,
        "dob": {"day": 1, "month": 1, "year": 1901},
        "email": "jenny.rosen@example.com",
        "first_name": "Jenny",
        "last_name": "Rosen",
        "metadata": {"order_id": "6735"},
        "relationship": {
            "controller": False,
            "director": True,
            "executive": False,
            "owner": True,
            "percent_ownership": 25.5,
            "representative": False,
            "title": "CEO",
        },
        "requirements": {
            "currently_due": ["verification.document"],
            "eventually_due": ["verification.document", "ssn_last_4"],
            "past_due": [],
        },
        "ssn_last_4_provided": True,
        "verification": {
            "details": None,
            "details_code": None,
            "document": {
                "back": None,
                "front": "file_123",
                "details": None,
                "details_code": None,
            },
            "status": "pending",
        },
    }


@pytest.fixture
def sample_webhook_endpoint():
    """Fully expanded webhook endpoint as returned by the API."""
    return {
        "id": "we_1EnJ3ZLkdIwHu7ixBgFvjL2O",
        "object": "webhook_endpoint",
        "api_version": "2019-05-16",
        "application": None,
        "created": 1561137629,
        "description": "Order events",
        "enabled_events": ["charge.failed", "charge.succeeded"],
        "livemode": False,
        "metadata": {},
        "secret": "whsec_abc123",
        "status": "enabled",
        "url": "https://example.com/my/webhook/endpoint",
    }


@pytest.fixture
def make_page():
    """Factory for raw list envelopes with one object per id."""

    def _make(ids, has_more=False, total_count=None, url="/v1/webhook_endpoints"):
        page = {
            "object": "list",
            "data": [{"id": i} for i in ids],
            "has_more": has_more,
            "url": url,
        }
        if total_count is not None:
            page["total_count"] = total_count
        return page

    return _make


@pytest.fixture
def mock_backend():
    """Create a mock backend whose call() returns an empty object."""
    backend = MagicMock()
    backend.call = AsyncMock(return_value={})
    backend.close = AsyncMock()
    return backend


@pytest.fixture
def mock_response():
    """Factory for mock httpx responses."""

    def _make(status_code=200, body=None, headers=None, json_error=False):
        response = MagicMock()
        response.status_code = status_code
        response.is_success = 200 <= status_code < 300
        response.headers = headers or {}
        if json_error:
            response.json.side_effect = ValueError("Expecting value")
        else:
            response.json.return_value = body if body is not None else {}
        return response

    return _make
