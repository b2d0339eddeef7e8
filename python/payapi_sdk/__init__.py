"""
Location: python/payapi_sdk/__init__.py

Summary:
    Main package initialization for payapi-sdk. Exports all public classes
    and functions for convenient importing.

Usage:
    from payapi_sdk import PayApiClient, PersonParams, WebhookEndpointParams

    # Or import specific modules
    from payapi_sdk.types import Person, WebhookEndpoint
    from payapi_sdk.errors import InvalidRequestError

Version: 0.1.0
"""

from .client import PayApiClient
from .backend import Backend, HttpBackend
from .config import ClientConfig, load_config
from .errors import (
    PayApiError,
    ConfigError,
    APIConnectionError,
    APIError,
    InvalidRequestError,
    AuthenticationError,
    CardError,
    PermissionDeniedError,
    IdempotencyError,
    RateLimitError,
)
from .iterator import ListIterator
from .params import (
    Params,
    ListParams,
    AddressParams,
    DOBParams,
    RelationshipParams,
    VerificationParams,
    VerificationDocumentParams,
    PersonParams,
    PersonListParams,
    WebhookEndpointParams,
    WebhookEndpointListParams,
)
from .types import (
    ListMeta,
    Address,
    DOB,
    IdentityVerification,
    IdentityVerificationDocument,
    Relationship,
    Requirements,
    Person,
    PersonList,
    WebhookEndpoint,
    WebhookEndpointList,
    parse_id,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "PayApiClient",
    # Transport and configuration
    "Backend",
    "HttpBackend",
    "ClientConfig",
    "load_config",
    # Exceptions
    "PayApiError",
    "ConfigError",
    "APIConnectionError",
    "APIError",
    "InvalidRequestError",
    "AuthenticationError",
    "CardError",
    "PermissionDeniedError",
    "IdempotencyError",
    "RateLimitError",
    # Pagination
    "ListIterator",
    # Parameters
    "Params",
    "ListParams",
    "AddressParams",
    "DOBParams",
    "RelationshipParams",
    "VerificationParams",
    "VerificationDocumentParams",
    "PersonParams",
    "PersonListParams",
    "WebhookEndpointParams",
    "WebhookEndpointListParams",
    # Resources
    "ListMeta",
    "Address",
    "DOB",
    "IdentityVerification",
    "IdentityVerificationDocument",
    "Relationship",
    "Requirements",
    "Person",
    "PersonList",
    "WebhookEndpoint",
    "WebhookEndpointList",
    "parse_id",
]
