"""
Location: python/payapi_sdk/params.py

Summary:
    Pydantic models for request parameters. Every optional field defaults
    to None, which means "not sent"; this keeps unset fields distinct from
    zero values such as False or 0.

Usage:
    Passed to the resource clients, which hand them to the backend for
    form encoding. Fields that travel in the URL or in HTTP headers are
    declared with exclude=True so the form encoder skips them.

Example:
    from payapi_sdk.params import PersonParams, RelationshipParams

    params = PersonParams(
        account="acct_123",
        first_name="Jenny",
        relationship=RelationshipParams(owner=True, percent_ownership=25.0),
    )
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class Params(BaseModel):
    """
    Parameters accepted by every request.

    Attributes:
        expand: Response fields to expand into full objects
        metadata: Key-value pairs to attach to the object
        extra: Additional form parameters not modelled explicitly
        idempotency_key: Sent as the Idempotency-Key header
        stripe_account: Connected account to act on, sent as a header
    """
    expand: Optional[list[str]] = None
    metadata: Optional[dict[str, str]] = None
    extra: Optional[dict[str, Any]] = Field(None, exclude=True)
    idempotency_key: Optional[str] = Field(None, exclude=True)
    stripe_account: Optional[str] = Field(None, exclude=True)

    def add_expand(self, field: str) -> None:
        """Append a field to the expand list."""
        self.expand = [*(self.expand or []), field]

    def add_extra(self, key: str, value: Any) -> None:
        """Set an extra form parameter."""
        self.extra = {**(self.extra or {}), key: value}


class ListParams(Params):
    """
    Parameters accepted by every list request.

    Attributes:
        ending_before: Cursor; return objects before this id
        starting_after: Cursor; return objects after this id
        limit: Page size, 1 to 100
        single: Fetch only the first page instead of paging through all
    """
    ending_before: Optional[str] = None
    starting_after: Optional[str] = None
    limit: Optional[int] = None
    single: bool = Field(False, exclude=True)


class AddressParams(BaseModel):
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    town: Optional[str] = None


class DOBParams(BaseModel):
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


class RelationshipParams(BaseModel):
    """Sets the relationship between an account and a person."""
    controller: Optional[bool] = None
    director: Optional[bool] = None
    email: Optional[str] = None
    executive: Optional[bool] = None
    owner: Optional[bool] = None
    percent_ownership: Optional[float] = None
    phone: Optional[str] = None
    representative: Optional[bool] = None
    title: Optional[str] = None


class VerificationDocumentParams(BaseModel):
    back: Optional[str] = None
    front: Optional[str] = None


class VerificationParams(BaseModel):
    document: Optional[VerificationDocumentParams] = None


class PersonParams(Params):
    """
    Parameters for creating, retrieving, updating or deleting a person.

    ``account`` is required by every person operation and is placed in the
    URL rather than the request body.
    """
    account: Optional[str] = Field(None, exclude=True)
    address: Optional[AddressParams] = None
    address_kana: Optional[AddressParams] = None
    address_kanji: Optional[AddressParams] = None
    dob: Optional[DOBParams] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    first_name_kana: Optional[str] = None
    first_name_kanji: Optional[str] = None
    gender: Optional[str] = None
    last_name: Optional[str] = None
    last_name_kana: Optional[str] = None
    last_name_kanji: Optional[str] = None
    maiden_name: Optional[str] = None
    personal_id_number: Optional[str] = None
    phone: Optional[str] = None
    relationship: Optional[RelationshipParams] = None
    ssn_last_4: Optional[str] = None
    verification: Optional[VerificationParams] = None


class PersonListParams(ListParams):
    """Parameters for listing the persons of an account."""
    account: Optional[str] = Field(None, exclude=True)
    director: Optional[bool] = None
    executive: Optional[bool] = None
    owner: Optional[bool] = None


class WebhookEndpointParams(Params):
    """
    Parameters for creating or updating a webhook endpoint.

    Attributes:
        api_version: API version to render events with (create only)
        connect: Receive events from connected accounts (create only)
        description: Free-form description
        disabled: Disable or re-enable the endpoint (update only)
        enabled_events: Event types to deliver, "*" for all
        url: Destination URL
    """
    api_version: Optional[str] = None
    connect: Optional[bool] = None
    description: Optional[str] = None
    disabled: Optional[bool] = None
    enabled_events: Optional[list[str]] = None
    url: Optional[str] = None


class WebhookEndpointListParams(ListParams):
    """Parameters for listing webhook endpoints."""
    pass
