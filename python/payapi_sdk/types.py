"""
Location: python/payapi_sdk/types.py

Summary:
    Pydantic models for API responses. Defines the Person and
    WebhookEndpoint resources, their nested objects, and the list envelopes
    returned by list endpoints.

Usage:
    These models are built by the resource clients from decoded JSON.
    Expandable resources derive from ExpandableModel so that a bare id
    string decodes into a model carrying only that id.

Example:
    from payapi_sdk.types import Person

    person = Person.model_validate({"id": "person_123", "first_name": "Jenny"})
    ref = Person.from_json('"person_456"')
    assert ref.id == "person_456" and ref.first_name is None
"""

import json
from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator, model_validator


def parse_id(data: Union[str, bytes]) -> Optional[str]:
    """
    Extract an object id from raw JSON if the JSON is a bare string.

    An unexpanded reference is serialized as a JSON string literal such as
    ``"person_123"``; anything else is an expanded object.

    Args:
        data: Raw JSON text

    Returns:
        The id if data is a JSON string literal, None otherwise
    """
    if isinstance(data, bytes):
        data = data.decode("utf-8")
    data = data.strip()
    if len(data) < 2 or not (data.startswith('"') and data.endswith('"')):
        return None
    try:
        value = json.loads(data)
    except ValueError:
        return None
    return value if isinstance(value, str) else None


class ExpandableModel(BaseModel):
    """
    Base class for resources that may arrive expanded or as a bare id.

    Attributes:
        id: Unique identifier of the object
    """
    id: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def _expand_id(cls, data: Any) -> Any:
        if isinstance(data, str):
            return {"id": data}
        return data

    @classmethod
    def from_json(cls, data: Union[str, bytes]):
        """
        Decode raw JSON that holds either an id or the full object.

        The id form is tried first; if the payload is not a bare string it
        is decoded structurally.
        """
        object_id = parse_id(data)
        if object_id is not None:
            return cls(id=object_id)
        return cls.model_validate_json(data)


class ListMeta(BaseModel):
    """
    Envelope metadata shared by every list response.

    Attributes:
        object: Always "list"
        has_more: Whether another page exists after this one
        total_count: Total number of objects, when the API reports it
        url: URL of the list endpoint
    """
    object: str = "list"
    has_more: bool = False
    total_count: Optional[int] = None
    url: Optional[str] = None


class Address(BaseModel):
    """Postal address of a person."""
    city: Optional[str] = None
    country: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    postal_code: Optional[str] = None
    state: Optional[str] = None
    town: Optional[str] = None


class DOB(BaseModel):
    """Date of birth."""
    day: Optional[int] = None
    month: Optional[int] = None
    year: Optional[int] = None


class IdentityVerificationDocument(BaseModel):
    """
    Identity document uploaded for verification.

    Attributes:
        back: File id of the back of the document
        front: File id of the front of the document
        details: Human readable verification outcome
        details_code: Machine readable verification outcome
    """
    back: Optional[str] = None
    front: Optional[str] = None
    details: Optional[str] = None
    details_code: Optional[str] = None


class IdentityVerification(BaseModel):
    """
    Verification state of a person.

    Attributes:
        status: Known values are "unverified", "pending" and "verified";
            other values are kept as sent
    """
    details: Optional[str] = None
    details_code: Optional[str] = None
    document: Optional[IdentityVerificationDocument] = None
    status: Optional[str] = None


class Relationship(BaseModel):
    """
    Role of a person relative to the account they belong to.

    Attributes:
        controller: Whether the person has significant control over the account
        director: Whether the person is a director of the company
        executive: Whether the person is an executive officer
        owner: Whether the person owns part of the company
        representative: Whether the person is the account representative
        percent_ownership: Share of the company owned, 0 to 100
        email: Contact email for the role
        phone: Contact phone for the role
        title: Job title of the person
    """
    controller: bool = False
    director: bool = False
    executive: bool = False
    owner: bool = False
    representative: bool = False
    percent_ownership: Optional[float] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    title: Optional[str] = None

    @field_validator(
        "controller", "director", "executive", "owner", "representative",
        mode="before",
    )
    @classmethod
    def _null_flag_is_false(cls, value: Any) -> Any:
        return False if value is None else value


class Requirements(BaseModel):
    """Field names still needed to verify a person."""
    currently_due: list[str] = Field(default_factory=list)
    eventually_due: list[str] = Field(default_factory=list)
    past_due: list[str] = Field(default_factory=list)


class Person(ExpandableModel):
    """
    An individual associated with an account.

    Persons are created, updated and deleted through the parent account;
    this model only mirrors the server-side state returned by a call.
    When only a reference is returned, just ``id`` is populated.
    """
    object: Optional[str] = None
    account: Optional[str] = None
    address: Optional[Address] = None
    address_kana: Optional[Address] = None
    address_kanji: Optional[Address] = None
    created: Optional[int] = None
    deleted: bool = False
    dob: Optional[DOB] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    first_name_kana: Optional[str] = None
    first_name_kanji: Optional[str] = None
    gender: Optional[str] = None
    id_number_provided: bool = False
    last_name: Optional[str] = None
    last_name_kana: Optional[str] = None
    last_name_kanji: Optional[str] = None
    maiden_name: Optional[str] = None
    metadata: dict[str, str] = Field(default_factory=dict)
    phone: Optional[str] = None
    relationship: Optional[Relationship] = None
    requirements: Optional[Requirements] = None
    ssn_last_4_provided: bool = False
    verification: Optional[IdentityVerification] = None


class PersonList(ListMeta):
    """A page of persons returned by the list endpoint."""
    data: list[Person] = Field(default_factory=list)


class WebhookEndpoint(ExpandableModel):
    """
    A registered URL that receives event notifications.

    Attributes:
        api_version: API version events are rendered with
        application: Connect application the endpoint belongs to
        connect: Whether the endpoint receives events from connected accounts
        created: Creation time as a Unix timestamp
        deleted: True on the object returned by a delete
        description: Free-form description
        enabled_events: Event types delivered to the endpoint ("*" for all)
        livemode: Whether the object exists in live mode
        metadata: Key-value pairs attached to the object
        secret: Signing secret, only returned on creation
        status: "enabled" or "disabled"
        url: Destination URL
    """
    object: Optional[str] = None
    api_version: Optional[str] = None
    application: Optional[str] = None
    connect: bool = False
    created: Optional[int] = None
    deleted: bool = False
    description: Optional[str] = None
    enabled_events: list[str] = Field(default_factory=list)
    livemode: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    secret: Optional[str] = None
    status: Optional[str] = None
    url: Optional[str] = None


class WebhookEndpointList(ListMeta):
    """A page of webhook endpoints returned by the list endpoint."""
    data: list[WebhookEndpoint] = Field(default_factory=list)
