"""
Location: python/payapi_sdk/form.py

Summary:
    Form encoding for request parameters. Flattens nested parameter models
    into the bracketed key format the API expects, e.g.
    ``relationship[owner]=true`` or ``enabled_events[0]=charge.succeeded``.

Usage:
    Used by backend.py to build query strings for GET/DELETE requests and
    form bodies for POST requests.

Example:
    from payapi_sdk.form import encode_form
    from payapi_sdk.params import PersonParams, DOBParams

    encode_form(PersonParams(account="acct_1", dob=DOBParams(day=1)))
    # [("dob[day]", "1")]
"""

from decimal import Decimal
from typing import Any, Optional
from urllib.parse import urlencode

from pydantic import BaseModel


def encode_form(params: Optional[BaseModel]) -> list[tuple[str, str]]:
    """
    Flatten a parameter model into ordered form pairs.

    Fields set to None are omitted, as are fields declared with
    exclude=True (URL and header values). Params.extra is merged last.

    Args:
        params: Parameter model, or None

    Returns:
        List of (key, value) string pairs in field declaration order
    """
    if params is None:
        return []

    pairs: list[tuple[str, str]] = []
    data = params.model_dump(exclude_none=True)
    extra = getattr(params, "extra", None)
    if extra:
        data.update(extra)

    for key, value in data.items():
        _flatten(key, value, pairs)
    return pairs


def encode_query(params: Optional[BaseModel]) -> str:
    """URL-encode the form pairs of a parameter model."""
    return urlencode(encode_form(params))


def _flatten(key: str, value: Any, pairs: list[tuple[str, str]]) -> None:
    if value is None:
        return
    if isinstance(value, BaseModel):
        value = value.model_dump(exclude_none=True)

    if isinstance(value, dict):
        for sub_key, sub_value in value.items():
            _flatten(f"{key}[{sub_key}]", sub_value, pairs)
    elif isinstance(value, (list, tuple)):
        # An empty list is sent as an empty value so the API clears it
        if not value:
            pairs.append((key, ""))
        for index, item in enumerate(value):
            _flatten(f"{key}[{index}]", item, pairs)
    else:
        pairs.append((key, _format_scalar(value)))


def _format_scalar(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        # Positional notation, shortest round-trip digits (no exponent)
        return format(Decimal(repr(value)).normalize(), "f")
    return str(value)
