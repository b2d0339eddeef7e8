"""
Location: python/payapi_sdk/config.py

Summary:
    Client configuration. ClientConfig holds the API key, base URL, API
    version and HTTP timeout; load_config builds one from environment
    variables with explicit keyword overrides.

Usage:
    Consumed by backend.py and client.py. Most callers pass an API key to
    PayApiClient directly and never touch this module.

Example:
    from payapi_sdk.config import load_config

    # PAYAPI_API_KEY=sk_test_... in the environment
    config = load_config(timeout=30)
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, field_validator

from .errors import ConfigError

DEFAULT_BASE_URL = "https://api.stripe.com/v1"
DEFAULT_TIMEOUT = 80.0
USER_AGENT = "payapi-sdk-python/0.1.0"

_FIELD_TO_ENV_KEY = {
    "api_key": "PAYAPI_API_KEY",
    "base_url": "PAYAPI_BASE_URL",
    "api_version": "PAYAPI_API_VERSION",
    "timeout": "PAYAPI_TIMEOUT",
}


class ClientConfig(BaseModel):
    """
    Configuration shared by every request a client makes.

    Attributes:
        api_key: Secret API key, sent as a bearer token
        base_url: API root including the version prefix (trailing slash removed)
        api_version: Pinned API version, sent as the Stripe-Version header
        timeout: HTTP timeout in seconds
        user_agent: User-Agent header value
    """
    api_key: Optional[str] = None
    base_url: str = DEFAULT_BASE_URL
    api_version: Optional[str] = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


def load_config(
    *,
    environ: Optional[Mapping[str, str]] = None,
    api_key: Optional[str] = None,
    base_url: Optional[str] = None,
    api_version: Optional[str] = None,
    timeout: Optional[float] = None,
) -> ClientConfig:
    """
    Build a ClientConfig from environment variables.

    Keyword arguments that are not None win over the environment.

    Args:
        environ: Mapping to read variables from (defaults to os.environ)
        api_key: Overrides PAYAPI_API_KEY
        base_url: Overrides PAYAPI_BASE_URL
        api_version: Overrides PAYAPI_API_VERSION
        timeout: Overrides PAYAPI_TIMEOUT

    Returns:
        The resulting ClientConfig

    Raises:
        ConfigError: If PAYAPI_TIMEOUT is not a positive number
    """
    values = os.environ if environ is None else environ
    overrides = {
        "api_key": api_key,
        "base_url": base_url,
        "api_version": api_version,
        "timeout": timeout,
    }

    fields = {}
    for field_name, env_key in _FIELD_TO_ENV_KEY.items():
        value = overrides[field_name]
        if value is None:
            value = values.get(env_key) or None
        if value is not None:
            fields[field_name] = value

    if "timeout" in fields:
        fields["timeout"] = _parse_timeout(fields["timeout"])

    return ClientConfig(**fields)


def _parse_timeout(raw) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"PAYAPI_TIMEOUT must be a number, got '{raw}'") from exc
    if value <= 0:
        raise ConfigError("PAYAPI_TIMEOUT must be greater than zero")
    return value
