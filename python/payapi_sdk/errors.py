"""
Location: python/payapi_sdk/errors.py

Summary:
    Exception hierarchy for payapi-sdk. Every failure raised by the HTTP
    backend is a PayApiError subclass so callers can catch one base type.

Usage:
    Raised by backend.py when a request fails. Resource clients never catch
    these; they propagate unchanged to the caller.

Example:
    from payapi_sdk.errors import InvalidRequestError

    try:
        await client.persons.get("person_123", params)
    except InvalidRequestError as exc:
        print(exc.http_status, exc.param)
"""

from typing import Any, Optional


class PayApiError(Exception):
    """Base exception for all payapi-sdk errors."""
    pass


class ConfigError(PayApiError):
    """Exception raised when client configuration is invalid."""
    pass


class APIConnectionError(PayApiError):
    """Exception raised when the API could not be reached."""
    pass


class APIError(PayApiError):
    """
    Exception raised when the API responds with an error.

    Attributes:
        message: Human readable error message
        http_status: HTTP status code of the response
        type: Error type reported by the API (e.g. "invalid_request_error")
        code: Machine readable error code, if any
        param: Name of the parameter the error relates to, if any
        request_id: Value of the Request-Id response header
        json_body: Decoded response body, if it was JSON
    """

    def __init__(
        self,
        message: str,
        *,
        http_status: Optional[int] = None,
        type: Optional[str] = None,
        code: Optional[str] = None,
        param: Optional[str] = None,
        request_id: Optional[str] = None,
        json_body: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.http_status = http_status
        self.type = type
        self.code = code
        self.param = param
        self.request_id = request_id
        self.json_body = json_body

    def __str__(self) -> str:
        if self.request_id:
            return f"Request {self.request_id}: {self.message}"
        return self.message


class InvalidRequestError(APIError):
    """The request had invalid parameters or referenced a missing object."""
    pass


class AuthenticationError(APIError):
    """No valid API key was provided."""
    pass


class CardError(APIError):
    """The request was valid but the payment method was declined."""
    pass


class PermissionDeniedError(APIError):
    """The API key does not have permission for the request."""
    pass


class IdempotencyError(APIError):
    """An idempotency key was reused with different parameters."""
    pass


class RateLimitError(APIError):
    """Too many requests hit the API too quickly."""
    pass


_STATUS_ERRORS: dict[int, type[APIError]] = {
    400: InvalidRequestError,
    401: AuthenticationError,
    402: CardError,
    403: PermissionDeniedError,
    404: InvalidRequestError,
    429: RateLimitError,
}


def error_from_response(
    http_status: int,
    body: Optional[dict[str, Any]],
    request_id: Optional[str] = None,
) -> APIError:
    """
    Build the APIError subclass matching an error response.

    The error type reported in the body takes precedence for idempotency
    errors; otherwise the HTTP status selects the class.

    Args:
        http_status: HTTP status code of the response
        body: Decoded JSON body, or None if it was not JSON
        request_id: Request-Id header value

    Returns:
        An APIError instance (not raised)
    """
    info = {}
    if isinstance(body, dict) and isinstance(body.get("error"), dict):
        info = body["error"]

    message = info.get("message") or f"API responded with HTTP {http_status}"
    error_type = info.get("type")

    if error_type == "idempotency_error":
        cls = IdempotencyError
    else:
        cls = _STATUS_ERRORS.get(http_status, APIError)

    return cls(
        message,
        http_status=http_status,
        type=error_type,
        code=info.get("code"),
        param=info.get("param"),
        request_id=request_id,
        json_body=body,
    )
