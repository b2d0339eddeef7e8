"""
Location: python/payapi_sdk/resources/base.py

Summary:
    Shared plumbing for resource clients: URL path formatting and the
    call-then-decode helper every CRUD method goes through.
"""

from typing import Optional, TypeVar
from urllib.parse import quote

from pydantic import BaseModel

from ..backend import Backend
from ..params import Params

M = TypeVar("M", bound=BaseModel)


def format_url_path(template: str, *segments: str) -> str:
    """
    Fill a path template, percent-escaping each segment.

    Args:
        template: Path with one "{}" placeholder per segment
        segments: Values substituted in order

    Returns:
        The formatted path, e.g. "/webhook_endpoints/we_123"
    """
    return template.format(*(quote(str(s), safe="") for s in segments))


class BaseResource:
    """
    Base class for resource clients.

    Attributes:
        backend: Transport every request is delegated to
        api_key: Per-resource API key, overriding the backend's configured key
    """

    def __init__(self, backend: Backend, api_key: Optional[str] = None):
        self.backend = backend
        self.api_key = api_key

    async def _call(
        self,
        method: str,
        path: str,
        params: Optional[Params],
        model: type[M],
    ) -> M:
        data = await self.backend.call(method, path, self.api_key, params)
        return model.model_validate(data)
