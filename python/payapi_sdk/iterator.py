"""
Location: python/payapi_sdk/iterator.py

Summary:
    Lazy async iterator over cursor-paginated list endpoints. Pages are
    fetched on demand; the cursor for the next page is the id of the last
    object of the current one.

Usage:
    Returned by the list() method of every resource client. Each resource
    supplies a page-fetch callable that performs one list request.

Example:
    async for endpoint in client.webhook_endpoints.list():
        print(endpoint.url)
"""

from typing import Awaitable, Callable, Generic, Optional, TypeVar

from .params import ListParams
from .types import ListMeta

T = TypeVar("T")

PageFetcher = Callable[[ListParams], Awaitable[tuple[list[T], ListMeta]]]


class ListIterator(Generic[T]):
    """
    Async iterator over every object of a list endpoint.

    Iteration stops when the server reports no further pages, when the
    reported total_count has been reached, or after the first page when
    params.single is set. When params.ending_before is set the list is
    walked backwards and each page is yielded in reverse order.

    The iterator is single-use: once exhausted it stays exhausted.

    Attributes:
        meta: ListMeta of the most recently fetched page
        current: The object most recently yielded
    """

    def __init__(self, params: Optional[ListParams], fetch: PageFetcher):
        """
        Initialize the iterator without fetching anything.

        Args:
            params: List parameters; copied, never mutated
            fetch: Callable performing one page request
        """
        self._params = (params or ListParams()).model_copy()
        self._fetch = fetch
        self._backwards = self._params.ending_before is not None
        self._page: list[T] = []
        self._last: Optional[T] = None
        self._started = False
        self._done = False
        self._yielded = 0
        self.meta: Optional[ListMeta] = None
        self.current: Optional[T] = None

    def __aiter__(self) -> "ListIterator[T]":
        return self

    async def __anext__(self) -> T:
        if self._done:
            raise StopAsyncIteration

        if not self._started:
            self._started = True
            await self._load_page()

        while not self._page:
            if not self._has_next_page():
                self._done = True
                raise StopAsyncIteration
            self._advance_cursor()
            await self._load_page()

        self.current = self._page.pop(0)
        self._yielded += 1
        if self._reached_total():
            self._page = []
            self._done = True
        return self.current

    async def _load_page(self) -> None:
        items, meta = await self._fetch(self._params)
        self.meta = meta
        self._page = list(reversed(items)) if self._backwards else list(items)
        self._last = self._page[-1] if self._page else None

    def _has_next_page(self) -> bool:
        if self._params.single or self.meta is None:
            return False
        return self.meta.has_more and self._last is not None

    def _advance_cursor(self) -> None:
        cursor = getattr(self._last, "id", None)
        if self._backwards:
            self._params.ending_before = cursor
        else:
            self._params.starting_after = cursor

    def _reached_total(self) -> bool:
        if self.meta is None or self.meta.total_count is None:
            return False
        return self._yielded >= self.meta.total_count
