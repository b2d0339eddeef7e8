"""
Location: python/payapi_sdk/resources/persons.py

Summary:
    Client for the /accounts/{account}/persons API. Persons always belong
    to an account, so every operation needs ``params.account``; it is put
    in the URL and never sent in the body.

Example:
    from payapi_sdk.params import PersonParams

    person = await client.persons.create(
        PersonParams(account="acct_123", first_name="Jenny", last_name="Rosen")
    )
"""

from typing import Optional, Union

from ..iterator import ListIterator
from ..params import ListParams, PersonListParams, PersonParams
from ..types import ListMeta, Person, PersonList
from .base import BaseResource, format_url_path


def _require_account(params: Optional[Union[PersonParams, PersonListParams]]) -> str:
    if params is None or not params.account:
        raise ValueError("params.account must be set")
    return params.account


class PersonsResource(BaseResource):
    """Resource for person operations on a connected account."""

    async def create(self, params: PersonParams) -> Person:
        """
        Create a new person on an account.

        Args:
            params: Person attributes; ``account`` is required

        Returns:
            The created person

        Raises:
            ValueError: If params.account is not set
        """
        path = format_url_path("/accounts/{}/persons", _require_account(params))
        return await self._call("POST", path, params, Person)

    async def get(self, id: str, params: PersonParams) -> Person:
        """Retrieve a person of an account."""
        path = format_url_path("/accounts/{}/persons/{}", _require_account(params), id)
        return await self._call("GET", path, params, Person)

    async def update(self, id: str, params: PersonParams) -> Person:
        """Update a person's attributes; unset fields are left unchanged."""
        path = format_url_path("/accounts/{}/persons/{}", _require_account(params), id)
        return await self._call("POST", path, params, Person)

    async def delete(self, id: str, params: PersonParams) -> Person:
        """Delete a person from an account."""
        path = format_url_path("/accounts/{}/persons/{}", _require_account(params), id)
        return await self._call("DELETE", path, params, Person)

    def list(self, params: PersonListParams) -> ListIterator[Person]:
        """
        Iterate over the persons of an account.

        The account is checked immediately; requests are only made once
        iteration starts.

        Raises:
            ValueError: If params.account is not set
        """
        path = format_url_path("/accounts/{}/persons", _require_account(params))

        async def fetch_page(page_params: ListParams) -> tuple[list[Person], ListMeta]:
            page = await self._call("GET", path, page_params, PersonList)
            return page.data, page

        return ListIterator(params, fetch_page)
