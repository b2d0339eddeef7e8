"""
Tests for payapi_sdk.resources.persons module.

Tests the account-scoped paths of every person operation and the
required-account check.
"""

import pytest

from payapi_sdk.params import PersonListParams, PersonParams, RelationshipParams
from payapi_sdk.resources import PersonsResource
from payapi_sdk.types import Person


@pytest.fixture
def resource(mock_backend):
    """Create a resource bound to the mock backend."""
    return PersonsResource(mock_backend)


@pytest.fixture
def params():
    """Person params scoped to a test account."""
    return PersonParams(account="acct_123")


class TestPersonsCrud:
    """Tests for create, get, update and delete."""

    async def test_create(self, resource, mock_backend, sample_person):
        mock_backend.call.return_value = sample_person
        params = PersonParams(
            account="acct_123",
            first_name="Jenny",
            last_name="Rosen",
            relationship=RelationshipParams(owner=True, percent_ownership=25.5),
        )

        person = await resource.create(params)

        mock_backend.call.assert_called_once_with(
            "POST", "/accounts/acct_123/persons", None, params
        )
        assert isinstance(person, Person)
        assert person.relationship.owner is True

    async def test_get(self, resource, mock_backend, params, sample_person):
        mock_backend.call.return_value = sample_person

        person = await resource.get("person_456", params)

        mock_backend.call.assert_called_once_with(
            "GET", "/accounts/acct_123/persons/person_456", None, params
        )
        assert person.first_name == "Jenny"

    async def test_update(self, resource, mock_backend, sample_person):
        mock_backend.call.return_value = {**sample_person, "first_name": "Jane"}
        params = PersonParams(account="acct_123", first_name="Jane")

        person = await resource.update("person_456", params)

        mock_backend.call.assert_called_once_with(
            "POST", "/accounts/acct_123/persons/person_456", None, params
        )
        assert person.first_name == "Jane"

    async def test_delete(self, resource, mock_backend, params):
        mock_backend.call.return_value = {
            "id": "person_456",
            "object": "person",
            "deleted": True,
        }

        person = await resource.delete("person_456", params)

        mock_backend.call.assert_called_once_with(
            "DELETE", "/accounts/acct_123/persons/person_456", None, params
        )
        assert person.deleted is True
        assert person.first_name is None

    async def test_account_and_id_are_escaped(self, resource, mock_backend):
        await resource.get("person 1", PersonParams(account="acct/1"))

        path = mock_backend.call.call_args[0][1]
        assert path == "/accounts/acct%2F1/persons/person%201"


class TestPersonsRequireAccount:
    """Tests for the account requirement."""

    async def test_create_without_account(self, resource, mock_backend):
        with pytest.raises(ValueError, match="params.account must be set"):
            await resource.create(PersonParams(first_name="Jenny"))
        mock_backend.call.assert_not_called()

    async def test_get_without_params(self, resource, mock_backend):
        with pytest.raises(ValueError):
            await resource.get("person_456", None)
        mock_backend.call.assert_not_called()

    async def test_update_with_empty_account(self, resource):
        with pytest.raises(ValueError):
            await resource.update("person_456", PersonParams(account=""))

    async def test_delete_without_account(self, resource):
        with pytest.raises(ValueError):
            await resource.delete("person_456", PersonParams())

    def test_list_without_account(self, resource):
        with pytest.raises(ValueError):
            resource.list(PersonListParams(owner=True))


class TestPersonsList:
    """Tests for list."""

    async def test_list_path_and_filters(self, resource, mock_backend, make_page):
        mock_backend.call.return_value = make_page(
            ["person_1", "person_2"], url="/v1/accounts/acct_123/persons"
        )
        params = PersonListParams(account="acct_123", owner=True)

        persons = [p async for p in resource.list(params)]

        assert [p.id for p in persons] == ["person_1", "person_2"]
        method, path, _, sent_params = mock_backend.call.call_args[0]
        assert method == "GET"
        assert path == "/accounts/acct_123/persons"
        assert sent_params.owner is True

    async def test_list_stops_at_total_count(self, resource, mock_backend, make_page):
        mock_backend.call.side_effect = [
            make_page(["person_1", "person_2"], has_more=True, total_count=3),
            make_page(["person_3", "person_4"], has_more=True, total_count=3),
        ]

        persons = [p async for p in resource.list(PersonListParams(account="acct_123"))]

        assert [p.id for p in persons] == ["person_1", "person_2", "person_3"]
        assert mock_backend.call.call_count == 2
