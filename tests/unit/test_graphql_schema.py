"""Tests for the GraphQL schema and resolvers.

Operations are executed directly against the Strawberry schema with
an isolated store injected through the context.
"""

import pytest

from animal_graphql_api.app.api.graphql import schema
from animal_graphql_api.app.services.animal_service import AnimalStore


CREATE = """
mutation Create($name: String!, $race: String!, $type: String!) {
    createAnimal(name: $name, race: $race, type: $type) { id name race type }
}
"""

MODIFY = """
mutation Modify($name: String!, $race: String!) {
    modifyAnimal(name: $name, race: $race) { id name race type }
}
"""

DELETE = """
mutation Delete($name: String!) {
    deleteAnimal(name: $name) { id name }
}
"""

GET_ALL = "{ getAnimals { id name race type } }"

GET_ONE = """
query Get($id: ID!) {
    getAnimal(id: $id) { id name race type }
}
"""


def _run(store: AnimalStore, query: str, **variables):
    return schema.execute_sync(query, variable_values=variables or None, context_value={"store": store})


def _create(store: AnimalStore, name: str, race: str, type: str) -> dict:
    result = _run(store, CREATE, name=name, race=race, type=type)
    assert result.errors is None
    return result.data["createAnimal"]


# ---------------------------------------------------------------------------
# Contract
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "field",
    [
        "getAnimals: [Animal]",
        "getAnimal(id: ID!): Animal",
        "createAnimal(name: String!, race: String!, type: String!): Animal",
        "modifyAnimal(name: String!, race: String!): Animal",
        "deleteAnimal(name: String!): [Animal]",
        "id: ID!",
        "name: String!",
        "race: String!",
        "type: String!",
    ],
)
def test_schema_exposes_contract_field(field):
    assert field in str(schema)


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


def test_get_animals_empty(store):
    result = _run(store, GET_ALL)

    assert result.errors is None
    assert result.data == {"getAnimals": []}


def test_get_animals_returns_created_in_order(store):
    created = [
        _create(store, "Fluffy", "Abyssinian", "Cat"),
        _create(store, "Fluflu", "Alaskan", "Dog"),
        _create(store, "Milo", "Siamese", "Cat"),
    ]

    assert _run(store, GET_ALL).data["getAnimals"] == created


def test_get_animal_by_id(seeded_store):
    result = _run(seeded_store, GET_ONE, id="2")

    assert result.data["getAnimal"] == {"id": "2", "name": "Fluflu", "race": "Alaskan", "type": "Dog"}


def test_get_animal_missing_is_null(seeded_store):
    result = _run(seeded_store, GET_ONE, id="99")

    assert result.errors is None
    assert result.data == {"getAnimal": None}


# ---------------------------------------------------------------------------
# Mutations
# ---------------------------------------------------------------------------


def test_create_animal_on_empty_store(store):
    animal = _create(store, "Fluffy", "Abyssinian", "Cat")

    assert animal == {"id": "1", "name": "Fluffy", "race": "Abyssinian", "type": "Cat"}


def test_modify_animal(seeded_store):
    result = _run(seeded_store, MODIFY, name="Fluflu", race="American Bulldog")

    assert result.errors is None
    assert result.data["modifyAnimal"] == {
        "id": "2",
        "name": "Fluflu",
        "race": "American Bulldog",
        "type": "Dog",
    }
    assert [a["race"] for a in _run(seeded_store, GET_ALL).data["getAnimals"]] == [
        "Abyssinian",
        "American Bulldog",
    ]


def test_modify_missing_animal_returns_error(seeded_store):
    result = _run(seeded_store, MODIFY, name="DoesNotExist", race="x")

    assert result.data == {"modifyAnimal": None}
    assert len(result.errors) == 1
    assert result.errors[0].message == "Animal 'DoesNotExist' not found"
    assert result.errors[0].path == ["modifyAnimal"]
    assert len(_run(seeded_store, GET_ALL).data["getAnimals"]) == 2


def test_delete_animal_removes_all_matches(store):
    _create(store, "Rex", "Boxer", "Dog")
    _create(store, "Tom", "Persian", "Cat")
    _create(store, "Rex", "Husky", "Dog")

    result = _run(store, DELETE, name="Rex")

    assert result.data["deleteAnimal"] == [{"id": "2", "name": "Tom"}]


def test_delete_animal_twice_is_idempotent(seeded_store):
    first = _run(seeded_store, DELETE, name="Fluflu").data
    second = _run(seeded_store, DELETE, name="Fluflu").data

    assert first == second == {"deleteAnimal": [{"id": "1", "name": "Fluffy"}]}


def test_missing_required_argument_is_rejected(store):
    result = _run(store, 'mutation { createAnimal(name: "Rex", race: "Boxer") { id } }')

    assert result.errors
    assert store.list_all() == []
