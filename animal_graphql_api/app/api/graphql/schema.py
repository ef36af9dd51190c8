"""
Query and mutation resolvers for the animal API.

Resolvers pass their arguments straight to the ``AnimalStore`` found
in the request context under the ``"store"`` key and convert the
returned records into GraphQL ``Animal`` objects.  The schema itself
holds no state, so one schema object serves any number of stores.

Field names follow the published contract: Strawberry converts
``get_animals`` to ``getAnimals``, ``create_animal`` to
``createAnimal`` and so on.  List and object results are nullable,
so a failing field resolves to ``null`` and its error is reported in
the response's ``errors`` list.
"""

from typing import Annotated, List, Optional

import strawberry
from strawberry.types import Info

from animal_graphql_api.app.api.graphql.types import Animal
from animal_graphql_api.app.schemas.animal import AnimalCreate, AnimalRead
from animal_graphql_api.app.services.animal_service import AnimalStore

# ``type`` is the argument name in the contract; the Python parameter
# is ``type_`` to keep the builtin usable inside resolvers.
TypeArgument = Annotated[str, strawberry.argument(name="type")]


def _store(info: Info) -> AnimalStore:
    return info.context["store"]


def _to_animals(records: List[AnimalRead]) -> List[Optional[Animal]]:
    return [Animal.from_record(record) for record in records]


@strawberry.type
class Query:
    @strawberry.field(description="All animals in insertion order.")
    def get_animals(self, info: Info) -> Optional[List[Optional[Animal]]]:
        return _to_animals(_store(info).list_all())

    @strawberry.field(description="The animal with the given id, or null.")
    def get_animal(self, info: Info, id: strawberry.ID) -> Optional[Animal]:
        record = _store(info).find_by_id(str(id))
        return Animal.from_record(record) if record is not None else None


@strawberry.type
class Mutation:
    @strawberry.mutation(description="Create an animal and return it with its new id.")
    def create_animal(self, info: Info, name: str, race: str, type_: TypeArgument) -> Optional[Animal]:
        record = _store(info).insert(AnimalCreate(name=name, race=race, type=type_))
        return Animal.from_record(record)

    @strawberry.mutation(description="Change the race of the animal with the given name.")
    def modify_animal(self, info: Info, name: str, race: str) -> Optional[Animal]:
        # AnimalNotFoundError propagates and becomes a field error.
        return Animal.from_record(_store(info).replace_by_name(name, race))

    @strawberry.mutation(description="Delete every animal with the given name and return the rest.")
    def delete_animal(self, info: Info, name: str) -> Optional[List[Optional[Animal]]]:
        return _to_animals(_store(info).remove_by_name(name))


schema = strawberry.Schema(query=Query, mutation=Mutation)
