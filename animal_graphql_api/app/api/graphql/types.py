"""GraphQL object types."""

import strawberry

from animal_graphql_api.app.schemas.animal import AnimalRead


@strawberry.type(description="An animal held by the store.")
class Animal:
    id: strawberry.ID
    name: str
    race: str
    type: str

    @classmethod
    def from_record(cls, record: AnimalRead) -> "Animal":
        return cls(
            id=strawberry.ID(record.id),
            name=record.name,
            race=record.race,
            type=record.type,
        )
