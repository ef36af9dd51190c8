"""
FastAPI router exposing the GraphQL schema.

``create_graphql_router`` binds the stateless schema to a specific
``AnimalStore`` through the context getter, so each application
instance (and each test) works against its own store.
"""

from typing import Any, Dict

from strawberry.fastapi import GraphQLRouter

from animal_graphql_api.app.api.graphql.schema import schema
from animal_graphql_api.app.services.animal_service import AnimalStore


def create_graphql_router(store: AnimalStore, graphiql_enabled: bool = True) -> GraphQLRouter:
    """Create the GraphQL router for FastAPI.

    Parameters
    ----------
    store : AnimalStore
        Store made available to resolvers as ``info.context["store"]``.
    graphiql_enabled : bool
        Serve the GraphiQL IDE on ``GET`` requests from browsers.
    """

    def get_context() -> Dict[str, Any]:
        return {"store": store}

    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if graphiql_enabled else None,
    )
