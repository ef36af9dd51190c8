"""
GraphQL package.

Strawberry types, resolvers and the FastAPI router for the animal
API.  The endpoint is mounted at ``settings.graphql_path`` (default
``/graphql``) by ``create_app``.
"""

from .router import create_graphql_router
from .schema import schema

__all__ = ["schema", "create_graphql_router"]
