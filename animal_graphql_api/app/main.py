"""
Main entrypoint for the Animal GraphQL API.

This module assembles the FastAPI application, sets up logging and
mounts the GraphQL router.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import
time as ``app``.  Importing the app here makes it easy to run with
uvicorn or another ASGI server, e.g.::

    uvicorn animal_graphql_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .api.graphql import create_graphql_router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.animal_service import AnimalStore


def create_app(settings: Optional[Settings] = None, store: Optional[AnimalStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use.  Defaults to the module‑level settings
        read from the environment.
    store : Optional[AnimalStore]
        Store backing the API.  A new, empty store is created when
        omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.  The store is
        available as ``app.state.store``.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level, settings.log_file)
    logger = logging.getLogger(__name__)

    store = store if store is not None else AnimalStore()

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.store = store
    app.include_router(
        create_graphql_router(store, graphiql_enabled=settings.graphiql_enabled),
        prefix=settings.graphql_path,
    )

    if settings.graphiql_enabled:
        # The IDE itself is rendered by the GraphQL router on GET; this
        # route gives it a stable, separate address.
        @app.get(settings.graphiql_path, include_in_schema=False)
        async def graphiql() -> RedirectResponse:
            return RedirectResponse(url=settings.graphql_path)

    logger.info(
        "GraphQL endpoint at %s (explorer %s)",
        settings.graphql_path,
        settings.graphiql_path if settings.graphiql_enabled else "disabled",
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
