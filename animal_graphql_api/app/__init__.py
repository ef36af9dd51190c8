"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (settings and logging), ``schemas`` (pydantic
payloads), ``services`` (the in‑memory animal store) and ``api``
(the GraphQL schema and router that expose the store).
"""

from .main import app, create_app  # noqa: F401
