"""
Top‑level package for the Animal GraphQL API.

This file makes ``animal_graphql_api`` a Python package so that
modules within ``app`` can be imported using fully qualified names
like ``animal_graphql_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
