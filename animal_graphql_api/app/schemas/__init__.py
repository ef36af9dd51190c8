"""
Pydantic schema definitions for animal records.

Schemas are kept separate from the GraphQL types so the store does
not depend on the transport layer.
"""
