"""
Pydantic models for animal records.

``AnimalCreate`` carries the client supplied fields; ``AnimalRead``
extends it with the server assigned ``id`` and is the record type
held by the store.  Records are treated as immutable values: the
store replaces a record instead of mutating one it has handed out.
"""

from pydantic import BaseModel, Field


class AnimalCreate(BaseModel):
    """Schema for creating an animal."""

    name: str = Field(..., examples=["Fluffy"])
    race: str = Field(..., examples=["Abyssinian"])
    type: str = Field(..., examples=["Cat"])


class AnimalRead(AnimalCreate):
    """Schema for a stored animal."""

    id: str

    model_config = {
        "frozen": True,
    }
