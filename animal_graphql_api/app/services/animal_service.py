"""
In‑memory store for animal records.

``AnimalStore`` owns an ordered list of ``AnimalRead`` records and
provides the operations behind the GraphQL API: listing, lookup by
id or name, insertion, removal by name and modification of a
record's race.

Identifiers come from a counter owned by the store.  The counter
only moves forward, so an id is never handed out twice, even after
the record carrying it has been deleted.  Modification updates the
record in place: its id and its position in the listing are kept.

Every mutation runs under a single lock, so concurrent requests
cannot interleave their changes.  Nothing is persisted; a new store
starts empty.
"""

from __future__ import annotations

import itertools
import logging
import threading
from typing import Iterator, List, Optional

from animal_graphql_api.app.schemas.animal import AnimalCreate, AnimalRead


class AnimalNotFoundError(ValueError):
    """Raised when an operation requires an animal that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Animal '{name}' not found")
        self.name = name


class AnimalStore:
    """Ordered, lock‑protected collection of animals."""

    def __init__(self) -> None:
        self._animals: List[AnimalRead] = []
        self._ids: Iterator[int] = itertools.count(1)
        self._lock = threading.Lock()
        self._logger = logging.getLogger(__name__)

    def __len__(self) -> int:
        return len(self._animals)

    def list_all(self) -> List[AnimalRead]:
        """Return all animals in insertion order.

        The returned list is a copy; changing it does not affect the
        store.
        """
        with self._lock:
            return list(self._animals)

    def find_by_id(self, animal_id: str) -> Optional[AnimalRead]:
        with self._lock:
            return next((a for a in self._animals if a.id == animal_id), None)

    def find_by_name(self, name: str) -> Optional[AnimalRead]:
        with self._lock:
            return self._find_by_name(name)

    def insert(self, data: AnimalCreate) -> AnimalRead:
        """Append a new animal and return it with its assigned id."""
        with self._lock:
            animal = AnimalRead(id=str(next(self._ids)), **data.model_dump())
            self._animals.append(animal)
        self._logger.info("Created animal %s (%s)", animal.id, animal.name)
        return animal

    def remove_by_name(self, name: str) -> List[AnimalRead]:
        """Remove every animal called ``name`` and return the rest.

        Removing a name that is not present is a no‑op.
        """
        with self._lock:
            remaining = [a for a in self._animals if a.name != name]
            removed = len(self._animals) - len(remaining)
            self._animals = remaining
            result = list(remaining)
        if removed:
            self._logger.info("Deleted %d animal(s) named %s", removed, name)
        return result

    def replace_by_name(self, name: str, race: str) -> AnimalRead:
        """Set the race of the first animal called ``name``.

        The record keeps its id, name, type and position.  Raises
        ``AnimalNotFoundError`` when no animal has that name.
        """
        with self._lock:
            existing = self._find_by_name(name)
            if existing is None:
                self._logger.warning("Cannot modify missing animal %s", name)
                raise AnimalNotFoundError(name)
            updated = existing.model_copy(update={"race": race})
            self._animals[self._animals.index(existing)] = updated
        self._logger.info("Modified animal %s: race %s -> %s", updated.id, existing.race, race)
        return updated

    def _find_by_name(self, name: str) -> Optional[AnimalRead]:
        # Caller must hold the lock.
        return next((a for a in self._animals if a.name == name), None)
