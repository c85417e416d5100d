"""In-memory keyed repositories."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable, Iterable
import logging
from typing import Any, Generic, Protocol, TypeVar

from recordkeeper.domain.errors import DuplicateKeyError, NotFoundError, ValidationError
from recordkeeper.domain.model import Keyed, QuantityTracked


logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
E = TypeVar("E", bound=Keyed[Any])


class StockedEntity(Keyed[Any], QuantityTracked, Protocol):
    """Keyed entity with an updatable quantity."""


S = TypeVar("S", bound=StockedEntity)


class AbstractRepository(ABC, Generic[K, E]):
    """Abstract repository for keyed entities."""

    @abstractmethod
    def add(self, entity: E) -> None:
        """Add an entity; its id must not be present yet."""
        raise NotImplementedError

    @abstractmethod
    def get(self, key: K) -> E | None:
        """Get an entity by id, or None when absent."""
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: K) -> None:
        """Remove the entity with ``key``; it must be present."""
        raise NotImplementedError

    @abstractmethod
    def list(self) -> list[E]:
        """Snapshot of every entity."""
        raise NotImplementedError

    @abstractmethod
    def count(self) -> int:
        """Count stored entities."""
        raise NotImplementedError


class KeyedRepository(AbstractRepository[K, E]):
    """Dictionary-backed repository with duplicate and not-found checks.

    Entities are kept in insertion order, so ``list()`` snapshots are
    reproducible. ``list()`` builds a new list on every call: callers may
    reorder or truncate it without affecting the repository.
    """

    def __init__(self, entity_type: str = "Entity", entities: Iterable[E] = ()) -> None:
        self.entity_type = entity_type
        self._entities: dict[K, E] = {}
        for entity in entities:
            self.add(entity)

    def add(self, entity: E) -> None:
        key = self._key_of(entity)
        if key in self._entities:
            raise DuplicateKeyError(self.entity_type, key)
        self._entities[key] = entity
        logger.debug("Added %s %s", self.entity_type, key)

    def get(self, key: K) -> E | None:
        return self._entities.get(key)

    def remove(self, key: K) -> None:
        if key not in self._entities:
            raise NotFoundError(self.entity_type, key)
        del self._entities[key]
        logger.debug("Removed %s %s", self.entity_type, key)

    def list(self) -> list[E]:
        return list(self._entities.values())

    def count(self) -> int:
        return len(self._entities)

    def restore(self, entities: Iterable[E]) -> None:
        """Replace the whole content with ``entities``.

        Raises:
            DuplicateKeyError: If two entities share an id. The previous
                content is kept.
        """
        restored: dict[K, E] = {}
        for entity in entities:
            key = self._key_of(entity)
            if key in restored:
                raise DuplicateKeyError(self.entity_type, key)
            restored[key] = entity
        self._entities = restored
        logger.debug("Restored %d %s entities", len(restored), self.entity_type)

    def clear(self) -> None:
        self._entities.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entities

    def __len__(self) -> int:
        return len(self._entities)

    def _key_of(self, entity: E) -> K:
        if entity is None:
            raise ValidationError(f"{self.entity_type} must not be None", entity_type=self.entity_type)
        key = entity.id
        if key is None:
            raise ValidationError(f"{self.entity_type} must have an ID", entity_type=self.entity_type)
        return key


class StockRepository(KeyedRepository[K, S]):
    """Keyed repository whose entities carry a mutable quantity."""

    def update_quantity(self, key: K, new_quantity: int) -> S:
        """Set the quantity of an existing entity in place.

        The change is visible through every reference to the entity.

        Raises:
            NotFoundError: If no entity has ``key``.
            ValidationError: If ``new_quantity`` is negative; the entity is
                left unchanged.
        """
        entity = self.get(key)
        if entity is None:
            raise NotFoundError(self.entity_type, key)
        entity.set_quantity(new_quantity)
        logger.debug("Updated %s %s quantity to %d", self.entity_type, key, new_quantity)
        return entity
