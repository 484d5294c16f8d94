"""
In-memory repository adapter - Implements ZooRepository protocol.

State is volatile and lives for the lifetime of the process.

Concurrency Design:
-------------------
One threading.Lock guards BOTH collections and their identifier
counters. Every public method is a single critical section:

1. **Snapshots**: list methods return new lists, never the live ones,
   so callers cannot observe or cause mutation outside the lock.

2. **Counters**: a collection's counter and its membership change in
   the same critical section. The counter is incremented before use
   and never decremented, so identifiers are never reused.

3. **Cross-collection reads**: the animal-name join reads animals and
   locomotion modes under one acquisition, so it never sees one
   collection newer than the other.

Nothing inside the lock performs I/O or blocks.
"""

import logging
import threading
from collections.abc import Callable, Iterable
from typing import Generic, TypeVar

from src.domain.entities import Animal, AnimalInput, LocomotionMode, LocomotionModeInput
from src.domain.validation import same_text

from .seed import SEED_ANIMALS, SEED_LOCOMOTION_MODES

logger = logging.getLogger(__name__)

EntityT = TypeVar("EntityT", Animal, LocomotionMode)
InputT = TypeVar("InputT", AnimalInput, LocomotionModeInput)


class _Collection(Generic[EntityT, InputT]):
    """
    Ordered entity list paired with its identifier counter.

    Not synchronized on its own; InMemoryZooRepository holds the shared
    lock around every call.
    """

    def __init__(
        self,
        label: str,
        factory: Callable[[int, InputT], EntityT],
        initial: Iterable[EntityT],
    ) -> None:
        self.label = label
        self._factory = factory
        self._items: list[EntityT] = list(initial)
        # Seeded collections start counting at their size.
        self._next_id = len(self._items)

    def snapshot(self) -> list[EntityT]:
        return list(self._items)

    def find(self, entity_id: int) -> EntityT | None:
        return next((item for item in self._items if item.id == entity_id), None)

    def create(self, data: InputT) -> EntityT:
        self._next_id += 1
        entity = self._factory(self._next_id, data)
        self._items.append(entity)
        return entity

    def update(self, entity_id: int, data: InputT) -> EntityT | None:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                entity = self._factory(entity_id, data)
                self._items[index] = entity
                return entity
        return None

    def delete(self, entity_id: int) -> bool:
        for index, item in enumerate(self._items):
            if item.id == entity_id:
                del self._items[index]
                return True
        return False


class InMemoryZooRepository:
    """
    Implements ZooRepository protocol with lock-guarded lists.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(
        self,
        animals: Iterable[Animal] = (),
        locomotion_modes: Iterable[LocomotionMode] = (),
    ) -> None:
        """
        Initialize repository with optional starting data.

        Args:
            animals: Initial animals, in collection order
            locomotion_modes: Initial locomotion modes, in collection order
        """
        self._lock = threading.Lock()
        self._animals: _Collection[Animal, AnimalInput] = _Collection(
            "animal", Animal.from_input, animals
        )
        self._modes: _Collection[LocomotionMode, LocomotionModeInput] = _Collection(
            "locomotion mode", LocomotionMode.from_input, locomotion_modes
        )

    @classmethod
    def seeded(cls) -> "InMemoryZooRepository":
        """Create a repository holding the fixed startup dataset."""
        return cls(animals=SEED_ANIMALS, locomotion_modes=SEED_LOCOMOTION_MODES)

    # Animals

    def list_animals(self) -> list[Animal]:
        with self._lock:
            return self._animals.snapshot()

    def get_animal(self, animal_id: int) -> Animal | None:
        with self._lock:
            return self._animals.find(animal_id)

    def create_animal(self, data: AnimalInput) -> Animal:
        with self._lock:
            animal = self._animals.create(data)
        logger.info("Created animal id=%s name=%s", animal.id, animal.name)
        return animal

    def update_animal(self, animal_id: int, data: AnimalInput) -> Animal | None:
        with self._lock:
            animal = self._animals.update(animal_id, data)
        self._log_update(self._animals.label, animal_id, animal is not None)
        return animal

    def delete_animal(self, animal_id: int) -> bool:
        with self._lock:
            removed = self._animals.delete(animal_id)
        self._log_delete(self._animals.label, animal_id, removed)
        return removed

    # Locomotion modes

    def list_locomotion_modes(self) -> list[LocomotionMode]:
        with self._lock:
            return self._modes.snapshot()

    def get_locomotion_mode(self, mode_id: int) -> LocomotionMode | None:
        with self._lock:
            return self._modes.find(mode_id)

    def create_locomotion_mode(self, data: LocomotionModeInput) -> LocomotionMode:
        with self._lock:
            mode = self._modes.create(data)
        logger.info("Created locomotion mode id=%s category=%s", mode.id, mode.category)
        return mode

    def update_locomotion_mode(
        self, mode_id: int, data: LocomotionModeInput
    ) -> LocomotionMode | None:
        with self._lock:
            mode = self._modes.update(mode_id, data)
        self._log_update(self._modes.label, mode_id, mode is not None)
        return mode

    def delete_locomotion_mode(self, mode_id: int) -> bool:
        with self._lock:
            removed = self._modes.delete(mode_id)
        self._log_delete(self._modes.label, mode_id, removed)
        return removed

    def filter_locomotion_modes_by_category(self, category: str) -> list[LocomotionMode]:
        with self._lock:
            return [mode for mode in self._modes.snapshot() if same_text(mode.category, category)]

    # Cross-collection queries

    def find_locomotion_modes_for_animal(self, animal_name: str) -> list[LocomotionMode]:
        with self._lock:
            result = []
            for animal in self._animals.snapshot():
                if not same_text(animal.name, animal_name):
                    continue
                mode = self._modes.find(animal.locomotion_mode_id)
                # Dangling references are skipped, not reported.
                if mode is not None:
                    result.append(mode)
            return result

    @staticmethod
    def _log_update(label: str, entity_id: int, found: bool) -> None:
        if found:
            logger.info("Updated %s id=%s", label, entity_id)
        else:
            logger.debug("Update skipped, no %s with id=%s", label, entity_id)

    @staticmethod
    def _log_delete(label: str, entity_id: int, removed: bool) -> None:
        if removed:
            logger.info("Deleted %s id=%s", label, entity_id)
        else:
            logger.debug("Delete skipped, no %s with id=%s", label, entity_id)
