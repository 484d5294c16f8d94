"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the repository interface the API layer requires.
Adapters implement it structurally, without inheriting from it.
"""

from typing import Protocol

from .entities import Animal, AnimalInput, LocomotionMode, LocomotionModeInput


class ZooRepository(Protocol):
    """
    Port interface for the animal and locomotion mode catalog.

    Every operation is a single critical section: implementations hold
    one lock, shared by both collections, for the whole call. Lookups
    report absence as None (or False for deletes), never by raising.
    """

    def list_animals(self) -> list[Animal]:
        """Return a snapshot copy of all animals in collection order."""
        ...

    def get_animal(self, animal_id: int) -> Animal | None:
        """Return the animal with this identifier, or None."""
        ...

    def create_animal(self, data: AnimalInput) -> Animal:
        """
        Store a new animal under the next identifier.

        The counter is incremented before use, so a collection seeded
        with N animals assigns N + 1 to the first created one.
        Identifiers are never reused, even after deletes.
        """
        ...

    def update_animal(self, animal_id: int, data: AnimalInput) -> Animal | None:
        """Replace the animal in place, keeping its identifier and position."""
        ...

    def delete_animal(self, animal_id: int) -> bool:
        """Remove the animal; return whether anything was removed."""
        ...

    def list_locomotion_modes(self) -> list[LocomotionMode]:
        """Return a snapshot copy of all locomotion modes in collection order."""
        ...

    def get_locomotion_mode(self, mode_id: int) -> LocomotionMode | None:
        """Return the locomotion mode with this identifier, or None."""
        ...

    def create_locomotion_mode(self, data: LocomotionModeInput) -> LocomotionMode:
        """Store a new locomotion mode under the next identifier."""
        ...

    def update_locomotion_mode(
        self, mode_id: int, data: LocomotionModeInput
    ) -> LocomotionMode | None:
        """Replace the locomotion mode in place, keeping its identifier and position."""
        ...

    def delete_locomotion_mode(self, mode_id: int) -> bool:
        """Remove the locomotion mode; return whether anything was removed."""
        ...

    def filter_locomotion_modes_by_category(self, category: str) -> list[LocomotionMode]:
        """Return modes whose category matches case-insensitively."""
        ...

    def find_locomotion_modes_for_animal(self, animal_name: str) -> list[LocomotionMode]:
        """
        Resolve the locomotion modes of every animal with this name.

        Names match case-insensitively. Animals whose referenced mode no
        longer exists are skipped. Both collections are read under one
        lock acquisition so the result reflects a single instant.
        """
        ...
