"""
Domain entities - Immutable value records for the zoo catalog.

Animals reference a locomotion mode by identifier only; nothing is
embedded, and the reference is not checked at write time.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LocomotionModeInput:
    """Creation/update payload for a locomotion mode (no identifier)."""

    category: str
    speed: float


@dataclass(frozen=True)
class LocomotionMode:
    """
    How an animal moves.

    category is conceptually one of "aerial", "aquatic" or "terrestrial"
    but any text is accepted. speed is in km/h with no enforced range.
    """

    id: int
    category: str
    speed: float

    @classmethod
    def from_input(cls, id: int, data: LocomotionModeInput) -> "LocomotionMode":
        return cls(id=id, category=data.category, speed=data.speed)


@dataclass(frozen=True)
class AnimalInput:
    """Creation/update payload for an animal (no identifier)."""

    name: str
    species: str
    domesticable: bool
    locomotion_mode_id: int


@dataclass(frozen=True)
class Animal:
    """An animal in the catalog."""

    id: int
    name: str
    species: str
    domesticable: bool
    locomotion_mode_id: int

    @classmethod
    def from_input(cls, id: int, data: AnimalInput) -> "Animal":
        return cls(
            id=id,
            name=data.name,
            species=data.species,
            domesticable=data.domesticable,
            locomotion_mode_id=data.locomotion_mode_id,
        )
