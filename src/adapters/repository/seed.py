"""Startup dataset for the in-memory repository."""

from src.domain.entities import Animal, LocomotionMode

SEED_LOCOMOTION_MODES = (
    LocomotionMode(id=1, category="Terrestre", speed=50.0),
    LocomotionMode(id=2, category="Aéreo", speed=200.0),
    LocomotionMode(id=3, category="Acuático", speed=30.0),
)

SEED_ANIMALS = (
    Animal(id=1, name="Cholito", species="Perro", domesticable=True, locomotion_mode_id=1),
    Animal(id=2, name="Rui", species="Gato", domesticable=True, locomotion_mode_id=1),
    Animal(id=3, name="Nemo", species="Pez payaso", domesticable=False, locomotion_mode_id=3),
    Animal(id=4, name="Pájaro", species="Loro", domesticable=True, locomotion_mode_id=2),
)
