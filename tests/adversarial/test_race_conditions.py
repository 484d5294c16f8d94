"""
Adversarial tests for concurrent repository access.

Verifies that every repository operation is a single critical section:
- Concurrent creates never share or skip identifiers
- Concurrent deletes of the same entity succeed exactly once
- The animal-name join never observes a torn state across collections

A single lock shared by both collections is what makes these hold.
"""

import threading
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

import pytest

from src.adapters.repository.memory import InMemoryZooRepository
from src.domain.entities import AnimalInput, LocomotionMode, LocomotionModeInput

# Apply adversarial marker to all tests in this module
pytestmark = pytest.mark.adversarial

T = TypeVar("T")


def run_concurrently(task: Callable[[int], T], count: int, workers: int = 16) -> list[T]:
    """Run task(0..count-1) on a thread pool and return results in submit order."""
    with ThreadPoolExecutor(max_workers=workers) as executor:
        futures = [executor.submit(task, index) for index in range(count)]
        return [f.result() for f in futures]


def animal_input(name: str, mode_id: int = 1) -> AnimalInput:
    return AnimalInput(name=name, species="Gato", domesticable=True, locomotion_mode_id=mode_id)


class TestConcurrentCreates:
    """Concurrent create stress tests."""

    @pytest.mark.parametrize("count", [10, 200])
    def test_concurrent_creates_get_contiguous_unique_ids(self, count: int) -> None:
        """K concurrent creates on an empty collection yield ids 1..K."""
        repo = InMemoryZooRepository()

        created = run_concurrently(lambda i: repo.create_animal(animal_input(f"a{i}")), count)

        ids = sorted(animal.id for animal in created)
        assert ids == list(range(1, count + 1))
        assert len(repo.list_animals()) == count

    def test_concurrent_creates_above_seed_counter(self) -> None:
        repo = InMemoryZooRepository.seeded()

        created = run_concurrently(
            lambda i: repo.create_locomotion_mode(LocomotionModeInput(f"m{i}", float(i))), 50
        )

        assert sorted(mode.id for mode in created) == list(range(4, 54))

    def test_creates_on_both_collections_interleave_safely(self) -> None:
        repo = InMemoryZooRepository()

        def create(index: int) -> int:
            if index % 2:
                return repo.create_animal(animal_input(f"a{index}")).id
            return repo.create_locomotion_mode(LocomotionModeInput(f"m{index}", 1.0)).id

        run_concurrently(create, 100)

        assert [a.id for a in repo.list_animals()] == sorted(a.id for a in repo.list_animals())
        assert {a.id for a in repo.list_animals()} == set(range(1, 51))
        assert {m.id for m in repo.list_locomotion_modes()} == set(range(1, 51))

    def test_list_order_matches_id_order(self) -> None:
        """Identifier allocation and append happen in the same critical section."""
        repo = InMemoryZooRepository()

        run_concurrently(lambda i: repo.create_animal(animal_input(f"a{i}")), 100)

        ids = [a.id for a in repo.list_animals()]
        assert ids == sorted(ids)


class TestConcurrentMutations:
    """Concurrent update/delete tests."""

    def test_concurrent_deletes_succeed_exactly_once(self) -> None:
        repo = InMemoryZooRepository.seeded()

        results = run_concurrently(lambda _: repo.delete_animal(2), 20)

        assert results.count(True) == 1
        assert results.count(False) == 19
        assert [a.id for a in repo.list_animals()] == [1, 3, 4]

    def test_creates_and_deletes_never_reuse_ids(self) -> None:
        repo = InMemoryZooRepository()
        seen: list[int] = []
        seen_lock = threading.Lock()

        def churn(index: int) -> None:
            animal = repo.create_animal(animal_input(f"a{index}"))
            with seen_lock:
                seen.append(animal.id)
            repo.delete_animal(animal.id)

        run_concurrently(churn, 200)

        assert sorted(seen) == list(range(1, 201))
        assert repo.list_animals() == []
        assert repo.create_animal(animal_input("last")).id == 201

    def test_concurrent_updates_leave_one_consistent_value(self) -> None:
        repo = InMemoryZooRepository.seeded()

        run_concurrently(
            lambda i: repo.update_locomotion_mode(1, LocomotionModeInput(f"t{i}", float(i))), 50
        )

        mode = repo.get_locomotion_mode(1)
        assert mode is not None
        assert mode.category == f"t{int(mode.speed)}"
        assert [m.id for m in repo.list_locomotion_modes()] == [1, 2, 3]


class TestJoinConsistency:
    """The join reads both collections at one instant."""

    def test_join_never_sees_half_applied_pairs(self) -> None:
        """
        Writers add a mode, then an animal pointing at it, then delete both.

        Readers must only ever see modes that belong to a named animal's
        current reference; every result entry must be a mode that existed.
        """
        repo = InMemoryZooRepository(
            locomotion_modes=[LocomotionMode(id=1, category="Terrestre", speed=50.0)]
        )
        repo.create_animal(animal_input("Rui", mode_id=1))
        stop = threading.Event()
        violations: list[str] = []

        def writer() -> None:
            while not stop.is_set():
                mode = repo.create_locomotion_mode(LocomotionModeInput("Aéreo", 200.0))
                animal = repo.create_animal(animal_input("Rui", mode_id=mode.id))
                repo.delete_animal(animal.id)
                repo.delete_locomotion_mode(mode.id)

        def reader(_: int) -> None:
            for _ in range(300):
                modes = repo.find_locomotion_modes_for_animal("rui")
                if not modes or modes[0].id != 1:
                    violations.append(f"missing stable mode: {modes}")
                if len({m.id for m in modes}) != len(modes):
                    violations.append(f"duplicate modes: {modes}")

        writer_thread = threading.Thread(target=writer)
        writer_thread.start()
        try:
            run_concurrently(reader, 8, workers=8)
        finally:
            stop.set()
            writer_thread.join()

        assert violations == []
        assert repo.find_locomotion_modes_for_animal("Rui") == [
            LocomotionMode(id=1, category="Terrestre", speed=50.0)
        ]

    def test_snapshots_are_stable_under_writes(self) -> None:
        repo = InMemoryZooRepository.seeded()
        snapshot = repo.list_animals()

        run_concurrently(lambda i: repo.create_animal(animal_input(f"a{i}")), 50)

        assert len(snapshot) == 4
        assert len(repo.list_animals()) == 54
