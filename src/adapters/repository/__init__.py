"""Repository adapters - In-memory implementations."""

from .memory import InMemoryZooRepository

__all__ = ["InMemoryZooRepository"]
