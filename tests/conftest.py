"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Seeded and empty in-memory repositories
- A full application wired to a fresh repository
- Test client setup
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.adapters.repository.memory import InMemoryZooRepository
from src.api.main import create_app
from src.config.settings import Settings


@pytest.fixture
def seeded_repository() -> InMemoryZooRepository:
    """Repository holding the startup dataset (4 animals, 3 modes)."""
    return InMemoryZooRepository.seeded()


@pytest.fixture
def empty_repository() -> InMemoryZooRepository:
    """Repository with both collections empty."""
    return InMemoryZooRepository()


@pytest.fixture
def app(seeded_repository: InMemoryZooRepository) -> FastAPI:
    """Create the full application around a fresh seeded repository."""
    return create_app(settings=Settings(), repository=seeded_repository)


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)
