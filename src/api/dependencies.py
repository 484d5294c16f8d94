"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting the repository
and validated path parameters into routes. Parameter factories turn
domain validation errors into 400 responses.
"""

from fastapi import HTTPException, Request, status

from src.domain.exceptions import EmptyParameter, InvalidIdentifier
from src.domain.ports import ZooRepository
from src.domain.validation import parse_identifier, require_text


def get_repository(request: Request) -> ZooRepository:
    """
    Get repository from app state.

    The repository is created by the application factory and stored in
    app.state, so every request shares the same instance.
    """
    return request.app.state.repository


def get_entity_id(entity_id: str) -> int:
    """Parse the {entity_id} path segment as an identifier."""
    try:
        return parse_identifier(entity_id)
    except InvalidIdentifier:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid identifier",
        ) from None


def get_category(category: str) -> str:
    """Require a non-blank {category} path segment."""
    try:
        return require_text(category, "category")
    except EmptyParameter:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Category not specified",
        ) from None


def get_animal_name(animal_name: str) -> str:
    """Require a non-blank {animal_name} path segment."""
    try:
        return require_text(animal_name, "animal_name")
    except EmptyParameter:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Animal name not specified",
        ) from None
