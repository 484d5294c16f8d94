"""
Domain layer - Entities, ports and validation with zero framework imports.

This package defines the catalog's value records, the repository port
that adapters implement, and the request parameter rules shared by the
API layer.
"""

from .entities import Animal, AnimalInput, LocomotionMode, LocomotionModeInput
from .exceptions import CatalogError, EmptyParameter, InvalidIdentifier
from .ports import ZooRepository
from .validation import parse_identifier, require_text, same_text

__all__ = [
    "Animal",
    "AnimalInput",
    "CatalogError",
    "EmptyParameter",
    "InvalidIdentifier",
    "LocomotionMode",
    "LocomotionModeInput",
    "ZooRepository",
    "parse_identifier",
    "require_text",
    "same_text",
]
