"""
API routes package.

Contains the animal and locomotion mode endpoints.
"""

from src.api.routes.animals import router as animals_router
from src.api.routes.locomotion_modes import router as locomotion_modes_router

__all__ = ["animals_router", "locomotion_modes_router"]
