"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Wire field names are Spanish (nombre, especie, ...) and are mapped onto the
domain's attribute names through aliases. Unknown request fields are ignored.
"""

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import Animal, AnimalInput, LocomotionMode, LocomotionModeInput
from src.domain.validation import INT32_MAX, INT32_MIN


class AnimalRequest(BaseModel):
    """Request model for creating or replacing an animal."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="nombre", description="Animal name")
    species: str = Field(..., alias="especie", description="Species")
    domesticable: bool = Field(..., description="Whether the animal can be domesticated")
    locomotion_mode_id: int = Field(
        ...,
        alias="desplazamientoId",
        ge=INT32_MIN,
        le=INT32_MAX,
        description="Identifier of the animal's locomotion mode (not checked for existence)",
    )

    def to_domain(self) -> AnimalInput:
        return AnimalInput(
            name=self.name,
            species=self.species,
            domesticable=self.domesticable,
            locomotion_mode_id=self.locomotion_mode_id,
        )


class AnimalResponse(BaseModel):
    """Response model for a stored animal."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    name: str = Field(..., alias="nombre")
    species: str = Field(..., alias="especie")
    domesticable: bool
    locomotion_mode_id: int = Field(..., alias="desplazamientoId")

    @classmethod
    def from_domain(cls, animal: Animal) -> "AnimalResponse":
        return cls(
            id=animal.id,
            name=animal.name,
            species=animal.species,
            domesticable=animal.domesticable,
            locomotion_mode_id=animal.locomotion_mode_id,
        )


class LocomotionModeRequest(BaseModel):
    """Request model for creating or replacing a locomotion mode."""

    model_config = ConfigDict(populate_by_name=True)

    category: str = Field(
        ..., alias="tipo", description='Movement category, e.g. "Aéreo", "Acuático", "Terrestre"'
    )
    speed: float = Field(
        ..., alias="velocidad", allow_inf_nan=False, description="Speed in km/h"
    )

    def to_domain(self) -> LocomotionModeInput:
        return LocomotionModeInput(category=self.category, speed=self.speed)


class LocomotionModeResponse(BaseModel):
    """Response model for a stored locomotion mode."""

    model_config = ConfigDict(populate_by_name=True)

    id: int
    category: str = Field(..., alias="tipo")
    speed: float = Field(..., alias="velocidad", allow_inf_nan=False)

    @classmethod
    def from_domain(cls, mode: LocomotionMode) -> "LocomotionModeResponse":
        return cls(id=mode.id, category=mode.category, speed=mode.speed)


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
