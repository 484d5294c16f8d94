"""
Animal routes.

Defines CRUD endpoints for animals and the animal-name to locomotion
mode query. Each handler makes exactly one repository call; response
models are built after the call returns.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_animal_name, get_entity_id, get_repository
from src.api.models import AnimalRequest, AnimalResponse, ErrorResponse, LocomotionModeResponse
from src.domain.ports import ZooRepository

router = APIRouter(prefix="/animals", tags=["animals"])

ANIMAL_NOT_FOUND = "Animal not found"

_id_errors = {
    400: {"model": ErrorResponse, "description": "Invalid identifier"},
    404: {"model": ErrorResponse, "description": "Animal not found"},
}


@router.get("", response_model=list[AnimalResponse], summary="List animals")
async def list_animals(
    repository: ZooRepository = Depends(get_repository),
) -> list[AnimalResponse]:
    """Return every animal in creation order."""
    return [AnimalResponse.from_domain(animal) for animal in repository.list_animals()]


@router.get(
    "/locomotion-modes/{animal_name:path}",
    response_model=list[LocomotionModeResponse],
    responses={400: {"model": ErrorResponse, "description": "Animal name not specified"}},
    summary="Locomotion modes of animals with a given name",
    description="Case-insensitive match on the animal name. Animals whose "
    "locomotion mode no longer exists are skipped. No match is an empty list.",
)
async def list_locomotion_modes_for_animal(
    animal_name: str = Depends(get_animal_name),
    repository: ZooRepository = Depends(get_repository),
) -> list[LocomotionModeResponse]:
    modes = repository.find_locomotion_modes_for_animal(animal_name)
    return [LocomotionModeResponse.from_domain(mode) for mode in modes]


@router.get(
    "/{entity_id}",
    response_model=AnimalResponse,
    responses=_id_errors,
    summary="Get an animal",
)
async def get_animal(
    animal_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> AnimalResponse:
    animal = repository.get_animal(animal_id)
    if animal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ANIMAL_NOT_FOUND)
    return AnimalResponse.from_domain(animal)


@router.post(
    "",
    response_model=AnimalResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Malformed body"}},
    summary="Create an animal",
)
async def create_animal(
    request_data: AnimalRequest,
    repository: ZooRepository = Depends(get_repository),
) -> AnimalResponse:
    """
    Create an animal.

    - **nombre**, **especie**, **domesticable**, **desplazamientoId**

    The identifier is assigned by the server.
    """
    animal = repository.create_animal(request_data.to_domain())
    return AnimalResponse.from_domain(animal)


@router.put(
    "/{entity_id}",
    response_model=AnimalResponse,
    responses=_id_errors,
    summary="Replace an animal",
    description="The identifier in the path is authoritative; all other "
    "fields are overwritten.",
)
async def update_animal(
    request_data: AnimalRequest,
    animal_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> AnimalResponse:
    animal = repository.update_animal(animal_id, request_data.to_domain())
    if animal is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ANIMAL_NOT_FOUND)
    return AnimalResponse.from_domain(animal)


@router.delete(
    "/{entity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_id_errors,
    summary="Delete an animal",
)
async def delete_animal(
    animal_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> Response:
    if not repository.delete_animal(animal_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ANIMAL_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
