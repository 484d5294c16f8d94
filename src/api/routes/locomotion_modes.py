"""
Locomotion mode routes.

Defines CRUD endpoints for locomotion modes plus the category filter.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_category, get_entity_id, get_repository
from src.api.models import ErrorResponse, LocomotionModeRequest, LocomotionModeResponse
from src.domain.ports import ZooRepository

router = APIRouter(prefix="/locomotion-modes", tags=["locomotion-modes"])

MODE_NOT_FOUND = "Locomotion mode not found"

_id_errors = {
    400: {"model": ErrorResponse, "description": "Invalid identifier"},
    404: {"model": ErrorResponse, "description": "Locomotion mode not found"},
}


@router.get("", response_model=list[LocomotionModeResponse], summary="List locomotion modes")
async def list_locomotion_modes(
    repository: ZooRepository = Depends(get_repository),
) -> list[LocomotionModeResponse]:
    return [LocomotionModeResponse.from_domain(mode) for mode in repository.list_locomotion_modes()]


@router.get(
    "/category/{category:path}",
    response_model=list[LocomotionModeResponse],
    responses={400: {"model": ErrorResponse, "description": "Category not specified"}},
    summary="Filter locomotion modes by category",
    description="Case-insensitive exact match. No match is an empty list, not a 404.",
)
async def filter_locomotion_modes(
    category: str = Depends(get_category),
    repository: ZooRepository = Depends(get_repository),
) -> list[LocomotionModeResponse]:
    modes = repository.filter_locomotion_modes_by_category(category)
    return [LocomotionModeResponse.from_domain(mode) for mode in modes]


@router.get(
    "/{entity_id}",
    response_model=LocomotionModeResponse,
    responses=_id_errors,
    summary="Get a locomotion mode",
)
async def get_locomotion_mode(
    mode_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> LocomotionModeResponse:
    mode = repository.get_locomotion_mode(mode_id)
    if mode is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MODE_NOT_FOUND)
    return LocomotionModeResponse.from_domain(mode)


@router.post(
    "",
    response_model=LocomotionModeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Malformed body"}},
    summary="Create a locomotion mode",
)
async def create_locomotion_mode(
    request_data: LocomotionModeRequest,
    repository: ZooRepository = Depends(get_repository),
) -> LocomotionModeResponse:
    mode = repository.create_locomotion_mode(request_data.to_domain())
    return LocomotionModeResponse.from_domain(mode)


@router.put(
    "/{entity_id}",
    response_model=LocomotionModeResponse,
    responses=_id_errors,
    summary="Replace a locomotion mode",
)
async def update_locomotion_mode(
    request_data: LocomotionModeRequest,
    mode_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> LocomotionModeResponse:
    mode = repository.update_locomotion_mode(mode_id, request_data.to_domain())
    if mode is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MODE_NOT_FOUND)
    return LocomotionModeResponse.from_domain(mode)


@router.delete(
    "/{entity_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_id_errors,
    summary="Delete a locomotion mode",
    description="Animals referencing the deleted mode are left untouched.",
)
async def delete_locomotion_mode(
    mode_id: int = Depends(get_entity_id),
    repository: ZooRepository = Depends(get_repository),
) -> Response:
    if not repository.delete_locomotion_mode(mode_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MODE_NOT_FOUND)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
