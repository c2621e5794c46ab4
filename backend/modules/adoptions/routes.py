"""
Adoption API endpoints.

Volunteer-facing REST endpoints for the adoption lifecycle. The species
path segment ("dog" / "cat") selects the shelter.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from api.dependencies import get_adoption_service, get_clock, get_shelter_directory
from api.errors import http_error
from modules.shelters.service import ShelterDirectory
from shared.clock import Clock
from shared.exceptions import ShelterError

from .interfaces import IAdoptionService
from .models import (
    ActiveAdoptionResponse,
    Adoption,
    CreateAdoptionRequest,
    TrialDateUpdateRequest,
)

router = APIRouter()


@router.get("/active", response_model=ActiveAdoptionResponse)
async def get_active_adoption(
    user_id: int = Query(..., description="Adopter user ID"),
    on_date: Optional[date] = Query(default=None, alias="date", description="Defaults to today"),
    service: IAdoptionService = Depends(get_adoption_service),
    directory: ShelterDirectory = Depends(get_shelter_directory),
    clock: Clock = Depends(get_clock),
) -> ActiveAdoptionResponse:
    """
    Get the adoption a user has active on a date, in the user's own shelter.
    """
    day = on_date or clock.today()
    try:
        user = directory.get_user(user_id)
        adoption = await service.get_active_adoption(user, day)
    except ShelterError as e:
        raise http_error(e)
    return ActiveAdoptionResponse(user_id=user_id, on_date=day, adoption=adoption)


@router.post("/{species}", response_model=Adoption, status_code=201)
async def create_adoption(
    species: str,
    request: CreateAdoptionRequest,
    service: IAdoptionService = Depends(get_adoption_service),
) -> Adoption:
    """
    Register an adoption starting today.

    Fails with 409 if the user or the pet is already in a trial period.
    """
    try:
        return await service.create_adoption(
            species, request.user_id, request.pet_id, request.trial_end_date
        )
    except ShelterError as e:
        raise http_error(e)


@router.get("/{species}", response_model=list[Adoption])
async def list_adoptions(
    species: str,
    service: IAdoptionService = Depends(get_adoption_service),
) -> list[Adoption]:
    """List every adoption of a shelter."""
    try:
        return await service.get_all_adoptions(species)
    except ShelterError as e:
        raise http_error(e)


@router.get("/{species}/active", response_model=list[Adoption])
async def list_active_adoptions(
    species: str,
    service: IAdoptionService = Depends(get_adoption_service),
) -> list[Adoption]:
    """List adoptions of a shelter whose trial window contains today."""
    try:
        return await service.get_all_active_adoptions(species)
    except ShelterError as e:
        raise http_error(e)


@router.get("/{species}/{adoption_id}", response_model=Adoption)
async def get_adoption(
    species: str,
    adoption_id: int,
    service: IAdoptionService = Depends(get_adoption_service),
) -> Adoption:
    try:
        return await service.get_adoption(species, adoption_id)
    except ShelterError as e:
        raise http_error(e)


@router.patch("/{species}/{adoption_id}/trial-date", response_model=Adoption)
async def set_trial_date(
    species: str,
    adoption_id: int,
    request: TrialDateUpdateRequest,
    service: IAdoptionService = Depends(get_adoption_service),
) -> Adoption:
    """
    Move the end of a trial period.

    The adopter is notified first; if the message can't be delivered the
    trial is left unchanged and 502 is returned.
    """
    try:
        return await service.set_trial_date(species, adoption_id, request.trial_end_date)
    except ShelterError as e:
        raise http_error(e)


@router.delete("/{species}/{adoption_id}", response_model=Adoption)
async def delete_adoption(
    species: str,
    adoption_id: int,
    service: IAdoptionService = Depends(get_adoption_service),
) -> Adoption:
    """Delete an adoption and return it as it was."""
    try:
        return await service.delete_adoption(species, adoption_id)
    except ShelterError as e:
        raise http_error(e)
