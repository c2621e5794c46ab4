"""
User-related endpoints.

Volunteers use these to contact adopters directly.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_adoption_service
from api.errors import http_error
from modules.adoptions.interfaces import IAdoptionService
from shared.exceptions import ShelterError

router = APIRouter()


@router.post("/{user_id}/warning", status_code=204)
async def warn_user(
    user_id: int,
    service: IAdoptionService = Depends(get_adoption_service),
) -> None:
    """
    Warn an adopter that their daily reports are not detailed enough.

    Returns 502 if the message could not be delivered.
    """
    try:
        await service.warning_user(user_id)
    except ShelterError as e:
        raise http_error(e)
