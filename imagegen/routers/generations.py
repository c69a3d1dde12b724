# imagegen/routers/generations.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlmodel import Session

from imagegen.core.security import get_current_user
from imagegen.database import get_db
from imagegen.models.image_generation import (
    DownloadRead,
    GenerationStatus,
    ImageGenerationCreate,
    ImageGenerationRead,
)
from imagegen.providers import ImageProvider, get_image_provider
from imagegen.services.generation_service import (
    download_image as svc_download_image,
    generate_image,
    list_generations_for_user,
)

router = APIRouter(prefix="/generations", tags=["generations"])


@router.post(
    "",
    response_model=ImageGenerationRead,
    status_code=status.HTTP_201_CREATED,
)
def create_generation(
    generation_in: ImageGenerationCreate,
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
    provider: ImageProvider = Depends(get_image_provider),
):
    """
    Generate an image from a prompt for the authenticated user.
    The returned record is always completed or failed.
    """
    generation = generate_image(db, current_user.id, generation_in.prompt, provider)
    return ImageGenerationRead.model_validate(generation)


@router.get(
    "",
    response_model=List[ImageGenerationRead],
    status_code=status.HTTP_200_OK,
    summary="List the current user's generations, newest first"
)
def list_my_generations(
    status_filter: Optional[GenerationStatus] = Query(None, alias="status"),
    limit: Optional[int] = Query(None, gt=0, le=100),
    offset: Optional[int] = Query(None, ge=0),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    generations = list_generations_for_user(
        db, current_user.id, status=status_filter, limit=limit, offset=offset
    )
    return [ImageGenerationRead.model_validate(g) for g in generations]


@router.get(
    "/{generation_id}/download",
    response_model=DownloadRead,
    status_code=status.HTTP_200_OK,
    summary="Download link for a completed generation"
)
def download_generation(
    generation_id: int = Path(..., description="The ID of the generation to download"),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Owners can always download; anyone else only when the image sits in a
    public gallery entry.
    """
    return svc_download_image(db, generation_id, current_user.id)
