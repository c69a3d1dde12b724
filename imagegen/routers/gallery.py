# imagegen/routers/gallery.py
from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, status
from sqlmodel import Session

from imagegen.core.security import get_current_user
from imagegen.database import get_db
from imagegen.models.gallery_image import (
    GalleryImageCreate,
    GalleryImageRead,
    GalleryImageUpdate,
    ShareRead,
)
from imagegen.schemas.common import SuccessResponse
from imagegen.services.gallery_service import (
    delete_gallery_image as svc_delete_gallery_image,
    list_gallery_for_user,
    save_to_gallery,
    share_image,
    update_gallery_image,
)

router = APIRouter(prefix="/gallery", tags=["gallery"])


@router.post(
    "",
    response_model=GalleryImageRead,
    status_code=status.HTTP_201_CREATED
)
def add_to_gallery(
    gallery_in: GalleryImageCreate,
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Save one of the user's completed generations to their gallery.
    """
    gallery_image = save_to_gallery(
        db,
        current_user.id,
        gallery_in.image_generation_id,
        title=gallery_in.title,
        is_public=gallery_in.is_public,
    )
    return GalleryImageRead.model_validate(gallery_image)


@router.get(
    "",
    response_model=List[GalleryImageRead],
    status_code=status.HTTP_200_OK,
    summary="List the current user's gallery, newest first"
)
def list_my_gallery(
    limit: Optional[int] = Query(None, gt=0, le=100),
    offset: Optional[int] = Query(None, ge=0),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    images = list_gallery_for_user(db, current_user.id, limit=limit, offset=offset)
    return [GalleryImageRead.model_validate(i) for i in images]


@router.patch(
    "/{gallery_image_id}",
    response_model=GalleryImageRead,
    status_code=status.HTTP_200_OK
)
def edit_gallery_image(
    gallery_in: GalleryImageUpdate,
    gallery_image_id: int = Path(..., description="The ID of the gallery image"),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Change title and/or visibility. Only fields sent in the body change.
    """
    changes = gallery_in.model_dump(exclude_unset=True)
    gallery_image = update_gallery_image(db, gallery_image_id, current_user.id, changes)
    return GalleryImageRead.model_validate(gallery_image)


@router.delete(
    "/{gallery_image_id}",
    response_model=SuccessResponse,
    status_code=status.HTTP_200_OK,
    summary="Remove an image from the gallery"
)
def remove_gallery_image(
    gallery_image_id: int = Path(..., description="The ID of the gallery image"),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return svc_delete_gallery_image(db, gallery_image_id, current_user.id)


@router.post(
    "/{gallery_image_id}/share",
    response_model=ShareRead,
    status_code=status.HTTP_200_OK,
    summary="Get a share link for a public gallery image"
)
def share_gallery_image(
    gallery_image_id: int = Path(..., description="The ID of the gallery image"),
    current_user=Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return share_image(db, gallery_image_id, current_user.id)
