# imagegen/services/gallery_service.py
import logging
import secrets
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlmodel import Session

from imagegen.core.config import settings
from imagegen.core.errors import (
    AccessDeniedError,
    ConflictError,
    InvalidStateError,
    NotFoundError,
)
from imagegen.models.gallery_image import GalleryImage
from imagegen.models.image_generation import GenerationStatus
from imagegen.repositories.gallery_repo import (
    create_gallery_image,
    delete_gallery_image as repo_delete,
    get_gallery_by_user,
    get_gallery_image_by_generation,
    get_gallery_image_for_user,
    update_gallery_image as repo_update,
)
from imagegen.repositories.generation_repo import get_generation
from imagegen.services.access import is_owner, is_public

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20
UPDATABLE_FIELDS = ("title", "is_public")

ALREADY_SAVED = "Image generation is already saved to gallery"
NOT_FOUND_OR_NOT_OWNED = "Gallery image not found or does not belong to user"

def save_to_gallery(
    db: Session,
    user_id: int,
    generation_id: int,
    title: Optional[str] = None,
    is_public: bool = False,
) -> GalleryImage:
    generation = get_generation(db, generation_id)
    # missing, foreign and unfinished generations share one message
    if (
        generation is None
        or not is_owner(generation, user_id)
        or generation.status != GenerationStatus.COMPLETED
    ):
        raise NotFoundError(
            "Image generation not found, does not belong to user, or is not completed"
        )

    if get_gallery_image_by_generation(db, user_id, generation_id):
        raise ConflictError(ALREADY_SAVED)

    try:
        gallery_image = create_gallery_image(
            db, user_id, generation_id, title=title or None, is_public=bool(is_public)
        )
    except IntegrityError:
        db.rollback()
        raise ConflictError(ALREADY_SAVED)

    logger.info("User %s saved generation %s to gallery as %s", user_id, generation_id, gallery_image.id)
    return gallery_image

def update_gallery_image(
    db: Session, gallery_image_id: int, user_id: int, changes: dict
) -> GalleryImage:
    """
    Apply `changes` to the owned gallery image. Only keys present in
    `changes` are written, so {"title": None} clears the title while a
    missing "title" key leaves it alone. An empty dict is a no-op.
    """
    gallery_image = get_gallery_image_for_user(db, gallery_image_id, user_id)
    if gallery_image is None:
        raise NotFoundError(NOT_FOUND_OR_NOT_OWNED)

    values = {k: v for k, v in changes.items() if k in UPDATABLE_FIELDS}
    # is_public is a NOT NULL flag, an explicit null means "leave it"
    if values.get("is_public", False) is None:
        values.pop("is_public")
    if not values:
        return gallery_image

    gallery_image = repo_update(db, gallery_image, values)
    logger.info("Gallery image %s updated: %s", gallery_image.id, sorted(values))
    return gallery_image

def delete_gallery_image(db: Session, gallery_image_id: int, user_id: int) -> dict:
    gallery_image = get_gallery_image_for_user(db, gallery_image_id, user_id)
    if gallery_image is None:
        raise NotFoundError(NOT_FOUND_OR_NOT_OWNED)

    repo_delete(db, gallery_image)
    logger.info("Gallery image %s deleted by user %s", gallery_image_id, user_id)
    return {"success": True}

def list_gallery_for_user(
    db: Session, user_id: int, limit: Optional[int] = None, offset: Optional[int] = None
) -> List[GalleryImage]:
    return get_gallery_by_user(
        db,
        user_id,
        limit=DEFAULT_LIMIT if limit is None else limit,
        offset=0 if offset is None else offset,
    )

def share_image(db: Session, gallery_image_id: int, user_id: int) -> dict:
    gallery_image = get_gallery_image_for_user(db, gallery_image_id, user_id)
    if gallery_image is None:
        raise AccessDeniedError(
            "Gallery image not found or you do not have permission to share it"
        )
    if not is_public(gallery_image):
        raise InvalidStateError("Only public images can be shared")

    # TODO: persist share tokens so shared links can be checked and revoked
    token = secrets.token_hex(32)
    share_url = f"{settings.SHARE_BASE_URL.rstrip('/')}/shared/image/{gallery_image.id}?token={token}"
    logger.info("Share link issued for gallery image %s", gallery_image.id)
    return {"shareUrl": share_url}
