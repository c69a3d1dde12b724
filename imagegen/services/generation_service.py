# imagegen/services/generation_service.py
import logging
from typing import List, Optional

from sqlmodel import Session

from imagegen.core.errors import AccessDeniedError, InvalidStateError, NotFoundError
from imagegen.models.image_generation import GenerationStatus, ImageGeneration
from imagegen.providers import ImageProvider
from imagegen.repositories.gallery_repo import get_gallery_images_for_generation
from imagegen.repositories.generation_repo import (
    create_generation_record,
    get_generation,
    get_generations_by_user,
    mark_completed,
    mark_failed,
)
from imagegen.repositories.user_repo import get_user
from imagegen.services.access import any_public, is_owner

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 20

def generate_image(
    db: Session, user_id: int, prompt: str, provider: ImageProvider
) -> ImageGeneration:
    """
    Create a pending generation, hand the prompt to `provider` and record
    the outcome. Provider failures end up as a FAILED record, never as an
    exception to the caller.
    """
    if get_user(db, user_id) is None:
        raise NotFoundError("User not found")

    # 1) pending placeholder with its filename
    generation = create_generation_record(db, user_id, prompt)
    logger.info("Generation %s started for user %s", generation.id, user_id)

    # 2) call out to the provider
    try:
        image_url = provider.generate(prompt, generation.image_filename)
    except Exception as exc:
        logger.warning("Generation %s failed: %s", generation.id, exc)
        return mark_failed(db, generation)

    # 3) terminal success
    generation = mark_completed(db, generation, image_url)
    logger.info("Generation %s completed", generation.id)
    return generation

def list_generations_for_user(
    db: Session,
    user_id: int,
    status: Optional[GenerationStatus] = None,
    limit: Optional[int] = None,
    offset: Optional[int] = None,
) -> List[ImageGeneration]:
    return get_generations_by_user(
        db,
        user_id,
        status=status,
        limit=DEFAULT_LIMIT if limit is None else limit,
        offset=0 if offset is None else offset,
    )

def download_image(db: Session, generation_id: int, requester_id: int) -> dict:
    generation = get_generation(db, generation_id)
    if generation is None:
        raise NotFoundError("Image generation not found")
    if generation.status != GenerationStatus.COMPLETED:
        raise InvalidStateError("Image is not ready for download")

    if not is_owner(generation, requester_id):
        # non-owners get through only via a public gallery entry
        if not any_public(get_gallery_images_for_generation(db, generation_id)):
            logger.info("Denied download of generation %s to user %s", generation_id, requester_id)
            raise AccessDeniedError("You do not have permission to download this image")

    return {"downloadUrl": generation.image_url, "filename": generation.image_filename}
