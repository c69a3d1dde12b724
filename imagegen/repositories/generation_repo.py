from datetime import datetime, timezone
from typing import List, Optional
from uuid import uuid4

from sqlmodel import Session, select

from imagegen.models.image_generation import GenerationStatus, ImageGeneration

def new_image_filename() -> str:
    return f"generated_{uuid4()}.png"

def create_generation_record(db: Session, user_id: int, prompt: str) -> ImageGeneration:
    """
    Insert a pending ImageGeneration with an empty image_url and a fresh
    unique filename, and return it (populated with its new .id).
    """
    generation = ImageGeneration(
        user_id=user_id,
        prompt=prompt,
        image_url="",
        image_filename=new_image_filename(),
        status=GenerationStatus.PENDING,
    )
    db.add(generation)
    db.commit()
    db.refresh(generation)
    return generation

def mark_completed(db: Session, generation: ImageGeneration, image_url: str) -> ImageGeneration:
    generation.status = GenerationStatus.COMPLETED
    generation.image_url = image_url
    generation.completed_at = datetime.now(timezone.utc)
    db.add(generation); db.commit(); db.refresh(generation)
    return generation

def mark_failed(db: Session, generation: ImageGeneration) -> ImageGeneration:
    generation.status = GenerationStatus.FAILED
    generation.completed_at = datetime.now(timezone.utc)
    db.add(generation); db.commit(); db.refresh(generation)
    return generation

def get_generation(db: Session, generation_id: int) -> Optional[ImageGeneration]:
    return db.get(ImageGeneration, generation_id)

def get_generations_by_user(
    db: Session,
    user_id: int,
    status: Optional[GenerationStatus] = None,
    limit: int = 20,
    offset: int = 0,
) -> List[ImageGeneration]:
    stmt = select(ImageGeneration).where(ImageGeneration.user_id == user_id)
    if status is not None:
        stmt = stmt.where(ImageGeneration.status == status)
    stmt = (
        stmt.order_by(ImageGeneration.created_at.desc(), ImageGeneration.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return db.exec(stmt).all()
