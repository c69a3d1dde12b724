from typing import List, Optional

from sqlmodel import Session, select

from imagegen.models.gallery_image import GalleryImage
from imagegen.models.image_generation import ImageGeneration

def get_gallery_image_for_user(db: Session, gallery_image_id: int, user_id: int) -> Optional[GalleryImage]:
    stmt = select(GalleryImage).where(
        GalleryImage.id == gallery_image_id,
        GalleryImage.user_id == user_id,
    )
    return db.exec(stmt).first()

def get_gallery_image_by_generation(db: Session, user_id: int, generation_id: int) -> Optional[GalleryImage]:
    stmt = select(GalleryImage).where(
        GalleryImage.user_id == user_id,
        GalleryImage.image_generation_id == generation_id,
    )
    return db.exec(stmt).first()

def get_gallery_images_for_generation(db: Session, generation_id: int) -> List[GalleryImage]:
    stmt = select(GalleryImage).where(GalleryImage.image_generation_id == generation_id)
    return db.exec(stmt).all()

def create_gallery_image(
    db: Session, user_id: int, generation_id: int, title: Optional[str], is_public: bool
) -> GalleryImage:
    gallery_image = GalleryImage(
        user_id=user_id,
        image_generation_id=generation_id,
        title=title,
        is_public=is_public,
    )
    db.add(gallery_image)
    db.commit()
    db.refresh(gallery_image)
    return gallery_image

def update_gallery_image(db: Session, gallery_image: GalleryImage, values: dict) -> GalleryImage:
    for field, value in values.items():
        setattr(gallery_image, field, value)
    db.add(gallery_image); db.commit(); db.refresh(gallery_image)
    return gallery_image

def delete_gallery_image(db: Session, gallery_image: GalleryImage) -> None:
    db.delete(gallery_image)
    db.commit()

def get_gallery_by_user(db: Session, user_id: int, limit: int = 20, offset: int = 0) -> List[GalleryImage]:
    stmt = (
        select(GalleryImage)
        .join(ImageGeneration, ImageGeneration.id == GalleryImage.image_generation_id)
        .where(GalleryImage.user_id == user_id)
        .order_by(GalleryImage.created_at.desc(), GalleryImage.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return db.exec(stmt).all()
