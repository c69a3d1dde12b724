# imagegen/models/gallery_image.py
from typing import Optional
from datetime import datetime, timezone
from pydantic import field_validator
from sqlalchemy import UniqueConstraint
from sqlmodel import SQLModel, Field

class GalleryImageBase(SQLModel):
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    image_generation_id: int = Field(foreign_key="image_generations.id", nullable=False)
    title: Optional[str] = Field(default=None, max_length=100)
    is_public: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

class GalleryImage(GalleryImageBase, table=True):
    __tablename__ = "gallery_images"
    # one gallery entry per (user, generation)
    __table_args__ = (
        UniqueConstraint("user_id", "image_generation_id", name="uq_gallery_user_generation"),
    )

    id: Optional[int] = Field(default=None, primary_key=True)

class GalleryImageCreate(SQLModel):
    image_generation_id: int
    title: Optional[str] = Field(default=None, max_length=100)
    is_public: bool = False

class GalleryImageUpdate(SQLModel):
    """
    Partial update. Fields left out of the request body are not touched;
    an explicit `"title": null` clears the title.
    """
    title: Optional[str] = Field(default=None, max_length=100)
    is_public: Optional[bool] = None

    @field_validator("is_public")
    @classmethod
    def _is_public_not_null(cls, value: Optional[bool]) -> Optional[bool]:
        # only runs for values actually sent; omitting the field is fine
        if value is None:
            raise ValueError("is_public may be omitted but not null")
        return value

class GalleryImageRead(GalleryImageBase):
    id: int

class ShareRead(SQLModel):
    shareUrl: str
