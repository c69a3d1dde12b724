# imagegen/models/image_generation.py
from typing import Optional
from datetime import datetime, timezone
from enum import Enum
from sqlmodel import SQLModel, Field

class GenerationStatus(str, Enum):
    PENDING   = "pending"
    COMPLETED = "completed"
    FAILED    = "failed"

TERMINAL_STATUSES = (GenerationStatus.COMPLETED, GenerationStatus.FAILED)

class ImageGenerationBase(SQLModel):
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    prompt: str = Field(nullable=False)
    image_url: str = Field(default="", nullable=False)
    image_filename: str = Field(nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)

class ImageGeneration(ImageGenerationBase, table=True):
    __tablename__ = "image_generations"

    id: Optional[int] = Field(default=None, primary_key=True)
    status: GenerationStatus = Field(default=GenerationStatus.PENDING, nullable=False, index=True)
    completed_at: Optional[datetime] = None

class ImageGenerationCreate(SQLModel):
    prompt: str = Field(min_length=1, max_length=1000)

class ImageGenerationRead(ImageGenerationBase):
    id: int
    status: GenerationStatus
    completed_at: Optional[datetime]

class DownloadRead(SQLModel):
    downloadUrl: str
    filename: str
