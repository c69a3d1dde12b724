"""Shared pytest fixtures for the image generation gallery tests."""

import os

# Settings are read at import time, so the environment has to be in place
# before anything from imagegen is imported.
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime, timedelta, timezone
from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from imagegen.core.security import hash_password
from imagegen.database import get_db
from imagegen.main import app
from imagegen.models.gallery_image import GalleryImage
from imagegen.models.image_generation import GenerationStatus, ImageGeneration
from imagegen.models.user import User
from imagegen.providers import SimulatedImageProvider, get_image_provider

TEST_IMAGE_BASE_URL = "https://images.test"
PASSWORD = "password123"


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across threads for one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        SQLModel.metadata.drop_all(engine)
        engine.dispose()


@pytest.fixture
def session(engine) -> Generator[Session, None, None]:
    with Session(engine) as session:
        yield session


@pytest.fixture
def provider() -> SimulatedImageProvider:
    return SimulatedImageProvider(base_url=TEST_IMAGE_BASE_URL, failure_trigger="error")


@pytest.fixture
def client(session: Session, provider: SimulatedImageProvider) -> Generator[TestClient, None, None]:
    """TestClient bound to the test session and the simulated provider."""

    def _get_db():
        yield session

    app.dependency_overrides[get_db] = _get_db
    app.dependency_overrides[get_image_provider] = lambda: provider
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def make_user(session: Session):
    """Factory inserting a user straight into the database."""
    counter = {"n": 0}

    def _make_user(email: Optional[str] = None, username: Optional[str] = None) -> User:
        counter["n"] += 1
        n = counter["n"]
        user = User(
            email=email or f"user{n}@example.com",
            username=username or f"user{n}",
            password_hash=hash_password(PASSWORD),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_generation(session: Session):
    """Factory inserting an ImageGeneration in any status."""
    counter = {"n": 0}
    base = datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc)

    def _make_generation(
        user: User,
        status: GenerationStatus = GenerationStatus.COMPLETED,
        prompt: str = "a test prompt",
        created_at: Optional[datetime] = None,
    ) -> ImageGeneration:
        counter["n"] += 1
        n = counter["n"]
        done = status != GenerationStatus.PENDING
        generation = ImageGeneration(
            user_id=user.id,
            prompt=prompt,
            image_url=f"{TEST_IMAGE_BASE_URL}/img_{n}.png" if status == GenerationStatus.COMPLETED else "",
            image_filename=f"img_{n}.png",
            status=status,
            created_at=created_at or base + timedelta(minutes=n),
            completed_at=base + timedelta(minutes=n, seconds=5) if done else None,
        )
        session.add(generation)
        session.commit()
        session.refresh(generation)
        return generation

    return _make_generation


@pytest.fixture
def make_gallery_image(session: Session):
    """Factory inserting a GalleryImage for an existing generation."""
    counter = {"n": 0}
    base = datetime(2024, 2, 1, 12, 0, 0, tzinfo=timezone.utc)

    def _make_gallery_image(
        generation: ImageGeneration,
        user: Optional[User] = None,
        title: Optional[str] = None,
        is_public: bool = False,
    ) -> GalleryImage:
        counter["n"] += 1
        gallery_image = GalleryImage(
            user_id=user.id if user else generation.user_id,
            image_generation_id=generation.id,
            title=title,
            is_public=is_public,
            created_at=base + timedelta(minutes=counter["n"]),
        )
        session.add(gallery_image)
        session.commit()
        session.refresh(gallery_image)
        return gallery_image

    return _make_gallery_image


@pytest.fixture
def signup(client: TestClient):
    """Register through the API; returns the response body plus auth headers."""

    def _signup(email: str, username: str, password: str = PASSWORD) -> dict:
        resp = client.post(
            "/auth/register",
            json={"email": email, "password": password, "username": username},
        )
        assert resp.status_code == 201, resp.text
        body = resp.json()
        body["headers"] = {"Authorization": f"Bearer {body['token']}"}
        return body

    return _signup
