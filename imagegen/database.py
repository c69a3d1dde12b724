# imagegen/database.py
from sqlmodel import SQLModel, create_engine, Session

from imagegen.core.config import settings

connect_args = {}
if settings.DATABASE_URL.startswith("sqlite"):
    connect_args["check_same_thread"] = False

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    connect_args=connect_args,
)

def init_db() -> None:
    """
    Create all tables that are defined via SQLModel subclasses.
    """
    # register every table on the metadata before create_all
    import imagegen.models.user  # noqa: F401
    import imagegen.models.image_generation  # noqa: F401
    import imagegen.models.gallery_image  # noqa: F401

    SQLModel.metadata.create_all(engine)

def get_db():
    with Session(engine) as session:
        yield session
