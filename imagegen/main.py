import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from imagegen.core.config import settings
from imagegen.database import init_db
from imagegen.routers.auth import router as auth_router
from imagegen.routers.users import router as users_router
from imagegen.routers.generations import router as generations_router
from imagegen.routers.gallery import router as gallery_router
from imagegen.schemas.common import HealthResponse

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    logger.info("Database initialised.")
    yield


app = FastAPI(
    title="Image Generation Gallery API",
    version="0.1.0",
    lifespan=lifespan,
)

# front-end origin(s)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.get("/health", response_model=HealthResponse, tags=["health"])
def healthcheck():
    return {"status": "ok", "timestamp": datetime.now(timezone.utc)}

app.include_router(auth_router)
app.include_router(users_router)
app.include_router(generations_router)
app.include_router(gallery_router)
