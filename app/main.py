import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.deps import engine
from app.api.errors.exception_handlers import register_exception_handlers
from app.api.routers.contacts import router as contacts_router
from app.api.routers.health import router as health_router
from app.api.routers.phones import router as phones_router
from app.config import get_settings
from app.infrastructure.db.tables import metadata

settings = get_settings()

# Configure structured logging
logging.basicConfig(
    level=settings.log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if not settings.use_in_memory:
        # Initialize DB tables (for dev/demo purposes)
        async with engine.begin() as conn:
            await conn.run_sync(metadata.create_all)
    logger.info(
        "Contacts API started",
        extra={
            "use_in_memory": settings.use_in_memory,
            "api_versions": settings.supported_api_versions,
        },
    )
    yield
    # Cleanup
    await engine.dispose()

app = FastAPI(
    title="Contacts API",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["api-supported-versions", "Location"],
)

register_exception_handlers(app)

app.include_router(health_router, tags=["Health"])
app.include_router(contacts_router, prefix=settings.api_prefix, tags=["Contacts"])
app.include_router(phones_router, prefix=settings.api_prefix, tags=["Phones"])
