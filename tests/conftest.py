"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Store in-memory sembrado con los contactos de demostración
- Cache de respuestas con reloj controlable (FakeClock)
- Cliente HTTP de prueba (FastAPI TestClient) con overrides de dependencias
- Base de datos SQLite in-memory para los tests del repositorio SQL
"""

from datetime import datetime, timezone
from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.dependencies import get_contact_repo, get_response_cache, get_transaction_manager
from app.application.interfaces.clock import FakeClock
from app.config import Settings, get_settings
from app.infrastructure.db.tables import metadata
from app.infrastructure.in_memory.contact_repo import InMemoryContactRepo
from app.infrastructure.in_memory.response_cache import InMemoryResponseCache
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from app.infrastructure.seed_data import demo_contacts
from app.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"
CACHE_TTL_SECONDS = 60.0

BASIC_AUTH_USER = "admin"
BASIC_AUTH_PASSWORD = "s3cret"


# ============================================================================
# FIXTURES DE STORE Y CACHE
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock(datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def contact_repo() -> InMemoryContactRepo:
    """Store nuevo por test: Jan Kowalski (id 1, dos teléfonos) y Adam Nowak (id 2)."""
    repo = InMemoryContactRepo()
    repo.seed(demo_contacts())
    return repo


@pytest.fixture
def response_cache(clock: FakeClock) -> InMemoryResponseCache:
    return InMemoryResponseCache(clock=clock, default_ttl_seconds=CACHE_TTL_SECONDS)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        use_in_memory=True,
        cache_ttl_seconds=CACHE_TTL_SECONDS,
        basic_auth_username=BASIC_AUTH_USER,
        basic_auth_password=BASIC_AUTH_PASSWORD,
    )


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================

@pytest.fixture
def client(
    contact_repo: InMemoryContactRepo,
    response_cache: InMemoryResponseCache,
    test_settings: Settings,
) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con store, cache y settings de test.
    Cada test arranca con el mismo estado sembrado y un cache vacío.
    """
    app.dependency_overrides[get_contact_repo] = lambda: contact_repo
    app.dependency_overrides[get_response_cache] = lambda: response_cache
    app.dependency_overrides[get_transaction_manager] = lambda: NoopTransactionManager()
    app.dependency_overrides[get_settings] = lambda: test_settings

    with TestClient(app) as test_client:
        yield test_client

    # Limpiar overrides
    app.dependency_overrides.clear()


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """
    Engine SQLite in-memory; StaticPool comparte la única conexión
    para que las tablas creadas sigan visibles.
    """
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================

def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests que levantan la aplicación completa",
    )
