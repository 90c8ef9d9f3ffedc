from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from app.config import get_settings

settings = get_settings()

# Fallback to a local SQLite file when no URL is configured
DB_URL = settings.database_url or "sqlite+aiosqlite:///./contacts.db"

engine = create_async_engine(DB_URL, echo=settings.database_echo)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)
