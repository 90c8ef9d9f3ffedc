from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Loaded once at startup; frozen so components can share it by reference.
    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    database_url: str | None = None  # e.g. sqlite+aiosqlite:///./contacts.db
    database_echo: bool = False
    use_in_memory: bool = True
    seed_demo_data: bool = True

    api_prefix: str = ""
    api_version_header: str = "X-API-Version"
    supported_api_versions: list[int] = Field(default_factory=lambda: [1, 2])

    cache_ttl_seconds: float = 60.0

    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )

    basic_auth_username: str | None = None
    basic_auth_password: str | None = None

    log_level: str = "INFO"

    @field_validator("supported_api_versions")
    @classmethod
    def validate_versions(cls, value: list[int]) -> list[int]:
        if not value:
            raise ValueError("at least one API version must be supported")
        if any(version < 1 for version in value):
            raise ValueError("API versions must be >= 1")
        return sorted(set(value))

    @field_validator("cache_ttl_seconds")
    @classmethod
    def validate_ttl(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("cache_ttl_seconds must be > 0")
        return value

    @field_validator("cors_origins")
    @classmethod
    def validate_origins(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("at least one CORS origin is required")
        return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
