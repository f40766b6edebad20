# app/adapters/configuration/config.py

from typing import Optional, List, Union
from logging import getLevelName
from pydantic import Field, PostgresDsn, field_validator, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = "INFO"

    # Environment
    ENVIRONMENT: str = "development"  # "development", "production", "testing"

    # Debug flag
    DEBUG: bool = False

    # Client store: "memory" or "database"
    STORAGE_BACKEND: str = "memory"

    # Database (only read when STORAGE_BACKEND is "database")
    DB_DRIVER: str = "asyncpg"
    POSTGRES_USER: Optional[str] = None
    POSTGRES_PASSWORD: Optional[str] = None
    POSTGRES_DB: Optional[str] = None
    POSTGRES_HOST: Optional[str] = None
    POSTGRES_PORT: Optional[int] = None
    DATABASE_URL: Optional[str] = Field(None, validate_default=True)

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:8000", "http://127.0.0.1:8000"]

    @field_validator("STORAGE_BACKEND", mode="before")
    def validate_storage_backend(cls, v: str) -> str:
        backend = v.lower()
        if backend not in ("memory", "database"):
            raise ValueError(f"Invalid STORAGE_BACKEND: {v!r}")
        return backend

    @field_validator("DATABASE_URL", mode="before")
    def assemble_db_url(cls, value, info):
        """
        Builds the PostgreSQL URL from the POSTGRES_* values
        when DATABASE_URL is not set and those values are present.
        """
        if value:
            return value

        data = info.data
        if not data.get("POSTGRES_HOST") or not data.get("POSTGRES_DB"):
            return None

        return str(PostgresDsn.build(
            scheme=f"postgresql+{data.get('DB_DRIVER') or 'asyncpg'}",
            username=data.get("POSTGRES_USER"),
            password=data.get("POSTGRES_PASSWORD"),
            host=data["POSTGRES_HOST"],
            port=data.get("POSTGRES_PORT"),
            path=data["POSTGRES_DB"],
        ))

    @field_validator("CORS_ORIGINS", mode="before")
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        """
        A CSV string (e.g. 'a,b,c') becomes a list.
        A list or a JSON array is returned as is.
        """
        if isinstance(v, str) and not v.startswith("["):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        if isinstance(v, list):
            return v
        raise ValueError(f"Invalid CORS_ORIGINS: {v!r}")

    @field_validator("LOG_LEVEL", mode="before")
    def validate_log_level(cls, v: str) -> str:
        """Ensures the value is a valid logging level"""
        lvl = v.upper()
        if not isinstance(getLevelName(lvl), int):
            raise ValueError(f"Invalid LOG_LEVEL: {v!r}")
        return lvl

    model_config = ConfigDict(env_file=".env", extra="ignore")


settings = Settings()
