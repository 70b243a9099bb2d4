"""Application configuration from environment."""
from pathlib import Path

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

# Load .env from project root (parent of homestay/) so env vars are available everywhere
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(dotenv_path=_env_path)


class Settings(BaseSettings):
    app_name: str = "Homestay Property Import"
    app_env: str = "development"
    debug: bool = True

    database_url: str = "sqlite:///./homestay.db"

    jwt_secret_key: str = "jwt-secret-change-me"
    jwt_algorithm: str = "HS256"

    @field_validator("jwt_secret_key")
    @classmethod
    def strip_jwt_secret(cls, v: str) -> str:
        return (v or "").strip()

    jwt_access_token_expire_minutes: int = 60

    # Import pipeline
    default_currency: str = "USD"
    import_max_warnings: int = 5
    seed_catalog_on_startup: bool = True

    @field_validator("default_currency", mode="before")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return (v or "USD").strip().upper()

    class Config:
        env_file = str(_env_path)
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
