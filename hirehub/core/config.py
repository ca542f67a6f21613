"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import List, Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Database (database_url wins when set, e.g. sqlite for tests)
    database_url: Optional[str] = None
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "hirehub_user"
    postgres_password: str = "password"
    postgres_db: str = "hirehub"

    # JWT Auth
    jwt_secret_key: str = "change-this-secret-to-something-long"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60
    jwt_issuer: str = "HireHub"
    jwt_audience: str = "HireHubClient"

    # Password reset
    password_reset_expire_hours: int = 2

    # Email ("log" writes emails to the log, "smtp" sends them)
    email_backend: str = "log"
    smtp_host: str = "localhost"
    smtp_port: int = 587
    smtp_use_ssl: bool = False
    smtp_user: str = ""
    smtp_password: str = ""
    smtp_from_email: str = "no-reply@hirehub.local"
    smtp_from_name: str = "HireHub"

    # Files
    upload_dir: str = "Uploads"
    max_upload_mb: int = 5
    frontend_dir: str = "frontend/dist"

    # App
    cors_origins: List[str] = [
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]
    debug: bool = False
    log_level: str = "INFO"

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def sqlalchemy_url(self) -> str:
        return self.database_url or self.postgres_url

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
