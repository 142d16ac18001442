"""
Application configuration.

Loads settings from environment variables and .env file.
Only the composition root (app.main) reads the module-level ``settings``.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every router.
        cors_origins: Origins allowed to call the API from a browser.
        rate_limit_default: Default rate limit for all endpoints.
        rate_limit_login: Rate limit for the admin login endpoint.
        trust_forwarded_for: Key rate limits on the first X-Forwarded-For
            address. Enable only behind a proxy that overwrites the header.
        jwt_expire_days: Lifetime of admin session tokens.
        max_upload_files: Maximum number of files per portfolio request.
        max_upload_bytes: Maximum size of a single uploaded file.
        carousel_default_limit: Carousel size when the client sends none.
        carousel_max_limit: Upper bound for the carousel size.

    Database settings accept either a full ``database_url`` or the
    individual postgres_* parts used by Docker Compose setups.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    project_name: str = "Showcase API"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    cors_origins: list[str] = ["http://localhost:3000"]

    rate_limit_default: str = "120/minute"
    rate_limit_login: str = "5/minute"
    trust_forwarded_for: bool = False

    # Database
    database_url: Optional[str] = None
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "showcase"
    db_pool_size: int = 10
    db_echo: bool = False

    # Admin sessions
    jwt_secret: str = "change-me"
    jwt_algorithm: str = "HS256"
    jwt_expire_days: int = 7

    # ImageKit
    imagekit_private_key: Optional[str] = None
    imagekit_upload_url: str = "https://upload.imagekit.io/api/v1/files/upload"
    imagekit_api_url: str = "https://api.imagekit.io/v1"
    asset_folder: str = "/portfolio"
    asset_timeout_seconds: float = 30.0

    # Uploads
    max_upload_files: int = 11
    max_upload_bytes: int = 5 * 1024 * 1024  # 5 MiB
    allowed_upload_types: list[str] = [
        "image/webp",
        "image/jpeg",
        "image/jpg",
        "image/png",
        "image/gif",
        "application/pdf",
    ]

    # Carousel
    carousel_default_limit: int = 10
    carousel_max_limit: int = 50

    def get_database_url(self) -> str:
        """Return the effective async database URL.

        Priority:
        1. Explicit ``DATABASE_URL``
        2. Built from postgres_* values with the asyncpg driver
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
