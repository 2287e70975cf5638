"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here; no scattered magic strings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Base path every resource router is mounted under.
        docs_url: Path serving the Swagger UI.
        openapi_url: Path serving the machine-readable OpenAPI document.
        frontend_url: The single browser origin allowed to call the API.
        migrate_on_startup: Apply pending schema migrations during startup.
        host: Bind address used by the ``serve`` command.
        port: Bind port used by the ``serve`` command.

    Database settings: ``database_url`` wins when set, otherwise a
    PostgreSQL DSN is assembled from the postgres_* values.
    """

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    project_name: str = "Products API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api"
    docs_url: str = "/docs"
    openapi_url: str = "/openapi.json"
    frontend_url: Optional[str] = None
    migrate_on_startup: bool = False
    host: str = "0.0.0.0"
    port: int = 4000

    database_url: Optional[str] = None
    database_ssl: bool = False
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_db: str = "products"

    def get_database_url(self) -> str:
        """Return the effective database URL.

        Priority:
        1. Explicit `DATABASE_URL`
        2. Build a PostgreSQL DSN from postgres_* values (Docker Compose or local setups)
        """
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+psycopg2://{self.postgres_user}:{self.postgres_password}@"
            f"{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )


settings = Settings()
