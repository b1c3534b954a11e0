from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
        extra="ignore",
    )

    app_name: str = "Design API"
    debug: bool = False
    env: str = "development"
    log_level: str = "INFO"

    # Server
    backend_host: str = "0.0.0.0"
    backend_port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
    ]

    # PostgreSQL
    postgres_user: str = "design_api"
    postgres_password: str = "changeme"
    postgres_db: str = "design_api"
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    database_url_override: str | None = Field(default=None, alias="DATABASE_URL")
    auto_migrate_on_startup: bool = False

    # AI completion (OpenAI-compatible)
    aiml_api_key: str | None = Field(default=None, alias="AIML_API_KEY")
    llm_base_url: str = "https://openrouter.ai/api/v1"
    llm_model: str = "gpt-4o-mini"
    llm_timeout: float = 30.0

    # Auth
    jwt_secret: str = "change-this-secret"
    jwt_algorithm: str = "HS256"
    jwt_expiry_minutes: int = 60 * 24

    @property
    def database_url(self) -> str:
        if self.database_url_override:
            return self.database_url_override
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def async_database_url(self) -> str:
        # Swap postgresql:// for postgresql+asyncpg:// for async driver
        return self.database_url.replace("postgresql://", "postgresql+asyncpg://", 1)


@lru_cache()
def get_settings() -> Settings:
    return Settings()
