from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "Recipe Manager"

    # Database
    database_url: str = "sqlite:///./recipes.db"
    sql_echo: bool = False  # Set to True for SQL debugging

    # Seed the lookup tables and the two sample recipes on startup
    bootstrap_enabled: bool = True

    log_level: str = "INFO"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")

    @property
    def is_in_memory(self) -> bool:
        """True for SQLite URLs without a file path."""
        return self.database_url in ("sqlite://", "sqlite:///:memory:")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
