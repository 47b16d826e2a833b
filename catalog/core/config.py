# catalog/core/config.py
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    The document store connection string is selected by ENVIRONMENT:
      - development -> DATABASE_URL_DEVELOPMENT
      - test        -> DATABASE_URL_TEST
      - production  -> DATABASE_URL_PRODUCTION
    """

    PROJECT_NAME: str = "Product Catalog API"
    API_PREFIX: str = "/api"

    HOST: str = "0.0.0.0"
    PORT: int = 5000

    ENVIRONMENT: str = "development"

    # Document store config
    DATABASE_URL_DEVELOPMENT: str = "sqlite:///./catalog.db"
    DATABASE_URL_TEST: str = "sqlite://"
    DATABASE_URL_PRODUCTION: str = ""
    DATABASE_SSL_REQUIRE: bool = False

    CORS_ORIGINS: list[str] = ["*"]
    LOG_LEVEL: str = "INFO"

    # Used by the terminal client
    API_BASE_URL: str = "http://localhost:5000"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def database_url(self) -> str:
        """
        Connection string for the active ENVIRONMENT tag.

        Raises:
            ValueError: unknown tag, or no URL configured for it.
        """
        urls = {
            "development": self.DATABASE_URL_DEVELOPMENT,
            "test": self.DATABASE_URL_TEST,
            "production": self.DATABASE_URL_PRODUCTION,
        }
        if self.ENVIRONMENT not in urls:
            raise ValueError(f"Unknown ENVIRONMENT '{self.ENVIRONMENT}'")

        url = urls[self.ENVIRONMENT]
        if not url:
            raise ValueError(
                f"No database URL configured for ENVIRONMENT '{self.ENVIRONMENT}'"
            )
        return url


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
