import os
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    PROJECT_NAME: str = "Shopping Budget"
    # Mount point of the operation table, e.g. "/functions/v1/shopping"
    API_PREFIX: str = ""

    # Database - unique name so a platform-provided DATABASE_URL can still be used as fallback
    SHOPPING_DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./shopping.db")

    # Bearer secret. Empty means auth is disabled (dev mode)
    SHOPPING_TOKEN: str = ""

    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    @property
    def cors_origins(self) -> list:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

settings = Settings()
