"""Application Configuration

pydantic-settings based environment settings
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === App ===
    APP_NAME: str = "Todo Backend"
    APP_VERSION: str = "1.0.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "development"  # development, staging, production

    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # Externally reachable root used to build each todo's url
    BASE_URL: Optional[str] = None

    # === Logging ===
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json, text
    LOG_REQUESTS: bool = True

    # === CORS ===
    CORS_ORIGINS: list[str] = ["*"]

    @property
    def base_url(self) -> str:
        """Resolved base URL (falls back to localhost on the configured port)"""
        return self.BASE_URL or f"http://localhost:{self.PORT}"


# Singleton
settings = Settings()
