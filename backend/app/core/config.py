"""
Configuración centralizada de la aplicación

Settings are built once at startup (see get_settings) and passed explicitly
to create_app() and the Database. Nothing else reads the environment.
"""
import json
from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuración de la aplicación"""

    # API Settings
    API_TITLE: str = "EssenceLuxe API"
    API_VERSION: str = "1.0"
    API_DESCRIPTION: str = "Products and orders backend for EssenceLuxe"
    API_HOST: str = "0.0.0.0"
    PORT: int = 3000

    # Database
    DATABASE_URL: str = "postgresql://localhost:5432/essenceluxe"
    DB_POOL_MIN: int = 1
    DB_POOL_MAX: int = 10

    # Logging
    LOG_LEVEL: str = "INFO"

    # CORS - Can be string (comma-separated), JSON array or "*"
    # Example: "http://localhost:3000,https://yourdomain.com" or '["http://localhost:3000"]'
    ALLOWED_ORIGINS: Optional[str] = "http://localhost:3000"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    def get_allowed_origins(self) -> List[str]:
        """Parse ALLOWED_ORIGINS string into list"""
        if not self.ALLOWED_ORIGINS:
            return ["http://localhost:3000"]

        if self.ALLOWED_ORIGINS.strip() == "*":
            return ["*"]

        # Try JSON parse first (for array format)
        try:
            origins = json.loads(self.ALLOWED_ORIGINS)
            if isinstance(origins, list):
                return origins
        except (json.JSONDecodeError, ValueError):
            pass

        # Fall back to comma-separated string
        return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Build the process-wide Settings once"""
    return Settings()
