import os
from typing import List
from pathlib import Path
from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Look for .env file in the backend directory relative to this file
    _backend_dir = Path(__file__).parent.parent.parent
    # Allow extra env vars so unexpected keys don't crash local runs
    model_config = ConfigDict(env_file=_backend_dir / ".env", extra='ignore')

    # Application settings
    debug: bool = False
    log_level: str = "info"
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    PORT: int = int(os.getenv("PORT", "5000"))

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./plantnet.db")
    DB_ECHO: bool = os.getenv("DB_ECHO", "false").lower() == "true"

    # Security
    ACCESS_TOKEN_SECRET: str = os.getenv("ACCESS_TOKEN_SECRET", "")
    ALLOWED_HOSTS: List[str] = [
        "http://localhost:5173",
        "http://localhost:5174",
        os.getenv("FRONTEND_URL", "")  # Deployed storefront
    ]

    # Session cookie
    SESSION_COOKIE_NAME: str = "token"
    SESSION_TTL_DAYS: int = 365

    # Catalog
    PLANT_LIST_LIMIT: int = 20

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
