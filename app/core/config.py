from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite+aiosqlite:///./finance.db"

    SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 1440  # 24 hours

    API_PREFIX: str = "/api"
    API_TITLE: str = "Finance Quote Portal"
    API_DESCRIPTION: str = "Product catalog and quote requests for business finance clients"
    API_VERSION: str = "1.0.0"

    CORS_ORIGINS: List[str] = ["*"]

    SEED_SAMPLE_PRODUCTS: bool = False
    ADMIN_EMAIL: str = "admin@finance.com"
    ADMIN_PASSWORD: Optional[str] = None
    ADMIN_NAME: str = "Admin User"

    LOG_LEVEL: str = "INFO"
    DEBUG: bool = False

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")
