# showcase/config/settings.py
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")

    # API
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "Showcase Layout Service"

    # CORS
    ALLOWED_HOSTS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"

    # Request guard for POST /showcase
    MAX_PHOTOS_PER_REQUEST: int = 5000

    # Env
    ENVIRONMENT: str = "development"
    DEBUG: bool = True

settings = Settings()
