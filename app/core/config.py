from typing import Literal, Set

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    PROJECT_NAME: str = "Library Catalog API"
    VERSION: str = "v1"
    DESCRIPTION: str = "A Rest API for books, authors, genres and comments"

    API_V1_STR: str = "/api/v1"

    # "reactive" mounts the event-loop endpoints, "blocking" the thread-per-request ones
    API_MODE: Literal["reactive", "blocking"] = "reactive"

    # --- MongoDB ---
    MONGODB_URL: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "library"
    MONGODB_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    MONGODB_SEED: bool = False

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOGGING_EXCLUDE_PATHS: Set[str] = {"/health", "/metrics", "/favicon.ico"}

    # --- HTTP ---
    CORS_ORIGINS: str = "http://localhost:3000,http://localhost:8000"
    ALLOWED_HOSTS: str = "*"
    MAX_REQUEST_SIZE: int = 1024 * 1024

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
