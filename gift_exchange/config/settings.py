"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    # Runtime
    APP_ENV = os.getenv("APP_ENV", "development")
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", "5001"))

    # API
    API_PREFIX = os.getenv("API_PREFIX", "/api")
    CORS_ORIGINS = os.getenv("CORS_ORIGINS", "*").split(",")

    # Storage
    # JSON file with rooms to preload into the in-memory repositories (optional)
    ROOMS_SEED_FILE = os.getenv("ROOMS_SEED_FILE", "")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "") or None
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s [%(levelname)s] [%(correlation_id)s] %(name)s: %(message)s",
    )
