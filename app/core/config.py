"""
Configuration settings for the application
"""

import os
from typing import List
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application settings"""

    # Database
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./rsvp.db")

    # Application
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "production")
    BASE_URL: str = os.getenv("BASE_URL", "http://localhost:4321")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # Sessions
    SESSION_COOKIE_NAME: str = "session"
    SESSION_DURATION_DAYS: int = 7

    # Invite codes
    INVITE_CODE_LENGTH: int = 6
    INVITE_CODE_MAX_ATTEMPTS: int = 20

    # CORS
    ALLOW_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:4321",
        "http://localhost:8000",
    ]

    # Rate limiting
    RATE_LIMIT_PER_MINUTE: int = 30
    # Only honour X-Forwarded-For / X-Real-IP when deployed behind a trusted proxy
    TRUST_PROXY_HEADERS: bool = os.getenv("TRUST_PROXY_HEADERS", "false").lower() == "true"

    class Config:
        env_file = ".env"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

settings = Settings()
