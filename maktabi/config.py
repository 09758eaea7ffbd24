# maktabi/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Database ──────────────────────────────────────────────────────────
    DATABASE_URL: str = "sqlite:///./maktabi.db"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Documents ─────────────────────────────────────────────────────────
    PERMIT_DESTINATION: str = "قسم الحجر وسلامة الغذاء بميناء صحار"
    CORRESPONDENCE_PREFIX: str = "54"
    SHORT_LEAVE_MAX_DAYS: int = 5       # Longer leaves print on the long form
    MISSING_PLACEHOLDER: str = "-"
    UNKNOWN_VEHICLE_LABEL: str = "غير محدد"

    # ── Listing ───────────────────────────────────────────────────────────
    DEFAULT_LIST_LIMIT: int = 200

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_DIR: Optional[str] = None       # Defaults to <repo>/logs

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
