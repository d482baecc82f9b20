# order_timeline/core/config.py
import os
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

class Settings(BaseSettings):
    app_name: str = "OrderTimeline"
    env: str = "local"

    # Observability
    LOG_LEVEL: str = "INFO"

    # CORS (CSV), e.g. "http://localhost:3000,https://shop.example.com"
    CORS_ALLOW_ORIGINS: str | None = None

    # =========================
    # Timeline
    # =========================
    # Unit (days) between synthetic dates of completed steps.
    # Placeholder for display ordering only; the store keeps no per-step history.
    TIMELINE_SYNTHETIC_STEP_DAYS: int = Field(default=1, ge=1)

    model_config = SettingsConfigDict(
        env_file=os.path.join(PROJECT_ROOT, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

settings = Settings()
