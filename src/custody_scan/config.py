"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    admin_token: str
    actor_name: str = "Ali (Driver)"
    outcome_display_seconds: float = 3.0
    geolocation_stamp: str = "3.1390° N, 101.6869° E"
    qr_service_url: str = "https://api.qrserver.com/v1/create-qr-code/"
    qr_label_size: int = 300
    frame_interval_seconds: float = 1 / 30
    seed_demo_data: bool = True
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
