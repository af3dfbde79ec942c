from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ---- App ----
    app_env: str = "local"  # local|dev|prod
    database_url: str = "sqlite:///./propmgr.db"
    port: int = 3000

    # ---- CORS (used by main.py) ----
    cors_allow_origins: list[str] | str = ["*"]

    # ---- Geocoding (OpenStreetMap Nominatim) ----
    geocoder_base_url: str = "https://nominatim.openstreetmap.org"
    geocoder_user_agent: str = "PropertyManager/1.0 (admin@yourdomain.com)"
    geocoder_accept_language: str = "en-US,en;q=0.8"
    geocoder_timeout_seconds: float = 20.0
    geocode_delay_seconds: float = 1.1  # Nominatim usage policy: max 1 req/s

    # ---- Celery ----
    celery_broker_url: str = "redis://localhost:6379/0"
    celery_result_backend: str = "redis://localhost:6379/1"

    def model_post_init(self, __context) -> None:
        if self.geocode_delay_seconds < 0:
            raise ValueError("geocode_delay_seconds must be >= 0")


settings = Settings()
