from pydantic_settings import BaseSettings, SettingsConfigDict

from booker_seed.schemas.booking import BookingTemplate, Credentials
from booker_seed.templates import DEFAULT_TEMPLATES


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="SEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    base_url: str = "https://restful-booker.herokuapp.com"
    credentials: Credentials = Credentials()
    templates: list[BookingTemplate] = list(DEFAULT_TEMPLATES)
    inter_request_delay_ms: int = 500
    cleanup_warn_threshold: int = 20
    cleanup_filter: str = "Automation"
    artifact_path: str = "scripts/seeded-booking-ids.json"
    request_timeout: float | None = None  # seconds; None waits forever
    log_level: str = "INFO"
