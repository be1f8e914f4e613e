"""Dashboard state configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from marketplace_state.snapshot_store.base import DEFAULT_MAX_AGE_MS
from utils.logging_utils import get_tagged_logger, setup_logging
logger = get_tagged_logger(__name__, tag="config")


class Settings(BaseSettings):
    """Environment-driven configuration for the marketplace dashboard state layer."""
    model_config = SettingsConfigDict(env_prefix="MARKETPLACE_", extra="ignore")

    dashboard_max_age_ms: int = Field(default=DEFAULT_MAX_AGE_MS, ge=0)
    offer_expiry_days: int = Field(default=30, ge=1)
    log_level: str = "INFO"

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return str(v).strip().upper()


settings = Settings()


def configure_logging(settings_: Settings | None = None, *, job_name: str = "marketplace_state",
                      override_existing: bool = False) -> None:
    """Configure process logging at the configured level."""
    setup_logging(
        level=(settings_ or settings).log_level,
        job_name=job_name,
        override_existing=override_existing,
    )


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4)}")
