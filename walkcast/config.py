"""Application configuration pulled from environment variables via pydantic."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the walkcast service."""
    model_config = SettingsConfigDict(env_prefix="WALKCAST_", extra="ignore")

    max_time_windows: int = Field(default=4, ge=1)
    temperature_weight: float = Field(default=0.4, ge=0.0)
    humidity_weight: float = Field(default=0.2, ge=0.0)
    wind_weight: float = Field(default=0.2, ge=0.0)
    # Configured alongside the other weights but not part of the window score.
    uv_weight: float = Field(default=0.2, ge=0.0)
    api_key: str | None = None
    log_level: str = "INFO"
    port: int = 8000

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lower-case level names from the environment."""
        return str(v).strip().upper()


settings = Settings()
