"""Application configuration using Pydantic Settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="USER_RECORD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    detail_label: str = "appUser: "
    log_level: str = "WARNING"


settings = Settings()
