"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from LIFE_MAPPER_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="LIFE_MAPPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite:///./life_mapper.db"

    # Service
    service_name: str = "life-mapper"
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    # Display
    default_currency: str = "USD"

    # Calendar export
    calendar_occurrences: int = 6  # paydays/bills generated per recurring record
    calendar_prodid: str = "-//Life Mapper//EN"

    # Advisor
    advisor_savings_threshold: float = 200.0


settings = Settings()
