"""Application configuration management using Pydantic Settings."""

from typing import List, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Flask Configuration
    secret_key: str = Field(..., alias="SECRET_KEY")
    flask_app: str = Field(default="wsgi.py", alias="FLASK_APP")
    flask_env: str = Field(default="development", alias="FLASK_ENV")

    # Storage Configuration
    storage_type: str = Field(default="local", alias="STORAGE_TYPE")
    storage_base_path: str = Field(default="storage", alias="STORAGE_BASE_PATH")
    state_storage_key: str = Field(
        default="financial-planner-state", alias="STATE_STORAGE_KEY"
    )

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Profile defaults
    default_annual_income: float = Field(default=100000, alias="DEFAULT_ANNUAL_INCOME")
    default_initial_savings: float = Field(
        default=10000, alias="DEFAULT_INITIAL_SAVINGS"
    )
    default_savings_rate: float = Field(default=20, alias="DEFAULT_SAVINGS_RATE")

    # Projection matrix
    year_options: List[int] = Field(
        default_factory=lambda: [5, 10, 15, 20, 25, 30], alias="YEAR_OPTIONS"
    )
    return_rate_options: List[float] = Field(
        default_factory=lambda: [4, 5, 6, 7, 8, 9, 10], alias="RETURN_RATE_OPTIONS"
    )
    green_threshold: float = Field(default=2_000_000, alias="GREEN_THRESHOLD")
    yellow_threshold: float = Field(default=1_000_000, alias="YELLOW_THRESHOLD")

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v):
        """Ensure SECRET_KEY is provided and not a placeholder."""
        if not v or v == "your-secret-key-here-change-in-production":
            raise ValueError("SECRET_KEY must be set to a secure value")
        return v

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Validate application environment."""
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()

    @field_validator("storage_type")
    @classmethod
    def validate_storage_type(cls, v):
        """Validate storage type."""
        allowed_types = {"local"}
        if v not in allowed_types:
            raise ValueError(f"STORAGE_TYPE must be one of {allowed_types}")
        return v

    @field_validator("year_options")
    @classmethod
    def validate_year_options(cls, v):
        if not v or any(years < 0 for years in v):
            raise ValueError("YEAR_OPTIONS must be a non-empty list of years >= 0")
        return v

    @model_validator(mode="after")
    def validate_thresholds(self):
        if self.green_threshold <= self.yellow_threshold:
            raise ValueError("GREEN_THRESHOLD must be greater than YELLOW_THRESHOLD")
        return self


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Get application settings instance."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


# Global settings instance - created on first use
_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Reset global settings instance (useful for testing)."""
    global _settings
    _settings = None
