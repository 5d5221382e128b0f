"""
Application settings using Pydantic BaseSettings.
"""

from typing import List, Optional, Union

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Application
    APP_NAME: str = "Tradie Job Assistant"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENVIRONMENT: str = "production"
    LOG_LEVEL: str = "INFO"

    # API Configuration
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 8000
    API_PREFIX: str = "/api/v1"
    CORS_ORIGINS: Union[str, List[str]] = "*"

    # Job lifecycle
    DEFAULT_TRADE: str = "builder"
    DEFAULT_JOB_NAME: str = "Untitled job"
    DEFAULT_JOB_LOCATION: str = "Auckland, NZ"  # Placeholder until GPS lookup exists
    AUTO_COMPLETE_PREVIOUS_JOB: bool = False
    TIMER_INTERVAL_SECONDS: float = 1.0

    # Placeholder costing
    COST_SEED: Optional[int] = None
    MATERIAL_COST_MIN: int = 50
    MATERIAL_COST_MAX: int = 250
    PROGRESS_PERCENT_MIN: int = 60
    PROGRESS_PERCENT_MAX: int = 90

    # Quoting
    QUOTE_DEFAULT_DAYS: int = 2
    QUOTE_MARKUP: float = 0.15
    QUOTE_MATERIAL_ITEMS: int = 3
    QUOTE_ITEM_COST_MIN: int = 25
    QUOTE_ITEM_COST_MAX: int = 175

    # Monitoring
    ENABLE_METRICS: bool = True

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            if v == "*":
                return ["*"]
            return [i.strip() for i in v.split(",")]
        elif isinstance(v, list):
            return v
        return ["*"]

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        if v not in ["development", "staging", "production", "test"]:
            raise ValueError(
                "Environment must be one of: development, staging, production, test"
            )
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("QUOTE_DEFAULT_DAYS")
    @classmethod
    def validate_default_days(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Default quote days must be a positive integer")
        return v

    @field_validator("QUOTE_MARKUP")
    @classmethod
    def validate_markup(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("Quote markup must be positive")
        return v

    @model_validator(mode="after")
    def validate_cost_ranges(self) -> "Settings":
        ranges = {
            "MATERIAL_COST": (self.MATERIAL_COST_MIN, self.MATERIAL_COST_MAX),
            "PROGRESS_PERCENT": (self.PROGRESS_PERCENT_MIN, self.PROGRESS_PERCENT_MAX),
            "QUOTE_ITEM_COST": (self.QUOTE_ITEM_COST_MIN, self.QUOTE_ITEM_COST_MAX),
        }
        for name, (low, high) in ranges.items():
            if low < 0 or low >= high:
                raise ValueError(f"{name}_MIN must be non-negative and below {name}_MAX")
        if self.PROGRESS_PERCENT_MAX > 101:
            raise ValueError("PROGRESS_PERCENT_MAX cannot exceed 101")
        return self

    model_config = {"env_file": ".env", "case_sensitive": True, "extra": "ignore"}


# Global settings instance
settings = Settings()
