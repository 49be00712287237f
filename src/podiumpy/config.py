"""Configuration management for podiumpy."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DilationMethod(str, Enum):
    """How per-rank dilation factors reshape the win probabilities."""

    POWER = "power"
    ADDITIVE = "additive"


class PodiumpyConfig(BaseSettings):
    """Configuration settings for podiumpy."""

    # Sampling defaults
    degree: int = Field(
        default=4,
        ge=1,
        description="Default sampling degree for the approximate summaries",
        alias="PODIUMPY_DEGREE",
    )

    seed: int = Field(
        default=0,
        description="Seed for the pseudo-random generator used by random sampling",
        alias="PODIUMPY_SEED",
    )

    # Probability expansion
    dilation: DilationMethod = Field(
        default=DilationMethod.POWER,
        description="Dilation method: 'power' or 'additive'",
        alias="PODIUMPY_DILATION",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Level applied by configure_logging when none is given",
        alias="PODIUMPY_LOG_LEVEL",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
        validate_assignment=True,
    )


# Global configuration instance
config = PodiumpyConfig()


def get_config() -> PodiumpyConfig:
    """Get the current configuration."""
    return config


def update_config(**kwargs) -> None:
    """Update configuration settings."""
    global config
    for key, value in kwargs.items():
        if hasattr(config, key):
            setattr(config, key, value)
        else:
            raise ValueError(f"Unknown configuration option: {key}")


def reset_config() -> None:
    """Reset configuration to defaults."""
    global config
    config = PodiumpyConfig()
