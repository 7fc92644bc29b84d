"""Configuration management for the instrument engine.

This module handles environment variable loading and provides type-safe
configuration access using Pydantic models. Template rendering needs no
configuration; these settings drive logging and the optional AI
proof-point suggestions.
"""

from typing import Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file.

    All configuration values are automatically loaded from:
    1. `.env` file in the project root (if present)
    2. Environment variables (as fallback)

    Attributes:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        groq_api_key: API key for Groq LLM service (only needed for AI suggestions)
        llm_model: LLM model name used for proof-point suggestions
        llm_temperature: Sampling temperature for suggestions (default: 0.3)
        llm_retry_attempts: Maximum retry attempts for LLM API calls (default: 3)
        llm_retry_backoff_min: Minimum backoff time in seconds (default: 1.0)
        llm_retry_backoff_max: Maximum backoff time in seconds (default: 30.0)
        min_situation_length: Minimum characters in a situation description (default: 10)
        max_situation_length: Maximum characters in a situation description (default: 5000)
        max_proof_points: Maximum number of suggested proof points kept (default: 6)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )

    groq_api_key: Optional[str] = Field(
        default=None,
        description="Groq API key for LLM service (required for AI suggestions only)",
    )

    llm_model: str = Field(
        default="llama-3.1-8b-instant",
        description="LLM model name used for proof-point suggestions",
    )

    llm_temperature: float = Field(
        default=0.3,
        description="Sampling temperature for proof-point suggestions",
        ge=0.0,
        le=2.0,
    )

    # Rate limiting and retry configuration
    llm_retry_attempts: int = Field(
        default=3,
        description="Maximum number of retry attempts for LLM API calls",
        ge=1,
        le=10,
    )

    llm_retry_backoff_min: float = Field(
        default=1.0,
        description="Minimum backoff time in seconds for exponential backoff",
        ge=0.0,
        le=60.0,
    )

    llm_retry_backoff_max: float = Field(
        default=30.0,
        description="Maximum backoff time in seconds for exponential backoff",
        ge=0.0,
        le=300.0,
    )

    # Input validation configuration
    min_situation_length: int = Field(
        default=10,
        description="Minimum character length for situation descriptions",
        ge=1,
        le=1000,
    )

    max_situation_length: int = Field(
        default=5000,
        description="Maximum character length for situation descriptions",
        ge=100,
        le=50000,
    )

    max_proof_points: int = Field(
        default=6,
        description="Maximum number of AI-suggested proof points kept",
        ge=1,
        le=20,
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level is one of the allowed values.

        Args:
            value: Log level string to validate

        Returns:
            Uppercase log level string

        Raises:
            ValueError: If log level is not one of the allowed values
        """
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in allowed_levels:
            raise ValueError(
                f"log_level must be one of {allowed_levels}, got {value}"
            )
        return upper_value

    @model_validator(mode="after")
    def validate_backoff_range(self) -> "Config":
        """Ensure the minimum backoff does not exceed the maximum."""
        if self.llm_retry_backoff_min > self.llm_retry_backoff_max:
            raise ValueError(
                "llm_retry_backoff_min must not exceed llm_retry_backoff_max"
            )
        return self


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get the global configuration instance.

    Loads configuration from `.env` file (if present) and environment variables
    on first call and returns the same instance on subsequent calls (singleton pattern).

    Returns:
        Config instance with loaded configuration values

    Raises:
        ValueError: If configuration values are invalid
    """
    import logging
    logger = logging.getLogger(__name__)

    global _config
    if _config is None:
        _config = Config()
        # Log configuration status (without exposing sensitive values)
        logger.debug(
            f"Configuration loaded: "
            f"GROQ_API_KEY={'set' if _config.groq_api_key else 'missing'}, "
            f"LLM_MODEL={_config.llm_model}, "
            f"LLM_RETRY_ATTEMPTS={_config.llm_retry_attempts}"
        )
    return _config


def reload_config() -> Config:
    """Reload configuration from environment variables.

    Useful for testing or when configuration changes at runtime.

    Returns:
        New Config instance with reloaded configuration values
    """
    global _config
    _config = Config()
    return _config
