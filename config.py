"""
Application configuration module.

This module defines configuration classes for different environments
(development, testing, production). Configuration values are loaded
from environment variables with sensible defaults.
"""

import os


def _env_int(name: str, default: int) -> int:
    """Read an integer setting from the environment."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


class Config:
    """Base configuration with default settings."""

    APP_NAME: str = os.environ.get("APP_NAME", "Task Manager")
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")

    # Cosmetic escalation of the total-tasks counter
    TASK_COUNT_WARNING_THRESHOLD: int = _env_int("TASK_COUNT_WARNING_THRESHOLD", 5)
    TASK_COUNT_DANGER_THRESHOLD: int = _env_int("TASK_COUNT_DANGER_THRESHOLD", 10)

    # Shown by the variables demo, never enforced
    MAX_TASKS: int = _env_int("MAX_TASKS", 20)


class DevelopmentConfig(Config):
    """Development environment configuration."""

    DEBUG: bool = True
    TESTING: bool = False
    LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "DEBUG")


class TestingConfig(Config):
    """Testing environment configuration."""

    DEBUG: bool = True
    TESTING: bool = True

    # Fixed thresholds so tests do not depend on the caller's environment
    TASK_COUNT_WARNING_THRESHOLD: int = 5
    TASK_COUNT_DANGER_THRESHOLD: int = 10
    MAX_TASKS: int = 20


class ProductionConfig(Config):
    """Production environment configuration."""

    DEBUG: bool = False
    TESTING: bool = False


# Configuration mapping for easy access
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (development, testing, production).
             If None, uses FLASK_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("FLASK_ENV", "development")
    return config.get(env, config["default"])
