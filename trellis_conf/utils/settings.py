"""Settings for trellis-conf, read from the environment and optional .env files."""

import os
from pathlib import Path

from loguru import logger
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = [
    "TrellisConfSettings",
    "init_context",
    "get_context",
    "reset_context",
]

LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class TrellisConfSettings(BaseSettings):
    """trellis-conf settings.

    Every field can be overridden with a ``TRELLIS_CONF_`` prefixed environment
    variable, e.g. ``TRELLIS_CONF_LOG_LEVEL=DEBUG``.
    """

    model_config = SettingsConfigDict(
        env_prefix="TRELLIS_CONF_", case_sensitive=False, extra="ignore"
    )

    # Parser related
    max_error_length: int = 256

    # Output related
    bram_values_per_line: int = 8
    log_level: str = "INFO"

    @field_validator("max_error_length", "bram_values_per_line", mode="after")
    @classmethod
    def is_positive(cls, value: int) -> int:
        """Check that a length or count is at least one."""
        if value < 1:
            raise ValueError(f"{value} must be a positive integer")
        return value

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise the log level to one loguru knows about."""
        key = str(value).strip().upper()
        alias_map = {
            "WARN": "WARNING",
            "FATAL": "CRITICAL",
        }
        key = alias_map.get(key, key)
        if key not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return key


# Module-level singleton pattern for settings management
_context_instance: TrellisConfSettings | None = None


def init_context(dot_env: Path | None = None) -> TrellisConfSettings:
    """Initialize the global trellis-conf context with settings.

    Subsequent calls replace the existing context.

    Parameters
    ----------
    dot_env : Path | None
        Optional .env file. ``TRELLIS_CONF_ENV_FILE`` is used when not given.

    Returns
    -------
    TrellisConfSettings
        The initialized settings instance.
    """
    global _context_instance
    env_files: list[Path] = []

    if dot_env is None and (env := os.getenv("TRELLIS_CONF_ENV_FILE")):
        dot_env = Path(env)

    if dot_env is not None:
        if dot_env.exists():
            env_files.append(dot_env)
        else:
            logger.warning(f".env file not found: {dot_env} this is ignored")

    _context_instance = TrellisConfSettings(_env_file=tuple(env_files))
    logger.debug("trellis-conf context initialized")
    return _context_instance


def get_context() -> TrellisConfSettings:
    """Get the global trellis-conf context.

    Returns
    -------
    TrellisConfSettings
        The current settings instance.

    Raises
    ------
    RuntimeError
        If the context has not been initialized with init_context().
    """
    if _context_instance is None:
        raise RuntimeError("trellis-conf context not initialized. Call init_context() first.")

    return _context_instance


def reset_context() -> None:
    """Reset the global context (primarily for testing)."""
    global _context_instance
    _context_instance = None
    logger.debug("trellis-conf context reset")
