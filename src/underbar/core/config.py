import os
from typing import Optional

from pydantic import BaseModel, ValidationError, field_validator

from underbar.core.errors import ConfigurationError

ENV_PREFIX = "UNDERBAR_"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    LOG_LEVEL: str = "INFO"
    SHUFFLE_SEED: Optional[int] = None
    TIMER_DAEMON: bool = True

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL must be one of {', '.join(_LOG_LEVELS)}, got '{value}'"
            )
        return level

    @classmethod
    def load(cls, environ: Optional[dict] = None) -> "Settings":
        """Build settings from ``UNDERBAR_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ`` (used by tests).

        Raises:
            ConfigurationError: If a variable holds a value of the wrong shape.
        """
        environ = os.environ if environ is None else environ

        values = {}
        for name in cls.model_fields:
            raw = environ.get(ENV_PREFIX + name)
            # Empty strings count as unset
            if raw:
                values[name] = raw

        try:
            return cls(**values)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid underbar settings: {e}") from e


settings = Settings.load()
