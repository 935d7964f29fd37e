"""Runtime configuration read from environment variables."""

import logging
import os
from collections.abc import Mapping

from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "SYSFETCH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class FetchConfig(BaseModel):
    """Settings for a single sysfetch run."""

    shell: str = ""
    no_color: bool = False
    log_level: str = DEFAULT_LOG_LEVEL

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "FetchConfig":
        """Build a config from the environment.

        An invalid log level is reported and replaced by the default so
        that a bad variable never stops the banner from printing.
        """
        env = os.environ if environ is None else environ
        values = {
            "shell": env.get("SHELL", "").strip(),
            # https://no-color.org: any non-empty value disables color
            "no_color": bool(env.get("NO_COLOR")),
            "log_level": env.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL,
        }
        try:
            return cls(**values)
        except ValidationError as e:
            logger.warning(f"Ignoring invalid {LOG_LEVEL_ENV}: {e.errors()[0]['msg']}")
            values["log_level"] = DEFAULT_LOG_LEVEL
            return cls(**values)
