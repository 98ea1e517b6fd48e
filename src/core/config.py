"""Settings for the shell. Values come from the environment first, command line flags override them."""

import logging
import os
from typing import Any, Optional, Self

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError

ENV_LOG_LEVEL = "ATAXX_LOG_LEVEL"
ENV_LOG_FILE = "ATAXX_LOG_FILE"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseModel):
    log_level: str = "WARNING"
    log_file: Optional[str] = None
    prompt: str = "> "
    confirm_exit: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise InvalidRequestError(
                f"Unknown log level: {value!r}. Pick one from {', '.join(LOG_LEVELS)}"
            )
        return level

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> Self:
        """Read overrides from the environment (or any mapping passed in, handy for tests)."""
        env = os.environ if environ is None else environ
        values: dict[str, str] = {}
        if env.get(ENV_LOG_LEVEL):
            values["log_level"] = env[ENV_LOG_LEVEL]
        if env.get(ENV_LOG_FILE):
            values["log_file"] = env[ENV_LOG_FILE]
        return cls(**values)

    def with_overrides(self, **overrides: Any) -> Self:
        """Command line flags win over the environment. `None` means: flag not given."""
        update = {key: value for key, value in overrides.items() if value is not None}
        return self.model_validate({**self.model_dump(), **update})

    @property
    def numeric_log_level(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level]
