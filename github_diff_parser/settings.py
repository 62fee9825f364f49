import logging
import os

from pydantic import BaseModel, ConfigDict

ENV_PREFIX = "GITHUB_DIFF_PARSER_"


def _env_truthy(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes", "on")


def _env_log_level(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    if value.isdigit():
        return int(value)
    level = logging.getLevelName(value.upper())
    if isinstance(level, int):
        return level
    return default


class Settings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    log_level: int = logging.WARNING
    trace: bool = False


def trace_enabled() -> bool:
    return _env_truthy(f"{ENV_PREFIX}TRACE")


def load_settings() -> Settings:
    return Settings(
        log_level=_env_log_level(f"{ENV_PREFIX}LOG_LEVEL", logging.WARNING),
        trace=trace_enabled(),
    )
