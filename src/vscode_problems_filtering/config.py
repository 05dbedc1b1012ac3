import logging
import os

from pydantic import BaseModel, ConfigDict
from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_ENV = "VSCODE_PROBLEMS_LOG_LEVEL"
_DEFAULT_LOG_LEVEL = "WARNING"
_PACKAGE_LOGGER = "vscode_problems_filtering"


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    log_level: str = _DEFAULT_LOG_LEVEL


def _normalize_level(value: str) -> str:
    level = value.strip().upper()
    return level if isinstance(logging.getLevelName(level), int) else _DEFAULT_LOG_LEVEL


def get_settings() -> Settings:
    return Settings(log_level=_normalize_level(os.getenv(LOG_LEVEL_ENV, _DEFAULT_LOG_LEVEL)))


def setup_logging(settings: Settings) -> logging.Logger:
    """Send package logs to stderr through rich, never to the data output."""
    logger = logging.getLogger(_PACKAGE_LOGGER)
    logger.setLevel(settings.log_level)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
