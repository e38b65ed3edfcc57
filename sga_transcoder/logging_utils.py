from copy import deepcopy
import logging
from typing import Any, Dict

from uvicorn.config import LOGGING_CONFIG


LOGGER_NAME = "sga_transcoder"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    logging.getLogger(LOGGER_NAME).setLevel(level.upper())


def build_uvicorn_log_config(level: str = "INFO") -> Dict[str, Any]:
    """Return uvicorn's logging config with the package logger routed through it."""
    config = deepcopy(LOGGING_CONFIG)
    config.setdefault("loggers", {})[LOGGER_NAME] = {
        "handlers": ["default"],
        "level": level.upper(),
        "propagate": False,
    }
    return config
