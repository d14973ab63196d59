"""Console logging for the command line tools."""

import logging.config
import sys
from typing import Any


def setup_logging(verbose: bool = False) -> None:
    """Send ``openapi_registry`` logs to stderr; DEBUG with file/line when verbose."""
    log_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "detailed": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "simple": {
                "format": "%(levelname)s - %(message)s",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": "DEBUG" if verbose else "INFO",
                "formatter": "detailed" if verbose else "simple",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            "openapi_registry": {
                "handlers": ["console"],
                "level": "DEBUG" if verbose else "INFO",
                "propagate": False,
            },
        },
    }
    logging.config.dictConfig(log_config)
