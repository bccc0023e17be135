"""Logging configuration for the kubectl-mc command."""

import logging
import logging.config
from typing import Any

LOGGER_NAME = "kubectl_mc"


def get_logging_config(debug: bool = False) -> dict[str, Any]:
    """Get the logging configuration for one run.

    Log records go to stderr so they never mix with command output on stdout.
    """
    level = "DEBUG" if debug else "WARNING"
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
            }
        },
        "handlers": {
            "stderr": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            }
        },
        "loggers": {
            LOGGER_NAME: {
                "handlers": ["stderr"],
                "level": level,
                "propagate": False,
            }
        },
    }


def configure_logging(debug: bool = False) -> logging.Logger:
    """Apply the logging configuration and return the package logger."""
    logging.config.dictConfig(get_logging_config(debug))
    return logging.getLogger(LOGGER_NAME)
