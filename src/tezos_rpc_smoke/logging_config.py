from __future__ import annotations

import logging
import logging.config
import sys


def setup_logging(level: str = "INFO") -> None:
    """
    Configure process logging: one timestamped line per record on stderr.
    """

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": "%(asctime)s %(message)s",
                    "datefmt": "%Y/%m/%d %H:%M:%S",
                }
            },
            "handlers": {
                "stderr": {
                    "class": "logging.StreamHandler",
                    "formatter": "default",
                    "stream": sys.stderr,
                }
            },
            "root": {"level": getattr(logging, level.upper(), logging.INFO), "handlers": ["stderr"]},
        }
    )
