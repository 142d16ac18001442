"""
Logging configuration for the application.

One stdout handler, one line format. Request bodies are never logged,
so passwords, tokens and uploaded file contents stay out of the logs.
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

NOISY_LOGGERS = ("uvicorn.access", "uvicorn.error", "httpx", "httpcore")


def configure_logging(level: str = "INFO", sql_echo: bool = False) -> None:
    """Configure the root logger.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        sql_echo: Keep SQLAlchemy statement logging at INFO instead of
            silencing it with the other third-party loggers.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if sql_echo else logging.WARNING
    )
