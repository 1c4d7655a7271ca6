"""
Logging configuration for the campus cafe application

All modules log through loggers obtained from get_logger(). setup_logging()
is called once by the entry point (app.py); library code never configures
handlers itself.
"""
import logging
import sys
from typing import Optional


LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None):
    """
    Configure the root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ...).
        log_file: Optional path of a file that receives a copy of the log.
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )

    # werkzeug 요청 로그는 경고 이상만 출력
    logging.getLogger("werkzeug").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Return a module logger (use __name__)"""
    return logging.getLogger(name)
