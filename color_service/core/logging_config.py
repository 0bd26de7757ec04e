"""
Clean, minimal logging configuration for Color Service.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Optional

from color_service.core.config import get_settings

# Service configuration
SERVICE_NAME = "color-service"

# Global flag to track if logging has been set up
_logging_configured = False


def setup_logging(force_reconfigure=False):
    """
    Configure root logging for Color Service.

    Console always; a rotating file under LOG_DIR (INFO and above) when
    LOG_TO_FILE is set. Safe to call repeatedly.
    """
    global _logging_configured

    if _logging_configured and not force_reconfigure:
        return

    settings = get_settings()
    debug = settings.DEBUG

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if settings.LOG_TO_FILE:
        log_dir = Path(settings.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_dir / f"{SERVICE_NAME}.log",
            maxBytes=10*1024*1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(logging.DEBUG if debug else logging.INFO)

    _silence_third_party_loggers(debug)

    _logging_configured = True


def _silence_third_party_loggers(debug: bool):
    """Reduce verbosity of noisy third-party libraries."""

    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("fastapi").setLevel(logging.WARNING)

    # uvicorn startup banner only when debugging
    if not debug:
        logging.getLogger("uvicorn").setLevel(logging.WARNING)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Return a logger named after the calling module unless a name is given.
    """
    if name is None:
        import inspect
        frame = inspect.currentframe()
        if frame and frame.f_back:
            name = frame.f_back.f_globals.get('__name__', 'unknown')
        else:
            name = 'unknown'

    return logging.getLogger(name)


class RequestLogger:
    """Simple request logger for middleware"""

    @classmethod
    def log_request(cls, method: str, url: str):
        """Log incoming request details"""
        get_logger("http.request").info(f"{method} {url}")

    @classmethod
    def log_response(cls, status_code: int, response_time: float):
        """Log response details"""
        get_logger("http.response").info(f"Status: {status_code} - Time: {response_time:.3f}s")
