"""
Logging configuration for JobNest API.

Root logger writes to stdout and to a rotating file under LOG_DIR. Request
payloads are passed through sanitize_log_data() before they are logged.
"""
import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler

LOG_FILE_NAME = "jobnest.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024  # 10MB
LOG_FILE_BACKUPS = 5

# Substrings that mark a key as secret, matched case-insensitively
SENSITIVE_KEYS = ("password", "token", "secret", "key", "signature", "database_url")

REDACTED = "***REDACTED***"

# Third-party loggers that are noisy at INFO
QUIET_LOGGERS = ("uvicorn", "uvicorn.access", "stripe", "sqlalchemy.engine", "multipart")


def _formatter(detailed: bool) -> logging.Formatter:
    if detailed:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    else:
        fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    return logging.Formatter(fmt, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logging(log_level: str = "INFO", log_dir: str = "logs"):
    """
    Configure application logging.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for the rotating log file, created if missing
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(level)
    # Repeated calls replace the handlers instead of stacking them
    root.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_formatter(detailed=False))
    root.addHandler(console_handler)

    file_handler = RotatingFileHandler(
        log_path / LOG_FILE_NAME,
        maxBytes=LOG_FILE_MAX_BYTES,
        backupCount=LOG_FILE_BACKUPS,
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(_formatter(detailed=True))
    root.addHandler(file_handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _is_sensitive(key) -> bool:
    key = str(key).lower()
    return any(marker in key for marker in SENSITIVE_KEYS)


def sanitize_log_data(data: dict) -> dict:
    """
    Return a copy of data with secret values replaced, nested dicts included.

    The input is not modified.
    """
    sanitized = {}
    for key, value in data.items():
        if _is_sensitive(key):
            sanitized[key] = REDACTED
        elif isinstance(value, dict):
            sanitized[key] = sanitize_log_data(value)
        else:
            sanitized[key] = value
    return sanitized
