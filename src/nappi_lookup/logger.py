import logging
from pathlib import Path
from logging.handlers import TimedRotatingFileHandler
from .config import get_config, get_int_config

LOG_FILE = "logs/app.log"

def get_logger(name: str) -> logging.Logger:
    """
    Configures and returns a logger instance.
    This logger uses a TimedRotatingFileHandler to automatically rotate logs.
    """
    log_level_str = get_config("NAPPI_LOG_LEVEL").upper()
    log_level = getattr(logging, log_level_str, logging.INFO)
    retention_days = get_int_config("NAPPI_LOG_RETENTION_DAYS")

    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    # Prevent duplicate handlers if the logger is already configured
    if logger.hasHandlers():
        return logger

    Path(LOG_FILE).parent.mkdir(parents=True, exist_ok=True)

    # Rotate every day at midnight and keep N backups.
    handler = TimedRotatingFileHandler(
        LOG_FILE,
        when="midnight",
        interval=1,
        backupCount=retention_days
    )
    handler.setLevel(log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    logger.addHandler(handler)

    return logger
