import logging
from logging.handlers import RotatingFileHandler

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_rotating_logger(log_file: str, logger_name: str, level=logging.INFO, max_bytes=5*1024*1024, backup_count=5) -> logging.Logger:
    """
    Set up a rotating file logger.

    Args:
        log_file: Path to the log file.
        logger_name: Name of the logger ("" for the root logger).
        level: Logging level.
        max_bytes: Maximum size of a log file before rotation.
        backup_count: Number of backup log files to keep.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)

    handler = RotatingFileHandler(log_file, maxBytes=max_bytes, backupCount=backup_count)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    logger.addHandler(handler)
    return logger


def setup_logging() -> None:
    """Configure the root logger from LOG_LEVEL and write to LOG_DIR/app.log."""
    level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)

    settings.log_dir.mkdir(parents=True, exist_ok=True)
    setup_rotating_logger(
        log_file=str(settings.log_dir / "app.log"),
        logger_name="app",
        level=level,
    )
