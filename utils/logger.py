import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from utils.app_config import CONFIG_DIR
from utils.constants import LOG_BACKUP_COUNT, LOG_MAX_BYTES

LOG_DIR = CONFIG_DIR / "logs"
LOG_FILE = LOG_DIR / "app.log"


def setup_logger(level: int = logging.INFO, log_file: Path = LOG_FILE) -> logging.Logger:
    """Configure the root logger with console and rotating file handlers.

    Modules log through logging.getLogger(__name__). Calling this twice does
    not add duplicate handlers.
    """
    logger = logging.getLogger()

    if not logger.handlers:
        logger.setLevel(level)

        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        c_handler = logging.StreamHandler()
        c_handler.setFormatter(formatter)
        logger.addHandler(c_handler)

        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            f_handler = RotatingFileHandler(
                log_file,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding='utf-8'
            )
            f_handler.setFormatter(formatter)
            logger.addHandler(f_handler)
        except OSError as e:
            # Console logging still works
            logger.warning("Could not set up file logging: %s", e)

    return logger
