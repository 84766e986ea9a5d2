import logging
import os
from logging.handlers import RotatingFileHandler
from config.config import get_config

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
ROOT_LOGGER = 'gameplan'


def _rotating_file_handler(path):
    log_dir = os.path.dirname(path)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
    # 10MB per file, ten generations kept
    handler = RotatingFileHandler(path, maxBytes=10 * 1024 * 1024, backupCount=10)
    handler.setLevel(logging.INFO)
    return handler


def setup_logger(name=ROOT_LOGGER):
    """Attach the rotating file and console handlers to the scheduler logger"""
    settings = get_config()
    logger = logging.getLogger(name)
    logger.setLevel(getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO))

    if logger.handlers:
        return logger

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.DEBUG)

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S')
    for handler in (_rotating_file_handler(settings.LOG_FILE), console_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_logger(name=None):
    """Get a logger under the scheduler hierarchy"""
    if not name:
        return logging.getLogger(ROOT_LOGGER)
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{ROOT_LOGGER}.{name}')


# Create default logger
logger = setup_logger()
