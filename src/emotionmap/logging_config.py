"""
Logging Configuration
=====================
Sets up the 'emotionmap' namespace logger used by every module of the viewer.

Console output goes to stdout. With --log-file the same records are also
written to a file, which is rewritten on every start.
"""
import logging
import sys
from typing import Optional

LOGGER_NAME = "emotionmap"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%H:%M:%S'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'emotionmap' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG when started with --debug).
        log_file: Optional path to save logs to a file.

    Returns:
        The configured namespace logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    # Reconfiguring replaces the handlers of a previous call
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    destination = f"stdout and {log_file}" if log_file else "stdout"
    logger.info(f"Emotion map logging at {logging.getLevelName(level)} to {destination}.")
    return logger
