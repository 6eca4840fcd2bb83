"""
Logging Configuration
Sets up the loggers for the simulator modules.
"""
import logging
import os
import sys
from typing import Optional

LOGGER_NAMES = ("birdlens", "birdlens_calc", "birdlens_data", "birdlens_plots")


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> None:
    """
    Configures the simulator loggers.

    Args:
        level: Logging level (e.g. logging.DEBUG). Defaults to the
            BIRDLENS_LOG_LEVEL environment variable, else INFO.
        log_file: Optional path to save logs to a file.
    """
    if level is None:
        level = logging.getLevelName(os.environ.get("BIRDLENS_LOG_LEVEL", "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)

        # Streamlit re-executes the app script on every interaction
        for h in list(logger.handlers):
            logger.removeHandler(h)
            h.close()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

    logging.getLogger("birdlens").debug("Logging initialized.")
