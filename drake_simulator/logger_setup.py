"""Logging setup for the simulator."""

from __future__ import annotations

import logging
import os

from platformdirs import user_log_dir

from .constants import APP_NAME, LOG_FORMAT, LOG_LEVEL, LOG_TO_FILE


def setup_logging(
    level: str = LOG_LEVEL,
    log_to_file: bool = LOG_TO_FILE,
    log_dir: str | None = None,
) -> logging.Logger:
    """
    Configures the dedicated "drake_simulator" logger.

    Logs go to the console and, when enabled, to simulator.log in the
    platform's user log directory (or log_dir if given). The root logger is
    left alone so pygame and other libraries keep their own output.

    Side Effects:
        - Replaces any handlers already attached to the application logger.
        - Creates the log directory when file logging is enabled.
    """
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    # Clear existing handlers to avoid duplication if called again
    if logger.hasHandlers():
        logger.handlers.clear()

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_to_file:
        log_dir = log_dir or user_log_dir(APP_NAME)
        os.makedirs(log_dir, exist_ok=True)
        log_file = os.path.join(log_dir, "simulator.log")
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)
        logger.info(f"Logging initialized. Log file: {log_file}")
    else:
        logger.info("Logging initialized (console only).")

    return logger
