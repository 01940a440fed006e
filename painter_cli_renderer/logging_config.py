#
# PROJECT: painter-cli-renderer
# MODULE: painter_cli_renderer/logging_config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-17
#

"""
Logging Configuration
Sets up the package logger for the renderer and its demo.
"""
import logging
import sys
from typing import Optional, TextIO


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  stream: Optional[TextIO] = sys.stdout) -> logging.Logger:
    """
    Configures the logger for the 'painter_cli_renderer' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file.
        stream: Console stream; None disables console output (curses owns
            the terminal while the demo runs).
    """
    logger = logging.getLogger("painter_cli_renderer")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    if stream is not None:
        console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    logger.info("Logging initialized.")
    return logger
