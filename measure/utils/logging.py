"""Console logging setup for scripts."""

import logging


def setup_console_logger(level: int = logging.INFO) -> logging.Logger:
    """Configure the package logger to write to stderr."""
    logger = logging.getLogger("measure")
    logger.setLevel(level)
    logger.handlers.clear()
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.propagate = False
    return logger
