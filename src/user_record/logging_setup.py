"""Logging setup for the package logger."""

import logging

PACKAGE_LOGGER = "user_record"


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a stream handler to the package logger once and set its level."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    if not any(getattr(h, "_user_record", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s - %(message)s",
        ))
        handler._user_record = True
        logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    return logger
