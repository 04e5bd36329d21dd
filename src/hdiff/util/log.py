"""Console logging setup shared by the CLI commands"""

import logging


LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(debug: bool = False, name: str = "hdiff") -> logging.Logger:
    """Attach a single stderr handler to the package logger; safe to call repeatedly."""
    level = logging.DEBUG if debug else logging.WARNING
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False
    for handler in logger.handlers:
        handler.setLevel(level)
    return logger
