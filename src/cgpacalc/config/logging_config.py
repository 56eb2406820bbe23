"""Logging setup for the cgpacalc logger tree."""
import logging
import sys


APP_LOGGER = "cgpacalc"


def setup_logging(level: str = "INFO") -> logging.Logger:
    lvl = getattr(logging, level.upper(), logging.INFO)

    logger = logging.getLogger(APP_LOGGER)
    logger.setLevel(lvl)
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(lvl)
    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger
