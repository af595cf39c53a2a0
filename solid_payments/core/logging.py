import logging
import sys
from colorlog import ColoredFormatter

LOG_FORMAT = (
    "%(log_color)s%(levelname)-8s%(reset)s | "
    "%(blue)s%(asctime)s%(reset)s | "
    "%(green)s%(name)s%(reset)s | "
    "%(white)s%(message)s"
)

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "white",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red,bg_white",
}


def setup_logger(level=logging.INFO, stream=None):
    """Attach a single colored console handler to the root logger."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Calling twice must not print every line twice
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(
        ColoredFormatter(LOG_FORMAT, datefmt="%H:%M:%S", log_colors=LOG_COLORS)
    )
    logger.addHandler(handler)

    return logger
