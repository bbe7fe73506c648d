import logging
import sys


def setup_logger(level: int = logging.INFO):
    """Configures the root logger for the application."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Logs go to stderr, stdout is reserved for command output
    handler = logging.StreamHandler(sys.stderr)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    handler.setFormatter(formatter)

    if not logger.handlers:
        logger.addHandler(handler)


setup_logger()
