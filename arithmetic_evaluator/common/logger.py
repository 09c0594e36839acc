"""Shared logger for the arithmetic evaluator."""
import logging


LOG_FORMAT = "%(asctime)s [%(levelname)8s] %(name)s: %(message)s"

logger: logging.Logger = logging.getLogger("arithmetic_evaluator")


def configure_logging(level: str = "WARNING") -> None:
    """
    Configure the root handler and the package logger level.

    :param str level: Standard logging level name (e.g. "DEBUG", "INFO")

    :return: None
    """
    log_level: int = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,  # Override any existing configuration
    )
    logger.setLevel(log_level)
