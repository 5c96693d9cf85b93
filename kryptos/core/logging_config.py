"""
Logging Configuration
Sets up the package logger for applications embedding kryptos.
"""
import logging
import sys

from kryptos.core.config import Settings, get_settings

PACKAGE_LOGGER = "kryptos"


def setup_logging(
    level: int | str | None = None,
    log_file: str | None = None,
    settings: Settings | None = None,
) -> logging.Logger:
    """
    Configures the logger for the 'kryptos' namespace.

    The library never calls this itself; applications opt in.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO"). Defaults to the
            level from settings.
        log_file: Optional path to save logs to a file. Defaults to the
            log file from settings.
        settings: Settings to read defaults from.

    Returns:
        The configured package logger.
    """
    settings = settings or get_settings()
    if level is None:
        level = settings.effective_log_level
    if log_file is None:
        log_file = settings.log_file

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized for {settings.app_name}.")
    return logger
