"""
Bootstrap Module

Sets up logging and configuration before the backend serves the UI.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, Union

from musicdeck.core.config import ConfigManager, get_config_dir, set_config_manager
from musicdeck.core.constants import LOG_FILENAME

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed here so repeated calls don't stack them
_HANDLER_FLAG = "_musicdeck_handler"


def setup_logging(
    logs_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> Optional[Path]:
    """
    Configure root logging.

    Args:
        logs_dir: Directory for a rotating log file, or None for console only
        level: Root logger level

    Returns:
        Path of the log file, or None when file logging is not enabled.
    """
    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            root.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    setattr(console_handler, _HANDLER_FLAG, True)
    root.addHandler(console_handler)

    if logs_dir is None:
        return None

    log_file = Path(logs_dir) / LOG_FILENAME
    try:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        logger.warning(f"Could not set up file logging: {e}")
        return None

    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)
    setattr(file_handler, _HANDLER_FLAG, True)
    root.addHandler(file_handler)

    logger.debug(f"Log file: {log_file}")
    return log_file


def bootstrap(
    config_dir: Optional[Union[str, Path]] = None,
    logs_dir: Optional[Union[str, Path]] = None,
    level: int = logging.INFO,
) -> ConfigManager:
    """
    Initialize logging and load configuration.

    Args:
        config_dir: Configuration directory, defaults to the per-user one
        logs_dir: Log directory, defaults to ``<config_dir>/logs``
        level: Root logger level

    Returns:
        ConfigManager: Loaded configuration, also installed as the global one
    """
    config_dir = Path(config_dir) if config_dir is not None else get_config_dir()
    setup_logging(logs_dir if logs_dir is not None else config_dir / "logs", level)

    config = ConfigManager(config_dir=config_dir)
    config.load()
    set_config_manager(config)

    logger.info(f"Backend initialized (config: {config.config_path})")
    return config
