"""
First Launch Module

Tracks whether the user has finished the first-launch wizard.
"""

from __future__ import annotations

import logging
from typing import Optional

from musicdeck.core.config import ConfigManager, get_config_manager

logger = logging.getLogger(__name__)

SETUP_COMPLETED_KEY = "setup.completed"


def is_first_launch(config: Optional[ConfigManager] = None) -> bool:
    """True until complete_setup() has been recorded."""
    config = config or get_config_manager()
    return not config.get(SETUP_COMPLETED_KEY, False)


def complete_setup(config: Optional[ConfigManager] = None) -> bool:
    """
    Mark the first-launch wizard as finished.

    Returns:
        bool: True if the flag was saved.
    """
    config = config or get_config_manager()
    config.set(SETUP_COMPLETED_KEY, True, save=False)
    logger.info("First-launch setup completed")
    return config.save()


def reset_setup(config: Optional[ConfigManager] = None) -> bool:
    """
    Forget that setup was completed, so the wizard shows again.

    Returns:
        bool: True if the flag was saved.
    """
    config = config or get_config_manager()
    config.reset(SETUP_COMPLETED_KEY, save=False)
    logger.info("First-launch setup reset")
    return config.save()
