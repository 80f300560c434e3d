"""
Runtime Module

Process-level initialization: logging and configuration.
"""

from .bootstrap import bootstrap, setup_logging

__all__ = ["bootstrap", "setup_logging"]
