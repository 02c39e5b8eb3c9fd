"""
Utility modules for Paint Canvas
"""

from .logging_config import LoggingConfig

__all__ = ['LoggingConfig']
