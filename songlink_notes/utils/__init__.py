"""Utility modules for SongLink Notes"""

from .logger import (
    get_logger,
    setup_logging,
)

__all__ = [
    "get_logger",
    "setup_logging",
]
