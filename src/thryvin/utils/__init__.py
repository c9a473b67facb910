"""Utilities package."""

from thryvin.utils.config import Config
from thryvin.utils.logging import setup_logging

__all__ = [
    "Config",
    "setup_logging",
]
