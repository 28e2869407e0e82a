"""Utility modules for Maplify."""

from maplify.utils.logging import setup_logging

__all__ = [
    "setup_logging",
]
