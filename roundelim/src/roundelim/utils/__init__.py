"""Utility modules for roundelim."""

from roundelim.utils.logging import MultilineFormatter, setup_logging

__all__ = ["setup_logging", "MultilineFormatter"]
