"""Logging and timing utilities."""

from .logging import setup_logging
from .timing import section_timer

__all__ = ["setup_logging", "section_timer"]
