"""Redaction package exports."""
from .hide import hide
from .unhide import unhide

__all__ = ["hide", "unhide"]
