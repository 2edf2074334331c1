"""Utility exports."""
from .validation import resolve_and_check_path

__all__ = ["resolve_and_check_path"]
