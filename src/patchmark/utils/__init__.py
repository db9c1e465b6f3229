"""Shared utilities for patchmark."""

from patchmark.utils.logger import get_logger

__all__ = ["get_logger"]
