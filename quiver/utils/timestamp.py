"""Timestamp formatting utilities."""

from datetime import datetime


def now() -> str:
    """Current local time for directory names, e.g. "20251114_123456"."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """Current local time in ISO 8601 with microseconds."""
    return datetime.now().isoformat()


def today() -> str:
    """Current local date for dated output directories, e.g. "2025-11-14"."""
    return datetime.now().strftime("%Y-%m-%d")
