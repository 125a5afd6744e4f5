"""
Shared utilities for QUIVER.

Common functionality used across contexts:
- Logger setup with provenance
- PDF reading
- Text normalization
- Timestamps
"""

from quiver.utils.timestamp import now, now_exact, today

__all__ = ["now", "now_exact", "today"]
