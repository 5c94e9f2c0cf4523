"""pueue-dash: auto-refreshing terminal view of pueue status output."""

from __future__ import annotations

__version__ = "0.1.0"

__all__ = ["__version__"]
