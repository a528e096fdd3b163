"""Current weather conditions with a one-line advisory."""
from __future__ import annotations

__version__ = "0.1.0"
