"""Core utilities: errors, units, types, validation."""

from __future__ import annotations

__all__ = [
    "errors",
    "units",
    "types",
    "validation",
]
