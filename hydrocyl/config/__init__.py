"""Конфиги проектирования гидроцилиндра (материалы и расчётные коэффициенты)."""

from __future__ import annotations

from .materials import (  # noqa: F401
    DEFAULT_DESIGN_FACTORS,
    DEFAULT_STEEL,
    S355,
    DesignFactors,
    SteelGrade,
)

__all__ = [
    "SteelGrade",
    "DesignFactors",
    "S355",
    "DEFAULT_STEEL",
    "DEFAULT_DESIGN_FACTORS",
]
