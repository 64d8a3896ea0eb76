"""Расчёты по валидированному цилиндру (Ламе, Эйлер, масса, предупреждения, развёртки)."""

from __future__ import annotations

from .buckling import BucklingResult, analyze_buckling, euler_critical_load
from .lame import allowable_stress, lame_wall_thickness
from .mass import MassBreakdown, estimate_mass

__all__ = [
    "BucklingResult",
    "MassBreakdown",
    "allowable_stress",
    "analyze_buckling",
    "estimate_mass",
    "euler_critical_load",
    "lame_wall_thickness",
]
