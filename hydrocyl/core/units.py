"""hydrocyl.core.units

Минимальный слой единиц измерения.

Расчётная система проекта: мм, МПа (= Н/мм²), Н, мм⁴.
Принцип: там, где единица меняется (отчёт, масса), переход делается явным множителем.
"""

from __future__ import annotations

import math

# Base units of the design model
MILLIMETER: float = 1.0
NEWTON: float = 1.0
MEGAPASCAL: float = NEWTON / (MILLIMETER**2)

# Convenience multipliers
METER: float = 1e3 * MILLIMETER
BAR: float = 0.1 * MEGAPASCAL
KILONEWTON: float = 1e3 * NEWTON

MM3_TO_M3: float = 1e-9

PI_SQUARED: float = math.pi * math.pi


def mpa_to_bar(pressure_mpa: float) -> float:
    return float(pressure_mpa) / BAR


def newton_to_kilonewton(force_n: float) -> float:
    return float(force_n) / KILONEWTON


def circle_area(diameter: float) -> float:
    """Площадь круга π/4·d² (мм²)."""

    d = float(diameter)
    return 0.25 * math.pi * d * d
