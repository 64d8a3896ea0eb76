"""Каталог уплотнений: подбор профиля по диаметру.

Статическая таблица: для каждого типа уплотнения упорядоченный список
непересекающихся диапазонов [min, max) и последний открытый диапазон [min, ∞).
Диаметр ниже первого диапазона получает профиль первого диапазона.

Ядро расчёта не зависит от результата подбора: профиль только предзаполняет
справочные поля поршня (ширина/высота канавки компактного уплотнения).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple

from hydrocyl.core.errors import InvalidDimensionError
from hydrocyl.core.validation import ensure_finite, ensure_positive


class SealType(str, Enum):
    PISTON = "piston"
    ROD = "rod"
    WIPER = "wiper"


@dataclass(frozen=True)
class SealProfile:
    code: str
    width: float
    height: float


@dataclass(frozen=True)
class _RangeProfile:
    min_mm: float
    max_mm: Optional[float]
    profile: SealProfile

    def includes(self, diameter: float) -> bool:
        if self.max_mm is None:
            return diameter >= self.min_mm
        return self.min_mm <= diameter < self.max_mm


def _ranges(code: str, *rows: Tuple[float, Optional[float], float, float]) -> Tuple[_RangeProfile, ...]:
    return tuple(_RangeProfile(lo, hi, SealProfile(code, w, h)) for lo, hi, w, h in rows)


# K19 compact piston seal, keyed by bore
_PISTON_RANGES = _ranges(
    "K19",
    (40.0, 80.0, 18.0, 7.0),
    (80.0, 125.0, 22.5, 8.5),
    (125.0, None, 26.5, 10.0),
)

# K33 rod seal, keyed by rod diameter (height grows ~5..12 mm)
_ROD_RANGES = _ranges(
    "K33",
    (16.0, 25.0, 8.0, 5.0),
    (25.0, 40.0, 10.0, 6.0),
    (40.0, 56.0, 12.0, 8.0),
    (56.0, 80.0, 14.0, 10.0),
    (80.0, None, 16.0, 12.0),
)

# K17 wiper, keyed by rod diameter
_WIPER_RANGES = _ranges(
    "K17",
    (16.0, 25.0, 6.0, 4.0),
    (25.0, 40.0, 7.0, 5.0),
    (40.0, 56.0, 9.0, 6.0),
    (56.0, 80.0, 10.0, 7.0),
    (80.0, None, 12.0, 8.0),
)

SEAL_TABLES: Dict[SealType, Tuple[_RangeProfile, ...]] = {
    SealType.PISTON: _PISTON_RANGES,
    SealType.ROD: _ROD_RANGES,
    SealType.WIPER: _WIPER_RANGES,
}


def lookup_by_diameter(seal_type: SealType, diameter: float) -> SealProfile:
    """Профиль уплотнения для диаметра (мм)."""

    name = "boreDiameter" if SealType(seal_type) is SealType.PISTON else "rodDiameter"
    d = float(diameter)
    ensure_finite(d, name, InvalidDimensionError)
    ensure_positive(d, name, InvalidDimensionError)

    table = SEAL_TABLES[SealType(seal_type)]
    for entry in table:
        if entry.includes(d):
            return entry.profile
    return table[0].profile


def piston_seal(bore_diameter: float) -> SealProfile:
    return lookup_by_diameter(SealType.PISTON, bore_diameter)


def rod_seal(rod_diameter: float) -> SealProfile:
    return lookup_by_diameter(SealType.ROD, rod_diameter)


def wiper_seal(rod_diameter: float) -> SealProfile:
    return lookup_by_diameter(SealType.WIPER, rod_diameter)
