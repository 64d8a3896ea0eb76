"""Неблокирующие проверки проекта (предупреждения перед отчётом).

Цилиндр уже валиден, но инженерные правила могут требовать правки:
- BUCKLING_RISK: запас устойчивости штока ниже коэффициента запаса;
- WALL_THICKNESS: расчётная стенка по Ламе толще номинальной (0.10·D);
- WALL_INFEASIBLE: давление выше допускаемого напряжения;
- STOP_TUBE: длинный ход (> 1000 мм) при тонком штоке (d/D < 0.55).

Критические предупреждения должны блокировать отчёт/экспорт (blocking()).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, List

from hydrocyl.config.materials import DEFAULT_DESIGN_FACTORS, DesignFactors
from hydrocyl.core.errors import InvalidPressureError
from hydrocyl.design.mounting import MountingType

if TYPE_CHECKING:
    from hydrocyl.design.cylinder import HydraulicCylinder


class Severity(str, Enum):
    WARNING = "warning"
    CRITICAL = "critical"


@dataclass(frozen=True)
class DesignAdvisory:
    code: str
    severity: Severity
    message: str


def design_advisories(
    cylinder: "HydraulicCylinder",
    mounting: MountingType,
    factors: DesignFactors = DEFAULT_DESIGN_FACTORS,
) -> List[DesignAdvisory]:
    out: List[DesignAdvisory] = []

    buckling = cylinder.check_buckling(mounting)
    if buckling.buckling_factor < cylinder.SAFETY_FACTOR:
        out.append(
            DesignAdvisory(
                "BUCKLING_RISK",
                Severity.CRITICAL,
                f"rod buckling risk: safety factor {buckling.buckling_factor:.2f} < {cylinder.SAFETY_FACTOR}; "
                "increase rod diameter or reduce stroke",
            )
        )

    try:
        required = cylinder.calculate_wall_thickness()
    except InvalidPressureError as exc:
        out.append(DesignAdvisory("WALL_INFEASIBLE", Severity.CRITICAL, exc.message))
    else:
        nominal = cylinder.bore_diameter * factors.nominal_wall_ratio
        if required > nominal:
            out.append(
                DesignAdvisory(
                    "WALL_THICKNESS",
                    Severity.CRITICAL,
                    f"tube wall may be insufficient: required {required:.2f} mm, nominal {nominal:.2f} mm",
                )
            )

    rod_ratio = cylinder.rod_diameter / cylinder.bore_diameter
    if cylinder.stroke > factors.long_stroke_mm and rod_ratio < factors.stop_tube_rod_ratio:
        out.append(
            DesignAdvisory(
                "STOP_TUBE",
                Severity.WARNING,
                f"long stroke ({cylinder.stroke:.0f} mm) with rod/bore ratio {rod_ratio:.2f}: "
                "a stop tube (spacer) is recommended",
            )
        )

    return out


def blocking(advisories: Iterable[DesignAdvisory]) -> bool:
    return any(a.severity is Severity.CRITICAL for a in advisories)
