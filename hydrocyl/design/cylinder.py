"""Гидроцилиндр двустороннего действия: агрегат проектных параметров.

Построение в две фазы:
1. resolve_parts(): каждая неуказанная деталь (поршень, головка, дно) получает
   значение по умолчанию из d_rod / D. Конструкторы деталей валидируют себя здесь,
   поэтому их ошибки всплывают раньше проверок агрегата.
2. _validate(): проверки агрегата в фиксированном порядке, до первой ошибки:
   давление, D, d, d < D, ход, закрытая длина, L_closed > stroke, запас >= 0,
   L_closed >= минимальной закрытой длины.

После построения объект неизменяем: при изменении параметров создаётся новый экземпляр.

Единицы: МПа (= Н/мм²), мм, Н, мм⁴.
Крепление не принадлежит цилиндру: оно передаётся в check_buckling() на каждый
вызов, чтобы один и тот же цилиндр можно было оценить с разными креплениями.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, Mapping, NamedTuple, Optional

from hydrocyl.analysis.buckling import BucklingResult, analyze_buckling
from hydrocyl.analysis.lame import lame_wall_thickness
from hydrocyl.analysis.mass import MassBreakdown, estimate_mass
from hydrocyl.config.materials import DEFAULT_DESIGN_FACTORS, DEFAULT_STEEL
from hydrocyl.core.errors import (
    InvalidDimensionError,
    InvalidPressureError,
    InvalidStrokeError,
)
from hydrocyl.core.types import CylinderRecord
from hydrocyl.core.units import circle_area
from hydrocyl.core.validation import ErrorType, ensure_less_than, read_mapping, read_number
from hydrocyl.design.mounting import MountingType
from hydrocyl.design.parts import CylinderBase, CylinderHead, CylinderPiston

logger = logging.getLogger(__name__)


class CylinderParts(NamedTuple):
    piston: CylinderPiston
    head: CylinderHead
    base: CylinderBase


def resolve_parts(
    bore_diameter: float,
    rod_diameter: float,
    piston: Optional[CylinderPiston] = None,
    head: Optional[CylinderHead] = None,
    base: Optional[CylinderBase] = None,
) -> CylinderParts:
    """Фаза 1: подставить детали по умолчанию.

    piston: width = 0.6·d; head: L = max(1.2·d, 25), направляющая = d;
    base: t = max(0.12·D, 12).
    """

    if piston is None:
        piston = CylinderPiston.for_rod(rod_diameter)
    if head is None:
        head = CylinderHead.for_rod(rod_diameter)
    elif rod_diameter > 0 and head.guide_length < rod_diameter:
        # головка могла быть создана под другой шток
        raise InvalidDimensionError(
            f"guideLength ({head.guide_length} mm) must be >= rodDiameter ({rod_diameter} mm)",
            parameter_name="guideLength",
        )
    if base is None:
        base = CylinderBase.for_bore(bore_diameter)
    return CylinderParts(piston, head, base)


def minimum_closed_length(
    stroke: float,
    piston: CylinderPiston,
    head: CylinderHead,
    base: CylinderBase,
    extra_margin: float = DEFAULT_DESIGN_FACTORS.extra_margin_mm,
) -> float:
    """L_closed,min = B_piston + L_head + t_base + stroke + запас (мм)."""

    return piston.width + head.total_length + base.thickness + stroke + extra_margin


def _check_positive(value: float, name: str, error: ErrorType) -> None:
    if not (math.isfinite(value) and value > 0):
        raise error(f"{name} must be a finite value > 0, got {value}", parameter_name=name)


@dataclass(frozen=True)
class HydraulicCylinder:
    """Проектные параметры цилиндра и расчёты по ним.

    pressure:       рабочее давление, МПа (типично 16..32).
    bore_diameter:  внутренний диаметр гильзы D, мм.
    rod_diameter:   диаметр штока d, мм, строго меньше D.
    stroke:         ход, мм.
    closed_length:  длина в сложенном состоянии (между осями креплений), мм.
    extra_margin:   добавка к минимальной закрытой длине, мм.
    piston/head/base: детали; None -> значение по умолчанию (см. resolve_parts).
    """

    MECHANICAL_EFFICIENCY = DEFAULT_DESIGN_FACTORS.mechanical_efficiency
    SAFETY_FACTOR = DEFAULT_DESIGN_FACTORS.safety_factor
    ELASTIC_MODULUS = DEFAULT_STEEL.elastic_modulus_mpa
    YIELD_STRENGTH = DEFAULT_STEEL.yield_strength_mpa
    DEFAULT_EXTRA_MARGIN = DEFAULT_DESIGN_FACTORS.extra_margin_mm

    pressure: float
    bore_diameter: float
    rod_diameter: float
    stroke: float
    closed_length: float
    extra_margin: float = DEFAULT_DESIGN_FACTORS.extra_margin_mm
    # после __post_init__ детали всегда заданы
    piston: Optional[CylinderPiston] = None
    head: Optional[CylinderHead] = None
    base: Optional[CylinderBase] = None

    def __post_init__(self) -> None:
        parts = resolve_parts(self.bore_diameter, self.rod_diameter, self.piston, self.head, self.base)
        object.__setattr__(self, "piston", parts.piston)
        object.__setattr__(self, "head", parts.head)
        object.__setattr__(self, "base", parts.base)
        self._validate()
        logger.debug("Constructed %r", self)

    def _validate(self) -> None:
        _check_positive(self.pressure, "pressure", InvalidPressureError)
        _check_positive(self.bore_diameter, "boreDiameter", InvalidDimensionError)
        _check_positive(self.rod_diameter, "rodDiameter", InvalidDimensionError)

        # равенство даёт нулевую кольцевую площадь -> нет силы втягивания
        ensure_less_than(self.rod_diameter, self.bore_diameter, "rodDiameter", "boreDiameter")

        _check_positive(self.stroke, "stroke", InvalidStrokeError)
        _check_positive(self.closed_length, "closedLength", InvalidStrokeError)

        if self.closed_length <= self.stroke:
            raise InvalidStrokeError(
                f"closedLength ({self.closed_length} mm) must be greater than stroke ({self.stroke} mm)",
                parameter_name="closedLength",
            )

        if not (math.isfinite(self.extra_margin) and self.extra_margin >= 0):
            raise InvalidStrokeError(
                f"extraMargin must be a finite value >= 0, got {self.extra_margin}",
                parameter_name="extraMargin",
            )

        min_length = self.calculate_min_closed_length()
        if self.closed_length < min_length:
            raise InvalidStrokeError(
                f"closedLength ({self.closed_length} mm) is below the computed minimum ({min_length:.1f} mm)",
                parameter_name="closedLength",
            )

    # ------------------------------------------------------------------
    # Derived geometry
    # ------------------------------------------------------------------

    @property
    def piston_area(self) -> float:
        """Площадь поршня π/4·D² (мм²), поршневая полость."""

        return circle_area(self.bore_diameter)

    @property
    def annular_area(self) -> float:
        """Кольцевая площадь π/4·(D² − d²) (мм²), штоковая полость."""

        return 0.25 * math.pi * (self.bore_diameter**2 - self.rod_diameter**2)

    @property
    def rod_area(self) -> float:
        return circle_area(self.rod_diameter)

    @property
    def rod_moment_of_inertia(self) -> float:
        """I = π/64·d⁴ (мм⁴)."""

        return math.pi / 64.0 * self.rod_diameter**4

    @property
    def open_length(self) -> float:
        return self.closed_length + self.stroke

    @property
    def bore_to_rod_ratio(self) -> float:
        return self.bore_diameter / self.rod_diameter

    @property
    def pull_push_ratio(self) -> float:
        """F_pull / F_push = 1 − (d/D)²."""

        return self.annular_area / self.piston_area

    @property
    def rod_length(self) -> float:
        return self.stroke + self.head.total_length

    @property
    def tube_length(self) -> float:
        return max(self.closed_length - self.head.total_length - self.base.thickness, self.stroke)

    # ------------------------------------------------------------------
    # Calculations
    # ------------------------------------------------------------------

    def calculate_min_closed_length(self) -> float:
        return minimum_closed_length(self.stroke, self.piston, self.head, self.base, self.extra_margin)

    def calculate_push_force(self) -> float:
        """Сила выдвижения F = P·A_piston·η (Н)."""

        return self.pressure * self.piston_area * self.MECHANICAL_EFFICIENCY

    def calculate_pull_force(self) -> float:
        """Сила втягивания F = P·A_annular·η (Н); всегда меньше силы выдвижения."""

        return self.pressure * self.annular_area * self.MECHANICAL_EFFICIENCY

    def calculate_wall_thickness(self) -> float:
        """Минимальная толщина стенки гильзы по Ламе (мм).

        Raises:
            InvalidPressureError: если pressure >= σ_т / SF.
        """

        return lame_wall_thickness(self.bore_diameter, self.pressure, self.YIELD_STRENGTH, self.SAFETY_FACTOR)

    def check_buckling(self, mounting: MountingType) -> BucklingResult:
        return analyze_buckling(self, mounting)

    def calculate_mass_breakdown(self) -> MassBreakdown:
        return estimate_mass(self)

    def calculate_total_weight(self) -> float:
        """Приближённая масса металла (кг)."""

        return self.calculate_mass_breakdown().total_kg

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_record(self) -> CylinderRecord:
        return {
            "pressure": self.pressure,
            "boreDiameter": self.bore_diameter,
            "rodDiameter": self.rod_diameter,
            "stroke": self.stroke,
            "closedLength": self.closed_length,
            "extraMargin": self.extra_margin,
            "piston": self.piston.to_record(),
            "head": self.head.to_record(),
            "base": self.base.to_record(),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "HydraulicCylinder":
        """Восстановить цилиндр из записи; полная валидация выполняется заново."""

        pressure = read_number(record, "pressure", InvalidPressureError)
        bore = read_number(record, "boreDiameter", InvalidDimensionError)
        rod = read_number(record, "rodDiameter", InvalidDimensionError)
        stroke = read_number(record, "stroke", InvalidStrokeError)
        closed_length = read_number(record, "closedLength", InvalidStrokeError)
        extra_margin = read_number(record, "extraMargin", InvalidStrokeError, default=cls.DEFAULT_EXTRA_MARGIN)

        piston_rec = read_mapping(record, "piston", InvalidDimensionError)
        head_rec = read_mapping(record, "head", InvalidDimensionError)
        base_rec = read_mapping(record, "base", InvalidDimensionError)

        return cls(
            pressure=pressure,
            bore_diameter=bore,
            rod_diameter=rod,
            stroke=stroke,
            closed_length=closed_length,
            extra_margin=extra_margin,
            piston=None if piston_rec is None else CylinderPiston.from_record(piston_rec, rod_diameter=rod),
            head=None if head_rec is None else CylinderHead.from_record(head_rec, rod_diameter=rod),
            base=None if base_rec is None else CylinderBase.from_record(base_rec),
        )

    def __repr__(self) -> str:
        return (
            f"HydraulicCylinder(P={self.pressure} MPa, D={self.bore_diameter} mm, "
            f"d={self.rod_diameter} mm, stroke={self.stroke} mm, L_closed={self.closed_length} mm, "
            f"L_closed_min={self.calculate_min_closed_length():.1f} mm)"
        )
