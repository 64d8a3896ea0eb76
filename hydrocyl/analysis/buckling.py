"""Устойчивость штока по Эйлеру.

    P_cr = n · π² · E · I / L²

n: коэффициент закрепления концов (тип крепления), I = π/64 · d⁴,
L: длина продольного изгиба. Берётся полностью выдвинутый цилиндр
(L = открытая длина): шток снаружи на максимальную длину, худший случай.

Запас: bucklingFactor = P_cr / F_push, безопасно при bucklingFactor >= SF.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike

from hydrocyl.core.units import PI_SQUARED
from hydrocyl.design.mounting import MountingType

if TYPE_CHECKING:
    from hydrocyl.design.cylinder import HydraulicCylinder

logger = logging.getLogger(__name__)


def euler_critical_load(
    end_fixity_coefficient: float,
    elastic_modulus: float,
    moment_of_inertia: float,
    buckling_length: ArrayLike,
) -> ArrayLike:
    """Критическая сила Эйлера (Н). Принимает скаляр или массив длин."""

    length = np.asarray(buckling_length, dtype=np.float64)
    p_cr = end_fixity_coefficient * PI_SQUARED * elastic_modulus * moment_of_inertia / (length * length)
    if p_cr.ndim == 0:
        return float(p_cr)
    return p_cr


@dataclass(frozen=True)
class BucklingResult:
    """Результат одной проверки; создаётся заново на каждый вызов.

    Интерпретация buckling_factor:
        < 1.0        потеря устойчивости
        1.0 .. SF    зона риска
        >= SF        безопасно
    """

    critical_load: float
    applied_load: float
    buckling_factor: float
    is_safe: bool
    effective_length: float
    buckling_length: float
    mounting: MountingType

    def __str__(self) -> str:
        return (
            f"BucklingResult(mounting={self.mounting.description}, "
            f"L_eff={self.effective_length:.1f} mm, P_cr={self.critical_load:.0f} N, "
            f"F={self.applied_load:.0f} N, factor={self.buckling_factor:.2f}, safe={self.is_safe})"
        )


def analyze_buckling(cylinder: "HydraulicCylinder", mounting: MountingType) -> BucklingResult:
    length = cylinder.open_length
    critical = euler_critical_load(
        mounting.end_fixity_coefficient,
        cylinder.ELASTIC_MODULUS,
        cylinder.rod_moment_of_inertia,
        length,
    )
    # > 0: pressure > 0 и bore > 0 гарантированы валидацией цилиндра
    applied = cylinder.calculate_push_force()
    factor = critical / applied
    is_safe = bool(factor >= cylinder.SAFETY_FACTOR)

    if not is_safe:
        logger.warning(
            "Rod buckling risk (%s): factor %.2f < %.2f", mounting.category.value, factor, cylinder.SAFETY_FACTOR
        )
    else:
        logger.debug("Buckling ok (%s): factor %.2f", mounting.category.value, factor)

    return BucklingResult(
        critical_load=critical,
        applied_load=applied,
        buckling_factor=factor,
        is_safe=is_safe,
        effective_length=mounting.effective_length_factor * length,
        buckling_length=length,
        mounting=mounting,
    )
