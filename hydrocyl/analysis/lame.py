"""Толщина стенки гильзы по Ламе (толстостенная труба под внутренним давлением).

Максимальное окружное напряжение на внутренней поверхности:

    σ_θ,max = P · (R_o² + R_i²) / (R_o² − R_i²)

Приравнивая σ_θ,max допускаемому напряжению σ_adm = σ_т / SF, получаем

    R_o = R_i · √((σ_adm + P) / (σ_adm − P)),   t_min = R_o − R_i

Решение существует только при σ_adm > P; иначе одностенная конструкция
невозможна (нужны многослойная гильза или автофретирование).

Единицы: МПа, мм.
"""

from __future__ import annotations

import logging
import math

from hydrocyl.core.errors import InvalidPressureError

logger = logging.getLogger(__name__)


def allowable_stress(yield_strength: float, safety_factor: float) -> float:
    return float(yield_strength) / float(safety_factor)


def outer_radius(inner_radius: float, pressure: float, allowable: float) -> float:
    """R_o для заданного R_i; вызывающий отвечает за allowable > pressure."""

    return float(inner_radius) * math.sqrt((allowable + pressure) / (allowable - pressure))


def lame_wall_thickness(
    bore_diameter: float,
    pressure: float,
    yield_strength: float,
    safety_factor: float,
) -> float:
    """Минимальная толщина стенки (мм) с учётом коэффициента запаса.

    Технологический допуск на изготовление сюда не входит.

    Raises:
        InvalidPressureError: если σ_т / SF <= P.
    """

    allowable = allowable_stress(yield_strength, safety_factor)
    if allowable <= pressure:
        logger.warning(
            "Lame solve infeasible: pressure %.2f MPa >= allowable stress %.2f MPa", pressure, allowable
        )
        raise InvalidPressureError(
            f"single-wall design infeasible at this pressure/safety-factor combination: "
            f"pressure {pressure} MPa >= allowable stress {allowable:.1f} MPa (safety factor {safety_factor})",
            parameter_name="pressure",
        )

    r_i = float(bore_diameter) / 2.0
    r_o = outer_radius(r_i, pressure, allowable)
    return r_o - r_i
