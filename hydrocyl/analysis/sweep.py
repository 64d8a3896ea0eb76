"""Развёртка устойчивости штока по ходу.

Для базового (валидного) цилиндра и крепления перебираем набор ходов. Корпус
удлиняется вместе с ходом: L_closed − stroke остаётся как в базовом проекте,
поэтому каждая точка развёртки тоже удовлетворяет проверкам закрытой длины.

Сила выдвижения от хода не зависит; критическая сила считается векторно.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

import numpy as np
import pandas as pd
from numpy.typing import ArrayLike

from hydrocyl.analysis.buckling import euler_critical_load
from hydrocyl.core.errors import InvalidStrokeError
from hydrocyl.design.mounting import MountingType

if TYPE_CHECKING:
    from hydrocyl.design.cylinder import HydraulicCylinder

SWEEP_COLUMNS = ["stroke_mm", "open_length_mm", "critical_load_n", "buckling_factor", "is_safe"]


def stroke_sweep(cylinder: "HydraulicCylinder", mounting: MountingType, strokes: ArrayLike) -> pd.DataFrame:
    s = np.atleast_1d(np.asarray(strokes, dtype=np.float64))
    if s.size and not (np.all(np.isfinite(s)) and np.all(s > 0.0)):
        raise InvalidStrokeError("all swept strokes must be finite and > 0", parameter_name="stroke")

    body = cylinder.closed_length - cylinder.stroke
    open_length = body + 2.0 * s

    critical = np.asarray(
        euler_critical_load(
            mounting.end_fixity_coefficient,
            cylinder.ELASTIC_MODULUS,
            cylinder.rod_moment_of_inertia,
            open_length,
        ),
        dtype=np.float64,
    )
    factor = critical / cylinder.calculate_push_force()

    return pd.DataFrame(
        {
            "stroke_mm": s,
            "open_length_mm": open_length,
            "critical_load_n": critical,
            "buckling_factor": factor,
            "is_safe": factor >= cylinder.SAFETY_FACTOR,
        },
        columns=SWEEP_COLUMNS,
    )


def max_safe_stroke(cylinder: "HydraulicCylinder", mounting: MountingType, strokes: ArrayLike) -> Optional[float]:
    """Наибольший ход из набора, при котором шток устойчив; None, если таких нет."""

    df = stroke_sweep(cylinder, mounting, strokes)
    safe = df.loc[df["is_safe"], "stroke_mm"]
    if safe.empty:
        return None
    return float(safe.max())
