"""Грубая оценка массы металла цилиндра (кг).

Допущения:
- все детали из одной стали (ρ = 7850 кг/м³);
- наружный диаметр гильзы = D + 2·(t_Ламе + технологическая прибавка);
- гильза: кольцо длиной max(L_closed − L_head − t_base, stroke);
- шток: сплошной цилиндр длиной stroke + L_head;
- поршень: кольцо D/d; головка: кольцо D_out/d; дно: сплошной диск D_out.

Это не прочностной расчёт. Ошибка Ламе (InvalidPressureError) пробрасывается.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from hydrocyl.config.materials import DEFAULT_DESIGN_FACTORS, DEFAULT_STEEL, DesignFactors, SteelGrade
from hydrocyl.core.units import MM3_TO_M3, circle_area

if TYPE_CHECKING:
    from hydrocyl.design.cylinder import HydraulicCylinder


@dataclass(frozen=True)
class MassBreakdown:
    tube_kg: float
    rod_kg: float
    piston_kg: float
    head_kg: float
    base_kg: float

    @property
    def total_kg(self) -> float:
        return self.tube_kg + self.rod_kg + self.piston_kg + self.head_kg + self.base_kg


def estimate_mass(
    cylinder: "HydraulicCylinder",
    steel: SteelGrade = DEFAULT_STEEL,
    factors: DesignFactors = DEFAULT_DESIGN_FACTORS,
) -> MassBreakdown:
    bore = cylinder.bore_diameter
    rod = cylinder.rod_diameter

    wall = cylinder.calculate_wall_thickness() + factors.manufacturing_allowance_mm
    outer = bore + 2.0 * wall

    def kg(volume_mm3: float) -> float:
        return max(0.0, volume_mm3 * MM3_TO_M3 * steel.density_kg_m3)

    tube = (circle_area(outer) - circle_area(bore)) * cylinder.tube_length
    rod_volume = circle_area(rod) * cylinder.rod_length
    piston = (circle_area(bore) - circle_area(rod)) * cylinder.piston.width
    head = (circle_area(outer) - circle_area(rod)) * cylinder.head.total_length
    base = circle_area(outer) * cylinder.base.thickness

    return MassBreakdown(
        tube_kg=kg(tube),
        rod_kg=kg(rod_volume),
        piston_kg=kg(piston),
        head_kg=kg(head),
        base_kg=kg(base),
    )
