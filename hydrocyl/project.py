"""Проект: цилиндр + выбранное крепление, сохранение/загрузка в JSON.

Формат файла (UTF-8 JSON):
    {"name": ..., "cylinder": <запись цилиндра>, "mounting": <запись крепления>}

При загрузке цилиндр проходит полную валидацию заново, крепление
восстанавливается по тегу `category`.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from hydrocyl.analysis.advisories import DesignAdvisory, design_advisories
from hydrocyl.core.errors import InvalidDimensionError, InvalidPressureError, MountingValidationError
from hydrocyl.core.types import ProjectRecord
from hydrocyl.core.units import mpa_to_bar, newton_to_kilonewton
from hydrocyl.core.validation import read_mapping
from hydrocyl.design.cylinder import HydraulicCylinder
from hydrocyl.design.mounting import MountingType, mounting_from_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DesignProject:
    cylinder: HydraulicCylinder
    mounting: MountingType
    name: str = ""

    def to_record(self) -> ProjectRecord:
        return {
            "name": self.name,
            "cylinder": self.cylinder.to_record(),
            "mounting": self.mounting.to_record(),
        }

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "DesignProject":
        cylinder_rec = read_mapping(record, "cylinder", InvalidDimensionError)
        if cylinder_rec is None:
            raise InvalidDimensionError("missing cylinder record", parameter_name="cylinder")
        mounting_rec = read_mapping(record, "mounting", MountingValidationError)
        if mounting_rec is None:
            raise MountingValidationError("missing mounting record", parameter_name="mounting")
        name = record.get("name") or ""
        return cls(
            cylinder=HydraulicCylinder.from_record(cylinder_rec),
            mounting=mounting_from_record(mounting_rec),
            name=str(name),
        )

    def advisories(self) -> list[DesignAdvisory]:
        return design_advisories(self.cylinder, self.mounting)

    def summary(self) -> Dict[str, Any]:
        """Плоский набор результатов для отчёта.

        Если стенка по Ламе невозможна, wall_thickness_mm и total_weight_kg = None.
        """

        cyl = self.cylinder
        push = cyl.calculate_push_force()
        pull = cyl.calculate_pull_force()
        buckling = cyl.check_buckling(self.mounting)

        wall: Optional[float]
        weight: Optional[float]
        try:
            wall = cyl.calculate_wall_thickness()
            weight = cyl.calculate_total_weight()
        except InvalidPressureError:
            wall = None
            weight = None

        return {
            "name": self.name,
            "mounting": self.mounting.category.value,
            "pressure_mpa": cyl.pressure,
            "pressure_bar": mpa_to_bar(cyl.pressure),
            "bore_diameter_mm": cyl.bore_diameter,
            "rod_diameter_mm": cyl.rod_diameter,
            "stroke_mm": cyl.stroke,
            "closed_length_mm": cyl.closed_length,
            "min_closed_length_mm": cyl.calculate_min_closed_length(),
            "open_length_mm": cyl.open_length,
            "piston_area_mm2": cyl.piston_area,
            "annular_area_mm2": cyl.annular_area,
            "bore_to_rod_ratio": cyl.bore_to_rod_ratio,
            "push_force_n": push,
            "push_force_kn": newton_to_kilonewton(push),
            "pull_force_n": pull,
            "pull_force_kn": newton_to_kilonewton(pull),
            "pull_push_ratio": cyl.pull_push_ratio,
            "wall_thickness_mm": wall,
            "total_weight_kg": weight,
            "critical_load_n": buckling.critical_load,
            "effective_length_mm": buckling.effective_length,
            "buckling_factor": buckling.buckling_factor,
            "buckling_safe": buckling.is_safe,
        }


def save_project(project: DesignProject, path: str | Path) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(project.to_record(), ensure_ascii=False, indent=2), encoding="utf-8")
    logger.debug("Saved project %r to %s", project.name, out)
    return out


def load_project(path: str | Path) -> DesignProject:
    src = Path(path)
    record = json.loads(src.read_text(encoding="utf-8"))
    if not isinstance(record, dict):
        raise InvalidDimensionError(f"{src}: project file must contain a JSON object", parameter_name="cylinder")
    project = DesignProject.from_record(record)
    logger.debug("Loaded project %r from %s", project.name, src)
    return project
