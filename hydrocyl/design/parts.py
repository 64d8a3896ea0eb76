"""Внутренние детали гидроцилиндра: поршень, головка (букса) и дно.

Каждая деталь валидирует только собственные поля и ничего не знает о соседях.
Головке для проверки длины направляющей нужен диаметр штока, но ссылку на
цилиндр она не хранит (InitVar).

Все размеры в мм.
"""

from __future__ import annotations

from dataclasses import InitVar, dataclass
from typing import Any, Mapping, Optional

from hydrocyl.catalog.seals import piston_seal
from hydrocyl.config.materials import DEFAULT_DESIGN_FACTORS, DesignFactors
from hydrocyl.core.errors import InvalidDimensionError
from hydrocyl.core.types import BaseRecord, HeadRecord, PistonRecord
from hydrocyl.core.validation import (
    ensure_finite,
    ensure_non_negative,
    ensure_positive,
    read_int,
    read_number,
    read_str,
)

DEFAULT_PISTON_MATERIAL = "C45"
DEFAULT_HEAD_MATERIAL = "St52"
DEFAULT_PORT_SIZE = "G 1/2"
DEFAULT_SEAL_GROOVES = 2


@dataclass(frozen=True)
class CylinderPiston:
    """Поршень.

    compact_seal_width/height: справочные размеры канавки из каталога
    уплотнений; в расчётах и валидации не участвуют.
    """

    width: float
    material: str = DEFAULT_PISTON_MATERIAL
    seal_groove_count: int = DEFAULT_SEAL_GROOVES
    compact_seal_width: Optional[float] = None
    compact_seal_height: Optional[float] = None

    def __post_init__(self) -> None:
        ensure_finite(self.width, "width")
        ensure_positive(self.width, "width")
        ensure_non_negative(self.seal_groove_count, "sealGrooveCount")
        if not float(self.seal_groove_count).is_integer():
            raise InvalidDimensionError(
                f"sealGrooveCount must be a whole number, got {self.seal_groove_count}",
                parameter_name="sealGrooveCount",
            )

    @classmethod
    def for_rod(
        cls,
        rod_diameter: float,
        factors: DesignFactors = DEFAULT_DESIGN_FACTORS,
        **kwargs: Any,
    ) -> "CylinderPiston":
        """Поршень по умолчанию: width = 0.6 × d_rod."""

        ensure_finite(rod_diameter, "rodDiameter")
        ensure_positive(rod_diameter, "rodDiameter")
        return cls(width=factors.default_piston_width(rod_diameter), **kwargs)

    @classmethod
    def with_catalog_seal(
        cls,
        rod_diameter: float,
        bore_diameter: float,
        width: Optional[float] = None,
        factors: DesignFactors = DEFAULT_DESIGN_FACTORS,
        **kwargs: Any,
    ) -> "CylinderPiston":
        """Поршень с размерами канавки компактного уплотнения по диаметру гильзы."""

        profile = piston_seal(bore_diameter)
        if width is None:
            ensure_finite(rod_diameter, "rodDiameter")
            ensure_positive(rod_diameter, "rodDiameter")
            width = factors.default_piston_width(rod_diameter)
        return cls(
            width=width,
            compact_seal_width=profile.width,
            compact_seal_height=profile.height,
            **kwargs,
        )

    @classmethod
    def from_record(
        cls,
        record: Mapping[str, Any],
        rod_diameter: float,
        factors: DesignFactors = DEFAULT_DESIGN_FACTORS,
    ) -> "CylinderPiston":
        width = read_number(record, "width", InvalidDimensionError, default=None)
        if width is None:
            ensure_finite(rod_diameter, "rodDiameter")
            ensure_positive(rod_diameter, "rodDiameter")
            width = factors.default_piston_width(rod_diameter)
        return cls(
            width=width,
            material=read_str(record, "material", InvalidDimensionError, DEFAULT_PISTON_MATERIAL),
            seal_groove_count=read_int(
                record, "sealGrooveCount", InvalidDimensionError, default=DEFAULT_SEAL_GROOVES
            ),
            compact_seal_width=read_number(record, "compactSealWidth", InvalidDimensionError, default=None),
            compact_seal_height=read_number(record, "compactSealHeight", InvalidDimensionError, default=None),
        )

    def to_record(self) -> PistonRecord:
        record: PistonRecord = {
            "width": self.width,
            "material": self.material,
            "sealGrooveCount": self.seal_groove_count,
        }
        if self.compact_seal_width is not None:
            record["compactSealWidth"] = self.compact_seal_width
        if self.compact_seal_height is not None:
            record["compactSealHeight"] = self.compact_seal_height
        return record


@dataclass(frozen=True)
class CylinderHead:
    """Головка (букса) со втулкой направляющей штока.

    Правило опорной длины: guide_length >= d_rod и guide_length <= total_length.
    """

    total_length: float
    guide_length: float
    rod_diameter: InitVar[float]
    material: str = DEFAULT_HEAD_MATERIAL

    def __post_init__(self, rod_diameter: float) -> None:
        ensure_finite(self.total_length, "totalLength")
        ensure_positive(self.total_length, "totalLength")
        ensure_finite(self.guide_length, "guideLength")
        ensure_positive(self.guide_length, "guideLength")
        if self.guide_length > self.total_length:
            raise InvalidDimensionError(
                f"guideLength ({self.guide_length} mm) must not exceed totalLength ({self.total_length} mm)",
                parameter_name="guideLength",
            )
        if self.guide_length < rod_diameter:
            raise InvalidDimensionError(
                f"guideLength ({self.guide_length} mm) must be >= rodDiameter ({rod_diameter} mm)",
                parameter_name="guideLength",
            )

    @classmethod
    def for_rod(cls, rod_diameter: float, factors: DesignFactors = DEFAULT_DESIGN_FACTORS) -> "CylinderHead":
        """Головка по умолчанию: L = max(1.2 × d_rod, 25), направляющая = d_rod."""

        ensure_finite(rod_diameter, "rodDiameter")
        ensure_positive(rod_diameter, "rodDiameter")
        return cls(
            total_length=factors.default_head_length(rod_diameter),
            guide_length=float(rod_diameter),
            rod_diameter=rod_diameter,
        )

    @classmethod
    def from_record(cls, record: Mapping[str, Any], rod_diameter: float) -> "CylinderHead":
        return cls(
            total_length=read_number(record, "totalLength", InvalidDimensionError),
            guide_length=read_number(record, "guideLength", InvalidDimensionError),
            rod_diameter=rod_diameter,
            material=read_str(record, "material", InvalidDimensionError, DEFAULT_HEAD_MATERIAL),
        )

    def to_record(self) -> HeadRecord:
        return {
            "totalLength": self.total_length,
            "guideLength": self.guide_length,
            "material": self.material,
        }


@dataclass(frozen=True)
class CylinderBase:
    """Дно цилиндра с присоединительным портом (port_size справочно)."""

    thickness: float
    port_size: str = DEFAULT_PORT_SIZE

    def __post_init__(self) -> None:
        ensure_finite(self.thickness, "thickness")
        ensure_positive(self.thickness, "thickness")

    @classmethod
    def for_bore(cls, bore_diameter: float, factors: DesignFactors = DEFAULT_DESIGN_FACTORS) -> "CylinderBase":
        """Дно по умолчанию: t = max(0.12 × D, 12)."""

        ensure_finite(bore_diameter, "boreDiameter")
        ensure_positive(bore_diameter, "boreDiameter")
        return cls(thickness=factors.default_base_thickness(bore_diameter))

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "CylinderBase":
        return cls(
            thickness=read_number(record, "thickness", InvalidDimensionError),
            port_size=read_str(record, "portSize", InvalidDimensionError, DEFAULT_PORT_SIZE),
        )

    def to_record(self) -> BaseRecord:
        return {
            "thickness": self.thickness,
            "portSize": self.port_size,
        }
