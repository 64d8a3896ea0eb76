"""hydrocyl.core.types

Формы interchange-записей (плоский JSON-совместимый dict).

Ключи записей в camelCase, как в сохранённых проектах; атрибуты Python-объектов в snake_case.
"""

from __future__ import annotations

from typing import Literal, Optional, TypedDict, Union

MountingTag = Literal["frontFlange", "rearClevis", "trunnion", "sphericalBearing"]


class _PistonRecordBase(TypedDict):
    width: float
    material: str
    sealGrooveCount: int


class PistonRecord(_PistonRecordBase, total=False):
    compactSealWidth: Optional[float]
    compactSealHeight: Optional[float]


class HeadRecord(TypedDict):
    totalLength: float
    guideLength: float
    material: str


class BaseRecord(TypedDict):
    thickness: float
    portSize: str


class CylinderRecord(TypedDict):
    pressure: float
    boreDiameter: float
    rodDiameter: float
    stroke: float
    closedLength: float
    extraMargin: float
    piston: PistonRecord
    head: HeadRecord
    base: BaseRecord


class FrontFlangeRecord(TypedDict):
    category: Literal["frontFlange"]
    flangeDiameter: float
    boltCircleDiameter: float
    boltCount: int


class RearClevisRecord(TypedDict):
    category: Literal["rearClevis"]
    pinDiameter: float
    clevisWidth: float
    axisDistance: float


class TrunnionRecord(TypedDict):
    category: Literal["trunnion"]
    headDistance: float
    trunnionDiameter: float


class SphericalBearingRecord(TypedDict):
    category: Literal["sphericalBearing"]
    sphereDiameter: float
    boreDiameter: float


MountingRecord = Union[FrontFlangeRecord, RearClevisRecord, TrunnionRecord, SphericalBearingRecord]


class ProjectRecord(TypedDict):
    name: str
    cylinder: CylinderRecord
    mounting: MountingRecord
