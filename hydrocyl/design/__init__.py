"""Доменная модель: детали, крепления и агрегат гидроцилиндра.

HydraulicCylinder сюда не реэкспортируется (он тянет analysis/*):
    from hydrocyl.design.cylinder import HydraulicCylinder
"""

from hydrocyl.design.mounting import (
    EndFixity,
    FieldDescriptor,
    FrontFlange,
    MountingCategory,
    MountingType,
    RearClevis,
    SphericalBearing,
    Trunnion,
    field_schema_for,
    mounting_from_category,
    mounting_from_record,
)
from hydrocyl.design.parts import CylinderBase, CylinderHead, CylinderPiston

__all__ = [
    "CylinderBase",
    "CylinderHead",
    "CylinderPiston",
    "EndFixity",
    "FieldDescriptor",
    "FrontFlange",
    "MountingCategory",
    "MountingType",
    "RearClevis",
    "SphericalBearing",
    "Trunnion",
    "field_schema_for",
    "mounting_from_category",
    "mounting_from_record",
]
