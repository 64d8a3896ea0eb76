"""Справочные каталоги (уплотнения)."""

from hydrocyl.catalog.seals import SealProfile, SealType, lookup_by_diameter, piston_seal, rod_seal, wiper_seal

__all__ = [
    "SealProfile",
    "SealType",
    "lookup_by_diameter",
    "piston_seal",
    "rod_seal",
    "wiper_seal",
]
