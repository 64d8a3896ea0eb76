"""Материалы и расчётные коэффициенты гидроцилиндра.

Модуль только с данными:
- свойства стали (модуль упругости, предел текучести, плотность);
- расчётные коэффициенты (КПД, коэффициент запаса, запас закрытой длины);
- пропорции деталей по умолчанию (ширина поршня, длина головки, толщина дна);
- пороги для неблокирующих предупреждений.

Ключевое правило:
- константы фиксированы для всех цилиндров; изменить их можно только
  собственным конфигом, а не мутацией объекта.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SteelGrade:
    """Конструкционная сталь трубы и штока."""

    name: str
    elastic_modulus_mpa: float = 210000.0
    yield_strength_mpa: float = 355.0
    density_kg_m3: float = 7850.0

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("name must be non-empty")
        if self.elastic_modulus_mpa <= 0.0:
            raise ValueError("elastic_modulus_mpa must be > 0")
        if self.yield_strength_mpa <= 0.0:
            raise ValueError("yield_strength_mpa must be > 0")
        if self.density_kg_m3 <= 0.0:
            raise ValueError("density_kg_m3 must be > 0")


@dataclass(frozen=True)
class DesignFactors:
    """Коэффициенты расчёта и пропорции деталей по умолчанию.

    mechanical_efficiency:
        КПД уплотнений (трение поршня и штока), типично 0.90..0.97.
    safety_factor:
        Коэффициент запаса: допускаемое напряжение = σ_т / SF,
        и минимальный запас по устойчивости штока.
    extra_margin_mm:
        Добавка к минимальной закрытой длине.
    piston_width_ratio, head_*, base_*:
        Формулы деталей по умолчанию, от диаметров штока/гильзы.
    manufacturing_allowance_mm:
        Технологическая прибавка к стенке в оценке массы.
    nominal_wall_ratio, long_stroke_mm, stop_tube_rod_ratio:
        Пороги неблокирующих предупреждений.
    """

    mechanical_efficiency: float = 0.95
    safety_factor: float = 2.5
    extra_margin_mm: float = 7.5

    piston_width_ratio: float = 0.6
    head_length_ratio: float = 1.2
    head_min_length_mm: float = 25.0
    base_thickness_ratio: float = 0.12
    base_min_thickness_mm: float = 12.0

    manufacturing_allowance_mm: float = 1.0

    nominal_wall_ratio: float = 0.10
    long_stroke_mm: float = 1000.0
    stop_tube_rod_ratio: float = 0.55

    def __post_init__(self) -> None:
        if not (0.0 < self.mechanical_efficiency <= 1.0):
            raise ValueError("mechanical_efficiency must be in (0, 1]")
        if self.safety_factor < 1.0:
            raise ValueError("safety_factor must be >= 1")
        if self.extra_margin_mm < 0.0:
            raise ValueError("extra_margin_mm must be >= 0")
        for name in (
            "piston_width_ratio",
            "head_length_ratio",
            "head_min_length_mm",
            "base_thickness_ratio",
            "base_min_thickness_mm",
            "nominal_wall_ratio",
            "long_stroke_mm",
            "stop_tube_rod_ratio",
        ):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be > 0")
        if self.manufacturing_allowance_mm < 0.0:
            raise ValueError("manufacturing_allowance_mm must be >= 0")

    def default_piston_width(self, rod_diameter: float) -> float:
        return self.piston_width_ratio * float(rod_diameter)

    def default_head_length(self, rod_diameter: float) -> float:
        return max(self.head_length_ratio * float(rod_diameter), self.head_min_length_mm)

    def default_base_thickness(self, bore_diameter: float) -> float:
        return max(self.base_thickness_ratio * float(bore_diameter), self.base_min_thickness_mm)


# S355JR (St52): труба и хромированный шток считаются из одной стали.
S355 = SteelGrade(name="St52")

DEFAULT_STEEL = S355
DEFAULT_DESIGN_FACTORS = DesignFactors()
