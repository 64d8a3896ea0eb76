"""Типы крепления гидроцилиндра (закрытое семейство из четырёх вариантов).

Крепление влияет и на механику, и на устойчивость штока. Каждый вариант:
- хранит собственную геометрию (frozen dataclass);
- задаёт граничные условия Эйлера (EndFixity: n и K, n = 1/K²);
- описывает поля, которые должен ввести пользователь (FieldDescriptor);
- валидирует свою геометрию (MountingValidationError);
- сериализуется в запись с тегом `category`.

Поведение вариантов собрано в одной таблице MOUNTING_BEHAVIOUR по тегу, а сами
классы только хранят данные. Диспетчеризация по тегу: mounting_from_category()
(пустой экземпляр для формы) и mounting_from_record() (загрузка проекта).

Соответствие граничным условиям:
    FrontFlange       fixed-pin  n = 2.0   K = 0.707
    RearClevis        pin-pin    n = 1.0   K = 1.0
    Trunnion          pin-pin    n = 1.0   K = 1.0
    SphericalBearing  fixed-free n = 0.25  K = 2.0
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Dict, Mapping, Optional, Tuple, Type, Union

from hydrocyl.core.errors import MountingValidationError
from hydrocyl.core.types import MountingRecord
from hydrocyl.core.validation import read_int, read_number

MIN_BOLT_COUNT = 3
MIN_BOLT_SPACING_MM = 15.0
MIN_BEARING_WALL_MM = 3.0


class EndFixity(Enum):
    """Класс граничных условий колонны Эйлера: (метка, n)."""

    FIXED_FREE = ("fixed-free", 0.25)
    PIN_PIN = ("pin-pin", 1.0)
    FIXED_PIN = ("fixed-pin", 2.0)
    FIXED_FIXED = ("fixed-fixed", 4.0)

    def __init__(self, label: str, coefficient: float) -> None:
        self.label = label
        self.coefficient = coefficient

    @property
    def effective_length_factor(self) -> float:
        """K = 1/√n, т.е. L_eff = K·L."""

        return 1.0 / math.sqrt(self.coefficient)


class MountingCategory(str, Enum):
    FRONT_FLANGE = "frontFlange"
    REAR_CLEVIS = "rearClevis"
    TRUNNION = "trunnion"
    SPHERICAL_BEARING = "sphericalBearing"

    @classmethod
    def parse(cls, tag: Union[str, "MountingCategory"]) -> "MountingCategory":
        try:
            return cls(tag)
        except ValueError:
            raise MountingValidationError(f"unknown mounting category: {tag!r}", parameter_name="category") from None


@dataclass(frozen=True)
class FieldDescriptor:
    """Описание поля ввода для внешней формы: ключ записи, подпись, единица и диапазон."""

    key: str
    label: str
    unit: str
    min: float
    max: float
    hint: Optional[str] = None
    is_integer: bool = False


def _attr_name(key: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", key).lower()


class _MountingMixin:
    """Общий интерфейс вариантов; всё поведение берётся из MOUNTING_BEHAVIOUR."""

    category: ClassVar[MountingCategory]

    @property
    def _behaviour(self) -> "_MountingBehaviour":
        return MOUNTING_BEHAVIOUR[self.category]

    @property
    def description(self) -> str:
        return self._behaviour.description

    @property
    def end_fixity(self) -> EndFixity:
        return self._behaviour.end_fixity

    @property
    def end_fixity_coefficient(self) -> float:
        return self._behaviour.end_fixity.coefficient

    @property
    def effective_length_factor(self) -> float:
        return self._behaviour.end_fixity.effective_length_factor

    def field_schema(self) -> Tuple[FieldDescriptor, ...]:
        return self._behaviour.fields

    def validate(self) -> bool:
        self._behaviour.validator(self)
        return True

    def to_record(self) -> MountingRecord:
        record: Dict[str, Any] = {"category": self.category.value}
        for field in self._behaviour.fields:
            record[field.key] = getattr(self, _attr_name(field.key))
        return record  # type: ignore[return-value]

    def __str__(self) -> str:
        return f"{self.category.value}: {self.description}"


@dataclass(frozen=True)
class FrontFlange(_MountingMixin):
    """Фланец на передней крышке, болты по окружности BCD."""

    category: ClassVar[MountingCategory] = MountingCategory.FRONT_FLANGE

    flange_diameter: float
    bolt_circle_diameter: float
    bolt_count: int

    @property
    def bolt_spacing(self) -> float:
        """Шаг болтов по дуге π·BCD/z (мм)."""

        if self.bolt_count <= 0:
            return 0.0
        return math.pi * self.bolt_circle_diameter / self.bolt_count


@dataclass(frozen=True)
class RearClevis(_MountingMixin):
    """Проушина (вилка) на дне, шарнир на пальце."""

    category: ClassVar[MountingCategory] = MountingCategory.REAR_CLEVIS

    pin_diameter: float
    clevis_width: float
    axis_distance: float


@dataclass(frozen=True)
class Trunnion(_MountingMixin):
    """Цапфы на корпусе; head_distance: расстояние от оси цапф до передней крышки."""

    category: ClassVar[MountingCategory] = MountingCategory.TRUNNION

    head_distance: float
    trunnion_diameter: float


@dataclass(frozen=True)
class SphericalBearing(_MountingMixin):
    """Шарнирный подшипник (сферическая головка)."""

    category: ClassVar[MountingCategory] = MountingCategory.SPHERICAL_BEARING

    sphere_diameter: float
    bore_diameter: float

    @property
    def wall_thickness(self) -> float:
        return (self.sphere_diameter - self.bore_diameter) / 2.0


MountingType = Union[FrontFlange, RearClevis, Trunnion, SphericalBearing]


# --- правила валидации ------------------------------------------------------------


def _require_positive(value: float, key: str, what: str) -> None:
    if not (math.isfinite(value) and value > 0):
        raise MountingValidationError(f"{what} must be a finite value > 0, got {value}", parameter_name=key)


def _validate_front_flange(m: FrontFlange) -> None:
    _require_positive(m.flange_diameter, "flangeDiameter", "flange diameter")
    _require_positive(m.bolt_circle_diameter, "boltCircleDiameter", "bolt circle diameter")
    if m.bolt_circle_diameter >= m.flange_diameter:
        raise MountingValidationError(
            f"bolt circle diameter (BCD={m.bolt_circle_diameter} mm) must be smaller than "
            f"flange diameter (D_f={m.flange_diameter} mm)",
            parameter_name="boltCircleDiameter",
        )
    if not (math.isfinite(m.bolt_count) and float(m.bolt_count).is_integer()):
        raise MountingValidationError(
            f"bolt count must be a whole number, got {m.bolt_count}",
            parameter_name="boltCount",
        )
    if m.bolt_count < MIN_BOLT_COUNT:
        raise MountingValidationError(
            f"bolt count must be at least {MIN_BOLT_COUNT} for static balance, got {m.bolt_count}",
            parameter_name="boltCount",
        )
    spacing = m.bolt_spacing
    if spacing < MIN_BOLT_SPACING_MM:
        raise MountingValidationError(
            f"bolt spacing too small ({spacing:.1f} mm < {MIN_BOLT_SPACING_MM:.0f} mm); "
            "reduce bolt count or increase BCD",
            parameter_name="boltCount",
        )


def _validate_rear_clevis(m: RearClevis) -> None:
    _require_positive(m.pin_diameter, "pinDiameter", "pin diameter")
    _require_positive(m.clevis_width, "clevisWidth", "clevis width")
    _require_positive(m.axis_distance, "axisDistance", "axis distance")
    if m.clevis_width <= m.pin_diameter:
        raise MountingValidationError(
            f"clevis width (w={m.clevis_width} mm) must be larger than pin diameter (d_pin={m.pin_diameter} mm)",
            parameter_name="clevisWidth",
        )


def _validate_trunnion(m: Trunnion) -> None:
    _require_positive(m.head_distance, "headDistance", "head distance (XV)")
    _require_positive(m.trunnion_diameter, "trunnionDiameter", "trunnion diameter")


def _validate_spherical_bearing(m: SphericalBearing) -> None:
    _require_positive(m.sphere_diameter, "sphereDiameter", "sphere diameter")
    _require_positive(m.bore_diameter, "boreDiameter", "bearing bore diameter")
    if m.bore_diameter >= m.sphere_diameter:
        raise MountingValidationError(
            f"bearing bore diameter ({m.bore_diameter} mm) must be smaller than "
            f"sphere diameter ({m.sphere_diameter} mm)",
            parameter_name="boreDiameter",
        )
    wall = m.wall_thickness
    if wall < MIN_BEARING_WALL_MM:
        raise MountingValidationError(
            f"bearing wall too thin ({wall:.1f} mm < {MIN_BEARING_WALL_MM:.0f} mm); "
            "increase sphere diameter or reduce bore diameter",
            parameter_name="sphereDiameter",
        )


# --- таблица поведения -------------------------------------------------------------


@dataclass(frozen=True)
class _MountingBehaviour:
    cls: Type[Any]
    description: str
    end_fixity: EndFixity
    fields: Tuple[FieldDescriptor, ...]
    validator: Callable[[Any], None]


MOUNTING_BEHAVIOUR: Dict[MountingCategory, _MountingBehaviour] = {
    MountingCategory.FRONT_FLANGE: _MountingBehaviour(
        cls=FrontFlange,
        description="Front flange - fixed mounting",
        end_fixity=EndFixity.FIXED_PIN,
        fields=(
            FieldDescriptor(
                "flangeDiameter", "Flange diameter (D_f)", "mm", 40, 1000,
                hint="ISO 6020-2 series: 80, 100, 125, 160, 200...",
            ),
            FieldDescriptor(
                "boltCircleDiameter", "Bolt circle diameter (BCD)", "mm", 30, 900,
                hint="Diameter of the circle through the bolt centres",
            ),
            FieldDescriptor(
                "boltCount", "Bolt count", "pcs", 3, 24,
                hint="At least 3, typically 4 or 6", is_integer=True,
            ),
        ),
        validator=_validate_front_flange,
    ),
    MountingCategory.REAR_CLEVIS: _MountingBehaviour(
        cls=RearClevis,
        description="Rear clevis - pinned mounting",
        end_fixity=EndFixity.PIN_PIN,
        fields=(
            FieldDescriptor(
                "pinDiameter", "Pin diameter (d_pin)", "mm", 8, 200,
                hint="ISO 8132 series: 16, 20, 25, 30, 40, 50...",
            ),
            FieldDescriptor(
                "clevisWidth", "Clevis width (w)", "mm", 10, 300,
                hint="Inner width between the clevis arms",
            ),
            FieldDescriptor(
                "axisDistance", "Axis distance (a)", "mm", 5, 500,
                hint="Pin centre to cylinder axis",
            ),
        ),
        validator=_validate_rear_clevis,
    ),
    MountingCategory.TRUNNION: _MountingBehaviour(
        cls=Trunnion,
        description="Trunnion - pinned mounting",
        end_fixity=EndFixity.PIN_PIN,
        fields=(
            FieldDescriptor(
                "headDistance", "Distance from head (XV)", "mm", 10, 5000,
                hint="Trunnion axis to front cover; ideally stroke / 3",
            ),
            FieldDescriptor(
                "trunnionDiameter", "Trunnion diameter (d_t)", "mm", 15, 300,
                hint="Trunnion bearing diameter",
            ),
        ),
        validator=_validate_trunnion,
    ),
    MountingCategory.SPHERICAL_BEARING: _MountingBehaviour(
        cls=SphericalBearing,
        description="Spherical bearing - free end mounting",
        end_fixity=EndFixity.FIXED_FREE,
        fields=(
            FieldDescriptor(
                "sphereDiameter", "Sphere diameter", "mm", 10, 200,
                hint="DIN 648 / ISO 12240 series: 12, 16, 20, 25, 30...",
            ),
            FieldDescriptor(
                "boreDiameter", "Bore diameter", "mm", 5, 150,
                hint="Pin bore (H7 tolerance)",
            ),
        ),
        validator=_validate_spherical_bearing,
    ),
}


# --- фабрики -------------------------------------------------------------------------


def mounting_from_category(category: Union[str, MountingCategory]) -> MountingType:
    """Пустой (нулевой) экземпляр варианта; validate() на нём падает до заполнения формы."""

    behaviour = MOUNTING_BEHAVIOUR[MountingCategory.parse(category)]
    values = {_attr_name(f.key): (0 if f.is_integer else 0.0) for f in behaviour.fields}
    return behaviour.cls(**values)


def mounting_from_record(record: Mapping[str, Any]) -> MountingType:
    """Восстановить вариант по тегу `category`. Геометрию не валидирует."""

    if "category" not in record:
        raise MountingValidationError("missing mounting category", parameter_name="category")
    behaviour = MOUNTING_BEHAVIOUR[MountingCategory.parse(record["category"])]
    values: Dict[str, Any] = {}
    for field in behaviour.fields:
        reader = read_int if field.is_integer else read_number
        values[_attr_name(field.key)] = reader(record, field.key, MountingValidationError)
    return behaviour.cls(**values)


def field_schema_for(category: Union[str, MountingCategory]) -> Tuple[FieldDescriptor, ...]:
    return MOUNTING_BEHAVIOUR[MountingCategory.parse(category)].fields
