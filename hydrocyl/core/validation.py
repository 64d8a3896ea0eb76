"""hydrocyl.core.validation

Базовые проверки, чтобы ловить физически невозможные значения как можно раньше.

Все проверки поднимают типизированную ошибку (по умолчанию InvalidDimensionError),
передавая имя параметра, чтобы UI мог подсветить нужное поле.
"""

from __future__ import annotations

import math
from typing import Any, Mapping, Optional, Type

from hydrocyl.core.errors import CylinderDesignError, InvalidDimensionError

ErrorType = Type[CylinderDesignError]

_MISSING = object()


def ensure_finite(value: float, name: str, error: ErrorType = InvalidDimensionError) -> None:
    if not math.isfinite(value):
        raise error(f"{name} must be a finite number, got {value}", parameter_name=name)


def ensure_positive(value: float, name: str, error: ErrorType = InvalidDimensionError) -> None:
    if value <= 0:
        raise error(f"{name} must be > 0, got {value}", parameter_name=name)


def ensure_non_negative(value: float, name: str, error: ErrorType = InvalidDimensionError) -> None:
    if value < 0:
        raise error(f"{name} must be >= 0, got {value}", parameter_name=name)


def ensure_less_than(
    value: float,
    limit: float,
    name: str,
    limit_name: str,
    error: ErrorType = InvalidDimensionError,
) -> None:
    if value >= limit:
        raise error(
            f"{name} ({value} mm) must be smaller than {limit_name} ({limit} mm)",
            parameter_name=name,
        )


# --- чтение interchange-записей -------------------------------------------------


def read_number(
    record: Mapping[str, Any],
    key: str,
    error: ErrorType,
    default: Any = _MISSING,
) -> Any:
    """Прочитать число из записи.

    Отсутствующий ключ (или None) -> default, а если default не задан -> error.
    bool не считается числом, NaN/inf отклоняются.
    """

    value = record.get(key)
    if value is None:
        if default is _MISSING:
            raise error(f"missing required field '{key}'", parameter_name=key)
        return default
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise error(f"field '{key}' must be a number, got {value!r}", parameter_name=key)
    number = float(value)
    ensure_finite(number, key, error)
    return number


def read_int(
    record: Mapping[str, Any],
    key: str,
    error: ErrorType,
    default: Any = _MISSING,
) -> Any:
    value = read_number(record, key, error, default)
    if value is default and default is not _MISSING:
        return default
    if not float(value).is_integer():
        raise error(f"field '{key}' must be an integer, got {value!r}", parameter_name=key)
    return int(value)


def read_str(record: Mapping[str, Any], key: str, error: ErrorType, default: str) -> str:
    value = record.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise error(f"field '{key}' must be a string, got {value!r}", parameter_name=key)
    return value


def read_mapping(record: Mapping[str, Any], key: str, error: ErrorType) -> Optional[Mapping[str, Any]]:
    value = record.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise error(f"field '{key}' must be an object, got {value!r}", parameter_name=key)
    return value
