"""hydrocyl.core.errors

Типизированные ошибки проектирования гидроцилиндра.

Каждая ошибка несёт:
- message: человекочитаемое описание;
- parameter_name: имя «виновного» параметра (ключ записи), если известно;
- kind: дискриминатор ErrorKind, чтобы вызывающий код мог делать `match err.kind`
  без isinstance-проверок.

Все классы наследуют ValueError: физически невозможные значения в проекте
исторически сигнализируются именно ValueError.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    DIMENSION = "dimension"
    PRESSURE = "pressure"
    STROKE = "stroke"
    BUCKLING = "buckling"
    MOUNTING = "mounting"


class CylinderDesignError(ValueError):
    """Базовая ошибка: «исправь свои числа»."""

    kind: ErrorKind = ErrorKind.DIMENSION

    def __init__(self, message: str, parameter_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.parameter_name = parameter_name

    def __str__(self) -> str:
        if self.parameter_name is None:
            return self.message
        return f"{self.message} [parameter: {self.parameter_name}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, parameter_name={self.parameter_name!r})"


class InvalidDimensionError(CylinderDesignError):
    """Геометрическая невозможность: длина/диаметр <= 0, rod >= bore, правило направляющей."""

    kind = ErrorKind.DIMENSION


class InvalidPressureError(CylinderDesignError):
    """Давление <= 0 или выше допускаемого напряжения стенки (Ламе)."""

    kind = ErrorKind.PRESSURE


class InvalidStrokeError(CylinderDesignError):
    """Ход/закрытая длина/запас: <= 0, closed <= stroke, closed < минимума, запас < 0."""

    kind = ErrorKind.STROKE


class BucklingAnalysisError(CylinderDesignError):
    # Зарезервировано: при валидном цилиндре расчёт устойчивости не падает.
    kind = ErrorKind.BUCKLING


class MountingValidationError(CylinderDesignError):
    """Нарушение геометрии крепления или неизвестный тег категории."""

    kind = ErrorKind.MOUNTING


ERROR_CLASSES = {
    ErrorKind.DIMENSION: InvalidDimensionError,
    ErrorKind.PRESSURE: InvalidPressureError,
    ErrorKind.STROKE: InvalidStrokeError,
    ErrorKind.BUCKLING: BucklingAnalysisError,
    ErrorKind.MOUNTING: MountingValidationError,
}
