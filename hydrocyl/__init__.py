"""hydrocyl package.

Важно: пакет не должен иметь побочных эффектов при импорте.
Поэтому здесь нет eager-import'ов (модели/анализ/каталог).

Импортируй нужное напрямую:
- from hydrocyl.design.cylinder import HydraulicCylinder
- from hydrocyl.design.mounting import FrontFlange, mounting_from_record
"""

from __future__ import annotations

__all__: list[str] = []
