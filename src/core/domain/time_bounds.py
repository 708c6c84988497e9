"""
TimeBounds — Модель временного окна (bounds)

Immutable Pydantic модель, представляющая интервал [start, end] в
epoch-relative единицах. Интерпретация единиц (ms или другие) определяется
текущей time system.

Модель допускает незаданные границы (None): это начальное состояние
conductor'а. Корректность интервала проверяется отдельно через
validate_bounds(), которая возвращает причину ошибки вместо exception.
"""

import numbers
from dataclasses import dataclass
from typing import Any, Final, Mapping, Optional, Union

from pydantic import BaseModel, Field

from src.core.math.numerical_safeguards import is_outside_range, is_valid_number


# =============================================================================
# ПРИЧИНЫ ОШИБОК ВАЛИДАЦИИ
# =============================================================================

BOUNDS_NOT_SPECIFIED_REASON: Final[str] = (
    "Start and end must be specified as integer values"
)

BOUNDS_START_EXCEEDS_END_REASON: Final[str] = "Specified start date exceeds end bound"


# =============================================================================
# TIME BOUNDS MODEL
# =============================================================================


class TimeBounds(BaseModel):
    """
    Временное окно conductor'а.

    Immutable модель (frozen=True): изменение границ всегда создает новый
    экземпляр. Conductor хранит собственную копию и возвращает вызывающему
    коду только копии.
    """

    start: Optional[Union[int, float]] = Field(
        None, description="Начало окна (epoch-relative, включительно)"
    )
    end: Optional[Union[int, float]] = Field(
        None, description="Конец окна (epoch-relative, включительно)"
    )

    model_config = {"frozen": True, "extra": "forbid"}

    @property
    def is_specified(self) -> bool:
        """Обе границы заданы и являются валидными числами."""
        return is_valid_number(self.start) and is_valid_number(self.end)

    def contains(self, value: float) -> bool:
        """
        Проверка попадания значения в [start, end].

        Для незаданных границ всегда False.
        """
        if not self.is_specified:
            return False
        return not is_outside_range(value, self.start, self.end)

    def copy_bounds(self) -> "TimeBounds":
        """Независимая копия (без общих изменяемых частей)."""
        return self.model_copy(deep=True)


# =============================================================================
# VALIDATION
# =============================================================================


@dataclass(frozen=True)
class BoundsValidationResult:
    """Результат валидации bounds.

    Truthy только для валидных bounds; reason заполнен при ошибке.
    """

    is_valid: bool
    reason: Optional[str] = None

    def __bool__(self) -> bool:
        return self.is_valid


def _endpoints(bounds: Any) -> tuple[Any, Any]:
    """Извлечение (start, end) из TimeBounds, mapping или объекта с атрибутами."""
    if bounds is None:
        return None, None
    if isinstance(bounds, Mapping):
        return bounds.get("start"), bounds.get("end")
    return getattr(bounds, "start", None), getattr(bounds, "end", None)


def validate_bounds(
    bounds: Union[TimeBounds, Mapping[str, Any], Any],
) -> BoundsValidationResult:
    """
    Валидация кандидата bounds без изменения какого-либо состояния.

    Порядок проверок:
    1. start и end заданы и являются конечными числами
    2. start <= end

    Может использоваться views для предварительной проверки пользовательского
    ввода.

    Args:
        bounds: TimeBounds, dict {"start": ..., "end": ...} или объект с
            атрибутами start/end

    Returns:
        BoundsValidationResult с причиной ошибки (если есть)
    """
    start, end = _endpoints(bounds)

    if not is_valid_number(start) or not is_valid_number(end):
        return BoundsValidationResult(is_valid=False, reason=BOUNDS_NOT_SPECIFIED_REASON)

    if start > end:
        return BoundsValidationResult(
            is_valid=False, reason=BOUNDS_START_EXCEEDS_END_REASON
        )

    return BoundsValidationResult(is_valid=True)


def _as_builtin(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    return float(value)


def coerce_bounds(bounds: Union[TimeBounds, Mapping[str, Any], Any]) -> TimeBounds:
    """
    Построение нового TimeBounds из валидного кандидата.

    Вызывающий код обязан предварительно проверить bounds через
    validate_bounds(). Результат никогда не является переданным объектом.
    Integral значения приводятся к int, прочие Real к float.
    """
    start, end = _endpoints(bounds)
    return TimeBounds(start=_as_builtin(start), end=_as_builtin(end))
