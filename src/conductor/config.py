"""Конфигурация начального состояния TimeConductor."""

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from src.conductor.errors import BoundsValidationError, TimeSystemUsageError
from src.core.domain.time_bounds import TimeBounds, validate_bounds


@dataclass(frozen=True)
class ConductorConfig:
    """Начальное состояние conductor'а.

    По умолчанию: bounds не заданы, time system не задана, fixed mode.
    Time system и bounds связаны так же, как при set_time_system():
    time system без bounds недопустима.
    """
    follow_mode: bool = False
    time_system: Any = None
    bounds: Optional[Union[TimeBounds, Mapping[str, Any]]] = None

    def __post_init__(self):
        if self.time_system is not None and self.bounds is None:
            raise TimeSystemUsageError()

        if self.bounds is not None:
            result = validate_bounds(self.bounds)
            if not result:
                raise BoundsValidationError(result.reason)
