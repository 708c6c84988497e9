"""Time Conductor — состояние временного окна, time system, time of interest и follow mode.

- TimeConductor: состояние и уведомления подписчиков
- ConductorConfig: начальное состояние
- Исключения валидации и использования
"""

from .config import ConductorConfig
from .errors import BoundsValidationError, ConductorError, TimeSystemUsageError
from .time_conductor import TimeConductor

__all__ = [
    "TimeConductor",
    "ConductorConfig",
    "ConductorError",
    "BoundsValidationError",
    "TimeSystemUsageError",
]
