"""TimeConductor — авторитетное состояние временного окна для views.

Conductor хранит четыре поля:
- bounds: временное окно [start, end]
- time system: opaque описание единиц/epoch
- time of interest: выделенный момент времени (или None)
- follow mode: флаг слежения за live источником

Views подписываются на события (ConductorEvent) и перерисовываются.
Conductor не рендерит, не загружает данные и ничего не сохраняет.

Cross-field инвариант: при смене bounds time of interest вне нового окна
сбрасывается в None (с отдельным уведомлением).

Все операции синхронные. Уведомления доставляются в стеке вызывающего
кода в порядке подписки. Handler, который сам изменяет conductor, вызывает
вложенную последовательность уведомлений; защиты от бесконечной рекурсии
нет, это ответственность подписчика.
"""

import logging
from typing import Any, Mapping, Optional, Union

from src.conductor.config import ConductorConfig
from src.conductor.errors import BoundsValidationError, TimeSystemUsageError
from src.core.domain.conductor_state import ConductorEvent, ConductorState
from src.core.domain.time_bounds import (
    BoundsValidationResult,
    TimeBounds,
    coerce_bounds,
    validate_bounds,
)
from src.core.contracts.validators import validate_conductor_state
from src.core.events.observable import Handler, Observable

logger = logging.getLogger(__name__)

BoundsInput = Union[TimeBounds, Mapping[str, Any]]


class TimeConductor:
    """Состояние time conductor'а с уведомлениями подписчиков.

    Экземпляр создается явно и передается views (без глобального singleton).
    Подписка — через on/off/once, события — ConductorEvent.
    """

    def __init__(
        self,
        config: Optional[ConductorConfig] = None,
        observable: Optional[Observable] = None,
    ):
        """
        Args:
            config: начальное состояние (default: всё не задано, fixed mode)
            observable: emitter для уведомлений (default: новый Observable
                с событиями ConductorEvent)
        """
        self.config = config or ConductorConfig()
        self._observable = observable or Observable(ConductorEvent)

        self._time_system: Any = self.config.time_system
        self._time_of_interest: Optional[Union[int, float]] = None
        self._follow_mode: bool = bool(self.config.follow_mode)

        if self.config.bounds is not None:
            self._bounds = coerce_bounds(self.config.bounds)
        else:
            self._bounds = TimeBounds()

    # -------------------------------------------------------------------------
    # Подписка
    # -------------------------------------------------------------------------

    def on(self, event: Union[ConductorEvent, str], handler: Handler) -> None:
        self._observable.on(event, handler)

    def once(self, event: Union[ConductorEvent, str], handler: Handler) -> None:
        self._observable.once(event, handler)

    def off(self, event: Union[ConductorEvent, str], handler: Handler) -> bool:
        return self._observable.off(event, handler)

    # -------------------------------------------------------------------------
    # Bounds
    # -------------------------------------------------------------------------

    def validate_bounds(self, bounds: BoundsInput) -> BoundsValidationResult:
        """Предварительная проверка bounds (например, пользовательского ввода).

        Состояние conductor'а не изменяется.
        """
        return validate_bounds(bounds)

    def get_bounds(self) -> TimeBounds:
        """Копия текущих bounds."""
        return self._bounds.copy_bounds()

    def set_bounds(self, new_bounds: BoundsInput) -> TimeBounds:
        """Установка нового временного окна.

        Порядок:
        1. Валидация (ошибка → BoundsValidationError, без изменений)
        2. Сохранение копии new_bounds
        3. Уведомление BOUNDS с копией
        4. Сброс time of interest, если он вне [start, end]

        Args:
            new_bounds: TimeBounds или mapping {"start": ..., "end": ...}

        Returns:
            Копия сохраненных bounds

        Raises:
            BoundsValidationError: если bounds невалидны
        """
        result = validate_bounds(new_bounds)
        if not result:
            logger.debug("bounds rejected: %s (%r)", result.reason, new_bounds)
            raise BoundsValidationError(result.reason)

        bounds = coerce_bounds(new_bounds)
        self._bounds = bounds
        logger.debug("bounds set start=%s end=%s", bounds.start, bounds.end)
        self._observable.emit(ConductorEvent.BOUNDS, bounds.copy_bounds())

        # TOI проверяется против bounds этого вызова: handler мог уже
        # установить другие bounds
        toi = self._time_of_interest
        if toi is not None and not bounds.contains(toi):
            logger.debug("time of interest %s outside new bounds, unsetting", toi)
            self.set_time_of_interest(None)

        return self._bounds.copy_bounds()

    # -------------------------------------------------------------------------
    # Time system
    # -------------------------------------------------------------------------

    def get_time_system(self) -> Any:
        return self._time_system

    def set_time_system(
        self, time_system: Any, bounds: Optional[BoundsInput] = None
    ) -> Any:
        """Смена time system вместе с новыми bounds.

        Смена единиц без новых bounds бессмысленна, поэтому bounds обязательны.
        За уведомлением TIME_SYSTEM всегда следует уведомление BOUNDS, даже
        если bounds численно не изменились.

        Args:
            time_system: новая time system (opaque)
            bounds: bounds в единицах новой time system

        Returns:
            Установленная time system

        Raises:
            TimeSystemUsageError: если bounds не переданы
            BoundsValidationError: если bounds невалидны (time system
                при этом не изменяется)
        """
        if bounds is None:
            logger.debug("time system change rejected: no bounds")
            raise TimeSystemUsageError()

        result = validate_bounds(bounds)
        if not result:
            logger.debug("time system change rejected: %s", result.reason)
            raise BoundsValidationError(result.reason)

        self._time_system = time_system
        logger.debug("time system set: %r", time_system)
        self._observable.emit(ConductorEvent.TIME_SYSTEM, self._time_system)

        self.set_bounds(bounds)
        return self._time_system

    # -------------------------------------------------------------------------
    # Time of interest
    # -------------------------------------------------------------------------

    def get_time_of_interest(self) -> Optional[Union[int, float]]:
        return self._time_of_interest

    def set_time_of_interest(
        self, time_of_interest: Optional[Union[int, float]]
    ) -> Optional[Union[int, float]]:
        """Установка (или сброс через None) time of interest.

        Попадание в текущие bounds не проверяется: только смена bounds
        сбрасывает time of interest вне окна.
        """
        self._time_of_interest = time_of_interest
        logger.debug("time of interest set: %s", time_of_interest)
        self._observable.emit(ConductorEvent.TIME_OF_INTEREST, self._time_of_interest)
        return self._time_of_interest

    # -------------------------------------------------------------------------
    # Follow mode
    # -------------------------------------------------------------------------

    def get_follow_mode(self) -> bool:
        return self._follow_mode

    def set_follow_mode(self, follow_mode: bool) -> bool:
        """Переключение follow mode (True — слежение за live источником)."""
        self._follow_mode = bool(follow_mode)
        logger.debug("follow mode set: %s", self._follow_mode)
        self._observable.emit(ConductorEvent.FOLLOW, self._follow_mode)
        return self._follow_mode

    # -------------------------------------------------------------------------
    # Снапшот
    # -------------------------------------------------------------------------

    def snapshot(self) -> ConductorState:
        """Immutable снапшот всех полей conductor'а."""
        return ConductorState(
            bounds=self.get_bounds(),
            time_system=self._time_system,
            time_of_interest=self._time_of_interest,
            follow_mode=self._follow_mode,
        )

    def export_state(self) -> dict:
        """JSON-представление снапшота, проверенное по контракту conductor_state.

        Используется views и отладочными панелями для передачи состояния
        за пределы процесса. Conductor при этом не изменяется.

        Returns:
            dict, пригодный для json.dumps

        Raises:
            pydantic_core.PydanticSerializationError: если time system не
                представима в JSON
            jsonschema.ValidationError: если снапшот нарушает контракт
                (например, time of interest не число)
        """
        data = self.snapshot().model_dump(mode="json")
        validate_conductor_state(data)
        return data
