"""
Observable — синхронный publish/subscribe примитив

Используется через композицию: владелец (например, TimeConductor) создает
Observable с фиксированным набором событий и публикует только их.

Семантика доставки:
- Handlers вызываются синхронно, в порядке регистрации
- Список handlers фиксируется в момент emit (подписки/отписки внутри handler
  влияют только на следующие emit)
- Exception в handler пробрасывается вызывающему emit коду, оставшиеся
  handlers не вызываются
- Reentrant emit разрешен и не ограничивается: handler, который снова
  изменяет состояние владельца в ответ на то же событие, может привести к
  бесконечной рекурсии
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

logger = logging.getLogger(__name__)

Handler = Callable[[Any], None]
EventName = Union[str, Enum]


@dataclass(eq=False)
class _Subscription:
    handler: Handler
    once: bool = False


class Observable:
    """Синхронный event emitter с фиксированным набором событий."""

    def __init__(self, events: Iterable[EventName]):
        """
        Args:
            events: допустимые имена событий (строки или str Enum)
        """
        self._subscriptions: Dict[str, List[_Subscription]] = {
            self._key(event): [] for event in events
        }

    @staticmethod
    def _key(event: EventName) -> str:
        return event.value if isinstance(event, Enum) else event

    def _channel(self, event: EventName) -> List[_Subscription]:
        key = self._key(event)
        if key not in self._subscriptions:
            raise ValueError(
                f"Unknown event '{key}', expected one of {sorted(self._subscriptions)}"
            )
        return self._subscriptions[key]

    @property
    def events(self) -> List[str]:
        """Допустимые имена событий."""
        return list(self._subscriptions)

    def on(self, event: EventName, handler: Handler) -> None:
        """Подписка handler на событие (повторная подписка допускается)."""
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        self._channel(event).append(_Subscription(handler))

    def once(self, event: EventName, handler: Handler) -> None:
        """Подписка, которая снимается после первого вызова."""
        if not callable(handler):
            raise TypeError(f"Handler must be callable, got {type(handler).__name__}")
        self._channel(event).append(_Subscription(handler, once=True))

    def off(self, event: EventName, handler: Handler) -> bool:
        """
        Отписка всех регистраций handler от события.

        Returns:
            True если хотя бы одна регистрация удалена
        """
        channel = self._channel(event)
        remaining = [sub for sub in channel if sub.handler != handler]
        removed = len(remaining) != len(channel)
        channel[:] = remaining
        return removed

    def emit(self, event: EventName, payload: Any) -> int:
        """
        Синхронная доставка payload всем подписчикам события.

        Args:
            event: имя события
            payload: единственный аргумент для каждого handler

        Returns:
            Количество вызванных handlers
        """
        channel = self._channel(event)
        snapshot = list(channel)
        logger.debug(
            "emit event=%s subscribers=%d", self._key(event), len(snapshot)
        )

        called = 0
        for sub in snapshot:
            if sub.once:
                if sub not in channel:
                    continue
                channel.remove(sub)
            sub.handler(payload)
            called += 1
        return called

    def listeners(self, event: EventName) -> List[Handler]:
        """Копия списка handlers события в порядке регистрации."""
        return [sub.handler for sub in self._channel(event)]

    def listener_count(self, event: EventName) -> int:
        return len(self._channel(event))

    def clear(self, event: Optional[EventName] = None) -> None:
        """Удаление подписчиков одного события или всех событий."""
        if event is not None:
            self._channel(event).clear()
            return
        for channel in self._subscriptions.values():
            channel.clear()
