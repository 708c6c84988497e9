"""Исключения time conductor'а.

Все ошибки обнаруживаются до изменения состояния и до уведомлений.
"""


class ConductorError(Exception):
    """Базовое исключение conductor'а."""


class BoundsValidationError(ConductorError, ValueError):
    """Bounds не прошли validate_bounds(); message — причина валидации."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class TimeSystemUsageError(ConductorError, ValueError):
    """Смена time system без новых bounds."""

    MESSAGE = "Must set bounds when changing time system"

    def __init__(self, message: str = MESSAGE):
        super().__init__(message)
