"""
ConductorState — Снапшот состояния time conductor'а

Immutable Pydantic модель, представляющая снапшот всех четырех полей
conductor'а (bounds, time system, time of interest, follow mode).
Совместима с JSON Schema (src/core/contracts/schema/conductor_state.json),
если time system представима в JSON.
"""

from enum import Enum
from typing import Any, Optional, Union

from pydantic import BaseModel, Field

from .time_bounds import TimeBounds


# =============================================================================
# ENUMS
# =============================================================================


class ConductorEvent(str, Enum):
    """
    Каналы уведомлений conductor'а.

    Каждое событие несет ровно один payload:
    - FOLLOW: новый follow mode (bool)
    - BOUNDS: копия новых TimeBounds
    - TIME_SYSTEM: новая time system
    - TIME_OF_INTEREST: новый time of interest (или None)
    """

    FOLLOW = "follow"
    BOUNDS = "bounds"
    TIME_SYSTEM = "time_system"
    TIME_OF_INTEREST = "time_of_interest"


# =============================================================================
# CONDUCTOR STATE MODEL
# =============================================================================


class ConductorState(BaseModel):
    """
    Снапшот состояния conductor'а.

    Immutable модель (frozen=True). Time system хранится как есть
    (opaque значение), bounds — как независимая копия.
    """

    bounds: TimeBounds = Field(
        default_factory=TimeBounds, description="Текущее временное окно"
    )
    time_system: Any = Field(None, description="Текущая time system (opaque)")
    time_of_interest: Optional[Union[int, float]] = Field(
        None, description="Time of interest (None — не задан)"
    )
    follow_mode: bool = Field(False, description="Follow mode (False — fixed mode)")

    model_config = {"frozen": True}
