"""
Domain models and value objects.

Contains the time conductor value objects: TimeBounds, ConductorState.
"""

from src.core.domain.conductor_state import ConductorEvent, ConductorState
from src.core.domain.time_bounds import (
    BOUNDS_NOT_SPECIFIED_REASON,
    BOUNDS_START_EXCEEDS_END_REASON,
    BoundsValidationResult,
    TimeBounds,
    coerce_bounds,
    validate_bounds,
)

__all__ = [
    # Time bounds
    "BOUNDS_NOT_SPECIFIED_REASON",
    "BOUNDS_START_EXCEEDS_END_REASON",
    "BoundsValidationResult",
    "TimeBounds",
    "coerce_bounds",
    "validate_bounds",
    # Conductor state
    "ConductorEvent",
    "ConductorState",
]
