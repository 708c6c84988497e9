"""
Tests for TimeBounds and validate_bounds

Покрывает:
- Порядок правил валидации и тексты причин
- Входы: TimeBounds, dict, объект с атрибутами
- Immutability (frozen=True) и независимые копии
- contains() для включительных границ
"""

import math
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from src.core.domain import (
    BOUNDS_NOT_SPECIFIED_REASON,
    BOUNDS_START_EXCEEDS_END_REASON,
    BoundsValidationResult,
    TimeBounds,
    coerce_bounds,
    validate_bounds,
)


# =============================================================================
# VALIDATION
# =============================================================================


class TestValidateBounds:
    """Тесты validate_bounds."""

    def test_valid_bounds(self):
        """start < end → валидно."""
        result = validate_bounds({"start": 10, "end": 20})

        assert result.is_valid
        assert result.reason is None
        assert bool(result) is True

    def test_equal_start_and_end_valid(self):
        """start == end → валидно (интервал включительный)."""
        assert validate_bounds({"start": 5, "end": 5})

    def test_start_exceeds_end(self):
        """start > end → причина start exceeds end."""
        result = validate_bounds({"start": 100, "end": 50})

        assert not result
        assert result.reason == BOUNDS_START_EXCEEDS_END_REASON
        assert result.reason == "Specified start date exceeds end bound"

    @pytest.mark.parametrize(
        "bounds",
        [
            {},
            {"start": 10},
            {"end": 10},
            {"start": None, "end": 10},
            {"start": 10, "end": None},
            {"start": float("nan"), "end": 10},
            {"start": 0, "end": math.inf},
            {"start": "0", "end": "10"},
            {"start": True, "end": 10},
            None,
        ],
    )
    def test_unspecified_or_non_numeric(self, bounds):
        """Незаданные или нечисловые границы → причина not specified."""
        result = validate_bounds(bounds)

        assert not result
        assert result.reason == BOUNDS_NOT_SPECIFIED_REASON
        assert result.reason == "Start and end must be specified as integer values"

    def test_not_specified_checked_before_order(self):
        """Проверка на заданность выполняется раньше проверки порядка."""
        result = validate_bounds({"start": 100, "end": float("nan")})

        assert result.reason == BOUNDS_NOT_SPECIFIED_REASON

    def test_accepts_time_bounds_model(self):
        assert validate_bounds(TimeBounds(start=0, end=50))
        assert not validate_bounds(TimeBounds())

    def test_accepts_object_with_attributes(self):
        assert validate_bounds(SimpleNamespace(start=1, end=2))
        assert not validate_bounds(SimpleNamespace(start=1))

    def test_does_not_mutate_input(self):
        bounds = {"start": 1, "end": 2}

        validate_bounds(bounds)

        assert bounds == {"start": 1, "end": 2}

    def test_negative_and_float_values(self):
        assert validate_bounds({"start": -100, "end": -50})
        assert validate_bounds({"start": 0.5, "end": 0.75})

    def test_other_real_numbers_accepted(self):
        """Fraction и прочие numbers.Real — валидные числа."""
        assert validate_bounds({"start": Fraction(1, 2), "end": Fraction(3, 2)})

    def test_decimal_rejected(self):
        """Decimal не является numbers.Real."""
        result = validate_bounds({"start": Decimal("1"), "end": Decimal("2")})

        assert result.reason == BOUNDS_NOT_SPECIFIED_REASON

    def test_result_is_frozen(self):
        result = BoundsValidationResult(is_valid=True)

        with pytest.raises(AttributeError):
            result.is_valid = False


# =============================================================================
# TIME BOUNDS MODEL
# =============================================================================


class TestTimeBounds:
    """Тесты модели TimeBounds."""

    def test_default_unspecified(self):
        bounds = TimeBounds()

        assert bounds.start is None
        assert bounds.end is None
        assert not bounds.is_specified

    def test_int_values_preserved(self):
        bounds = TimeBounds(start=1_700_000_000_000, end=1_700_000_060_000)

        assert bounds.start == 1_700_000_000_000
        assert isinstance(bounds.start, int)

    def test_immutable(self):
        bounds = TimeBounds(start=0, end=10)

        with pytest.raises(ValidationError):
            bounds.start = 5

    def test_extra_fields_forbidden(self):
        with pytest.raises(ValidationError):
            TimeBounds(start=0, end=10, step=1)

    def test_copy_is_equal_but_distinct(self):
        bounds = TimeBounds(start=0, end=10)
        copy = bounds.copy_bounds()

        assert copy == bounds
        assert copy is not bounds

    def test_contains_inclusive(self):
        bounds = TimeBounds(start=0, end=10)

        assert bounds.contains(0)
        assert bounds.contains(10)
        assert bounds.contains(5)
        assert not bounds.contains(-1)
        assert not bounds.contains(11)

    def test_contains_unspecified_false(self):
        assert not TimeBounds().contains(0)

    def test_model_dump(self):
        assert TimeBounds(start=1, end=2).model_dump() == {"start": 1, "end": 2}


class TestCoerceBounds:
    """Тесты coerce_bounds."""

    def test_from_dict(self):
        assert coerce_bounds({"start": 1, "end": 2}) == TimeBounds(start=1, end=2)

    def test_from_model_returns_new_instance(self):
        bounds = TimeBounds(start=1, end=2)
        coerced = coerce_bounds(bounds)

        assert coerced == bounds
        assert coerced is not bounds

    def test_fraction_coerced_to_float(self):
        coerced = coerce_bounds({"start": Fraction(1, 4), "end": Fraction(3, 4)})

        assert coerced == TimeBounds(start=0.25, end=0.75)
        assert isinstance(coerced.start, float)

    def test_extra_keys_ignored(self):
        """Из mapping берутся только start и end."""
        coerced = coerce_bounds({"start": 1, "end": 2, "label": "x"})

        assert coerced == TimeBounds(start=1, end=2)
