"""
Numerical Safeguards — Numeric Validity Primitives

Модуль обеспечивает единые проверки числовых значений для временных границ
и time of interest:
- Проверка float на NaN/Inf
- Проверка "является ли значение числом" (int/float, без bool)
- Проверка выхода значения за пределы интервала

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не считаются валидными числами
2. bool не считается числом, несмотря на наследование от int
3. Все проверки чистые (без side effects)
"""

import math
import numbers
from typing import Any


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_valid_number(value: Any) -> bool:
    """
    Проверка, является ли значение валидным конечным числом.

    Числом считается любой numbers.Real (int, float, Fraction, numpy
    scalars), кроме bool. None, строки и Decimal числами не являются.

    Args:
        value: Проверяемое значение (любой тип)

    Returns:
        True если value — numbers.Real (не bool) и конечное

    Examples:
        >>> is_valid_number(10)
        True
        >>> is_valid_number(float('nan'))
        False
        >>> is_valid_number(None)
        False
        >>> is_valid_number(True)
        False
    """
    if isinstance(value, bool):
        return False
    if not isinstance(value, numbers.Real):
        return False
    return is_valid_float(float(value))


# =============================================================================
# ИНТЕРВАЛЫ
# =============================================================================


def is_outside_range(value: float, lower: float, upper: float) -> bool:
    """
    Проверка, лежит ли значение строго вне интервала [lower, upper].

    Границы интервала включительные. Сравнения с NaN всегда False,
    поэтому NaN никогда не считается вне интервала.

    Args:
        value: Проверяемое значение
        lower: Нижняя граница (включительно)
        upper: Верхняя граница (включительно)

    Returns:
        True если value < lower или value > upper
    """
    return value < lower or value > upper
