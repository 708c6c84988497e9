"""
Core math modules

Числовые примитивы для проверки границ и time of interest.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    is_outside_range,
    is_valid_float,
    is_valid_number,
)

__all__ = [
    "is_outside_range",
    "is_valid_float",
    "is_valid_number",
]
