"""
Contract Validation Module

Модуль для валидации JSON контрактов сериализованных чисел.
"""

from .validators import (
    HUGE_NUMBER_SCHEMA,
    HugeNumberValidator,
    SchemaLoader,
    validate_huge_number,
)

__all__ = [
    # Constants
    "HUGE_NUMBER_SCHEMA",
    # Classes
    "SchemaLoader",
    "HugeNumberValidator",
    # Functions
    "validate_huge_number",
]
