"""
Domain models and value objects.

Contains the HugeNumber value type.
"""

from src.core.domain.huge_number import HugeNumber, InvalidScalarError, Operand

__all__ = [
    "HugeNumber",
    "InvalidScalarError",
    "Operand",
]
