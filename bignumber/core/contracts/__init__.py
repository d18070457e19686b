"""
Contract Validation Module

Модуль для валидации JSON контрактов bignumber.
"""

from .validators import (
    ArithmeticReportValidator,
    ContractValidator,
    SchemaLoader,
    validate_arithmetic_report,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ArithmeticReportValidator",
    # Functions
    "validate_arithmetic_report",
]
