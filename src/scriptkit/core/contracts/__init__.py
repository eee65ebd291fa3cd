"""
Contract Validation Module

Валидация JSON данных по JSON Schema контрактам.
"""

from .validators import (
    AmortizationScheduleValidator,
    ContractValidator,
    SchemaLoader,
    validate_against,
    validate_amortization_schedule,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "AmortizationScheduleValidator",
    # Functions
    "validate_amortization_schedule",
    "validate_against",
]
