"""
Contract Validation Module

Модуль для валидации JSON записей целых чисел (int_base10).
"""

from .validators import (
    ContractValidator,
    IntRecordValidator,
    SchemaLoader,
    validate_int_record,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "IntRecordValidator",
    # Functions
    "validate_int_record",
]
