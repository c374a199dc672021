"""
입력 검증 모듈

웹 폼 / CLI 입력을 코어에 넘기기 전에 검증합니다.
"""

from restock.validation.validation_result import (
    InvalidInputError,
    ValidationError,
    ValidationResult,
)
from restock.validation.input_validator import (
    FormInput,
    parse_ice_cream_form,
    parse_milk_form,
)

__all__ = [
    'InvalidInputError',
    'ValidationError',
    'ValidationResult',
    'FormInput',
    'parse_ice_cream_form',
    'parse_milk_form',
]
