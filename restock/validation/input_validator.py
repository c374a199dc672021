"""
폼 입력 검증기

웹 폼 / CLI 인자의 원시 값을 검증하여 DemandProfile 로 변환한다.

규칙:
- 재고, 사용량은 숫자이며 0 이상
- 우유 일평균 사용량은 0 초과
- 안전재고 일수: 비었거나 0 이면 1
- 연휴 배수: 비었거나 0 이면 1, 1 미만은 거부
- today: 선택, ISO 날짜 (YYYY-MM-DD)
"""

import math
from dataclasses import dataclass
from datetime import date
from typing import Any, Mapping, Optional, Tuple

from restock.domain.demand.demand_model import DemandProfile
from restock.settings.constants import (
    DEFAULT_HOLIDAY_MULTIPLIER,
    DEFAULT_SAFETY_DAYS,
    ICE_CREAM_PRODUCTS,
    MILK_SCHEDULE,
)
from restock.validation.validation_result import InvalidInputError, ValidationResult

_MISSING = object()


@dataclass(frozen=True)
class FormInput:
    """검증을 통과한 입력"""
    profiles: Tuple[DemandProfile, ...]
    today: Optional[date] = None


def _is_blank(raw: Any) -> bool:
    return raw is None or raw is _MISSING or (isinstance(raw, str) and not raw.strip())


def _to_number(raw: Any) -> Optional[float]:
    """숫자 변환 (bool, NaN, inf, 변환 불가 → None)"""
    if isinstance(raw, bool):
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def _read_number(
    form: Mapping[str, Any],
    field_name: str,
    result: ValidationResult,
    *,
    default: Optional[float] = None,
    zero_means_default: bool = False,
) -> Optional[float]:
    """숫자 필드 읽기 (0 이상)

    default 가 있으면 비어 있을 때 default 를 쓴다.
    """
    raw = form.get(field_name, _MISSING)
    if _is_blank(raw):
        if default is not None:
            return default
        result.add_error('MISSING_VALUE', f'{field_name} 값이 필요합니다', field_name)
        return None

    value = _to_number(raw)
    if value is None:
        result.add_error(
            'NOT_A_NUMBER', f'{field_name} 값이 숫자가 아닙니다: {raw!r}', field_name,
            metadata={'actual': str(raw)},
        )
        return None
    if value < 0:
        result.add_error(
            'NEGATIVE_VALUE', f'{field_name} 값은 0 이상이어야 합니다: {value}', field_name,
            metadata={'actual': value},
        )
        return None
    if value == 0 and zero_means_default and default is not None:
        return default
    return value


def _read_multiplier(form: Mapping[str, Any], result: ValidationResult) -> Optional[float]:
    multiplier = _read_number(
        form, 'holiday_multiplier', result,
        default=DEFAULT_HOLIDAY_MULTIPLIER, zero_means_default=True,
    )
    if multiplier is not None and multiplier < 1:
        result.add_error(
            'MULTIPLIER_BELOW_ONE', f'holiday_multiplier 는 1 이상이어야 합니다: {multiplier}',
            'holiday_multiplier', metadata={'actual': multiplier},
        )
        return None
    return multiplier


def parse_today(raw: Any, result: ValidationResult) -> Optional[date]:
    """선택 입력 today (ISO 날짜) 파싱"""
    if _is_blank(raw):
        return None
    if isinstance(raw, date):
        return raw
    try:
        return date.fromisoformat(str(raw).strip())
    except ValueError:
        result.add_error(
            'INVALID_DATE', f'today 형식 오류 (YYYY-MM-DD): {raw!r}', 'today',
            metadata={'actual': str(raw)},
        )
        return None


def parse_milk_form(form: Mapping[str, Any]) -> FormInput:
    """우유 폼 → 단일 사용량 프로필

    필드: current_stock, daily_usage, safety_days, holiday_multiplier, today

    Raises:
        InvalidInputError: 검증 실패
    """
    result = ValidationResult()
    stock = _read_number(form, 'current_stock', result)
    usage = _read_number(form, 'daily_usage', result)
    if usage is not None and usage <= 0:
        result.add_error(
            'NON_POSITIVE_USAGE', 'daily_usage 는 0보다 커야 합니다', 'daily_usage',
            metadata={'actual': usage},
        )
    safety_days = _read_number(
        form, 'safety_days', result, default=DEFAULT_SAFETY_DAYS, zero_means_default=True,
    )
    multiplier = _read_multiplier(form, result)
    today = parse_today(form.get('today'), result)

    if not result.is_valid:
        raise InvalidInputError(result)

    profile = DemandProfile.uniform(
        stock=stock,
        daily_usage=usage,
        safety_days=safety_days,
        holiday_multiplier=multiplier,
        name=MILK_SCHEDULE,
    )
    return FormInput(profiles=(profile,), today=today)


def parse_ice_cream_form(form: Mapping[str, Any]) -> FormInput:
    """아이스크림 원료 폼 → 품목별 평일/휴일 프로필

    필드: {vanilla,milk}_stock, {vanilla,milk}_weekday, {vanilla,milk}_holiday,
          safety_days, holiday_multiplier(선택), today(선택)

    Raises:
        InvalidInputError: 검증 실패
    """
    result = ValidationResult()
    safety_days = _read_number(
        form, 'safety_days', result, default=DEFAULT_SAFETY_DAYS, zero_means_default=True,
    )
    multiplier = _read_multiplier(form, result)
    today = parse_today(form.get('today'), result)

    values = {}
    for product in ICE_CREAM_PRODUCTS:
        values[product] = (
            _read_number(form, f'{product}_stock', result),
            _read_number(form, f'{product}_weekday', result),
            _read_number(form, f'{product}_holiday', result),
        )

    if not result.is_valid:
        raise InvalidInputError(result)

    profiles = tuple(
        DemandProfile.split(
            stock=stock,
            weekday_usage=weekday,
            holiday_usage=holiday,
            safety_days=safety_days,
            holiday_multiplier=multiplier,
            name=product,
        )
        for product, (stock, weekday, holiday) in values.items()
    )
    return FormInput(profiles=profiles, today=today)
