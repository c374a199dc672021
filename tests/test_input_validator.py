"""
폼 입력 검증 테스트

- 숫자/음수 검사
- 안전재고 일수, 배수 기본값
- today ISO 날짜
"""

from datetime import date

import pytest

from restock.validation import (
    InvalidInputError,
    ValidationResult,
    parse_ice_cream_form,
    parse_milk_form,
)


def _error_codes(exc_info):
    return {(e.field_name, e.error_code) for e in exc_info.value.result.errors}


ICE_CREAM_FORM = {
    "vanilla_stock": "10", "vanilla_weekday": "1", "vanilla_holiday": "2",
    "milk_stock": "5", "milk_weekday": "1", "milk_holiday": "1",
    "safety_days": "1",
}


class TestParseMilkForm:

    @pytest.mark.unit
    def test_valid_strings(self):
        form_input = parse_milk_form({"current_stock": "2", "daily_usage": "1.5"})
        profile = form_input.profiles[0]
        assert profile.stock == 2
        assert profile.daily_usage == 1.5
        assert profile.safety_days == 1.0
        assert profile.holiday_multiplier == 1.0
        assert profile.name == "milk"
        assert form_input.today is None

    @pytest.mark.unit
    def test_numbers_accepted(self):
        form_input = parse_milk_form({"current_stock": 0, "daily_usage": 3, "holiday_multiplier": 1.5})
        assert form_input.profiles[0].stock == 0
        assert form_input.profiles[0].holiday_multiplier == 1.5

    @pytest.mark.unit
    def test_safety_days_zero_or_blank_defaults_to_one(self):
        for raw in ("0", "", None, 0):
            form_input = parse_milk_form({"current_stock": 2, "daily_usage": 1, "safety_days": raw})
            assert form_input.profiles[0].safety_days == 1.0

    @pytest.mark.unit
    def test_today(self):
        form_input = parse_milk_form({"current_stock": 2, "daily_usage": 1, "today": "2026-10-12"})
        assert form_input.today == date(2026, 10, 12)

    @pytest.mark.unit
    def test_non_numeric_stock(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": "abc", "daily_usage": 1})
        assert _error_codes(exc_info) == {("current_stock", "NOT_A_NUMBER")}

    @pytest.mark.unit
    def test_negative_stock(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": "-1", "daily_usage": 1})
        assert ("current_stock", "NEGATIVE_VALUE") in _error_codes(exc_info)

    @pytest.mark.unit
    def test_zero_usage_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": 2, "daily_usage": 0})
        assert ("daily_usage", "NON_POSITIVE_USAGE") in _error_codes(exc_info)

    @pytest.mark.unit
    def test_missing_fields(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({})
        assert _error_codes(exc_info) == {
            ("current_stock", "MISSING_VALUE"),
            ("daily_usage", "MISSING_VALUE"),
        }

    @pytest.mark.unit
    def test_nan_inf_and_bool_rejected(self):
        for raw in ("nan", "inf", True):
            with pytest.raises(InvalidInputError):
                parse_milk_form({"current_stock": raw, "daily_usage": 1})

    @pytest.mark.unit
    def test_negative_safety_days_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": 2, "daily_usage": 1, "safety_days": "-2"})
        assert ("safety_days", "NEGATIVE_VALUE") in _error_codes(exc_info)

    @pytest.mark.unit
    def test_multiplier_below_one_rejected(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": 2, "daily_usage": 1, "holiday_multiplier": "0.5"})
        assert ("holiday_multiplier", "MULTIPLIER_BELOW_ONE") in _error_codes(exc_info)

    @pytest.mark.unit
    def test_multiplier_zero_defaults_to_one(self):
        form_input = parse_milk_form({"current_stock": 2, "daily_usage": 1, "holiday_multiplier": "0"})
        assert form_input.profiles[0].holiday_multiplier == 1.0

    @pytest.mark.unit
    def test_invalid_today(self):
        with pytest.raises(InvalidInputError) as exc_info:
            parse_milk_form({"current_stock": 2, "daily_usage": 1, "today": "2026-13-01"})
        assert ("today", "INVALID_DATE") in _error_codes(exc_info)

    @pytest.mark.unit
    def test_is_value_error(self):
        with pytest.raises(ValueError):
            parse_milk_form({"current_stock": "x", "daily_usage": 1})


class TestParseIceCreamForm:

    @pytest.mark.unit
    def test_valid_form(self):
        form_input = parse_ice_cream_form(ICE_CREAM_FORM)
        vanilla, milk = form_input.profiles
        assert vanilla.name == "vanilla"
        assert vanilla.stock == 10
        assert vanilla.weekday_usage == 1
        assert vanilla.holiday_usage == 2
        assert milk.name == "milk"
        assert milk.demand_classes == 2

    @pytest.mark.unit
    def test_zero_usage_allowed(self):
        form = dict(ICE_CREAM_FORM, vanilla_weekday="0", vanilla_holiday="0")
        assert parse_ice_cream_form(form).profiles[0].weekday_usage == 0

    @pytest.mark.unit
    def test_collects_every_bad_field(self):
        form = dict(ICE_CREAM_FORM, vanilla_stock="x", milk_holiday="-3")
        with pytest.raises(InvalidInputError) as exc_info:
            parse_ice_cream_form(form)
        assert _error_codes(exc_info) == {
            ("vanilla_stock", "NOT_A_NUMBER"),
            ("milk_holiday", "NEGATIVE_VALUE"),
        }


class TestValidationResult:

    @pytest.mark.unit
    def test_add_error_and_to_dict(self):
        result = ValidationResult()
        assert result.is_valid
        result.add_error("NOT_A_NUMBER", "숫자 아님", "current_stock", metadata={"actual": "x"})
        assert result.is_valid is False
        data = result.to_dict()
        assert data["errors"][0]["code"] == "NOT_A_NUMBER"
        assert data["errors"][0]["field"] == "current_stock"
        assert "FAILED" in str(result)
