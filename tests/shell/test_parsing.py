from __future__ import annotations

import pytest

from src.payroll_department.payroll_department.common.parsing import (
    check_base_pay,
    check_bonus_percent,
    is_decimal_text,
    parse_base_pay,
    parse_bonus_percent,
    parse_menu_choice,
    require_non_empty,
)
from src.payroll_department.payroll_department.core.exceptions import ValidationError


@pytest.mark.parametrize("text", ["0", "12", "12.5", ".5", "5."])
def test_decimal_text_accepts_plain_numbers(text):
    assert is_decimal_text(text)


@pytest.mark.parametrize("text", ["", ".", "-1", "+1", "1e5", "1.2.3", "1,5", "abc", "1 000"])
def test_decimal_text_rejects_everything_else(text):
    assert not is_decimal_text(text)


def test_require_non_empty_strips():
    assert require_non_empty("  Welding \t", "Name") == "Welding"


def test_require_non_empty_rejects_blank():
    with pytest.raises(ValidationError):
        require_non_empty("   ", "Name")


def test_parse_base_pay_range():
    assert parse_base_pay(" 1000000 ") == 1_000_000.0
    with pytest.raises(ValidationError, match="greater than 0"):
        parse_base_pay("0")
    with pytest.raises(ValidationError, match="not greater than 1000000"):
        parse_base_pay("1000000.01")
    with pytest.raises(ValidationError, match="decimal separator"):
        parse_base_pay("-5")


def test_parse_bonus_percent_range():
    assert parse_bonus_percent("0") == 0.0
    assert parse_bonus_percent("100") == 100.0
    with pytest.raises(ValidationError, match="not greater than 100"):
        parse_bonus_percent("100.0001")
    with pytest.raises(ValidationError):
        parse_bonus_percent("-1")


def test_parse_menu_choice():
    assert parse_menu_choice(" 3 ", 0, 3) == 3
    with pytest.raises(ValidationError, match="from 0 to 3"):
        parse_menu_choice("", 0, 3)
    with pytest.raises(ValidationError, match="whole number"):
        parse_menu_choice("1a", 0, 3)
    with pytest.raises(ValidationError, match="range"):
        parse_menu_choice("4", 0, 3)


def test_range_checks_reject_nan():
    with pytest.raises(ValidationError):
        check_base_pay(float("nan"))
    with pytest.raises(ValidationError):
        check_bonus_percent(float("nan"))


def test_range_checks_accept_plain_numbers():
    assert check_base_pay(0.00001) == 0.00001
    assert check_bonus_percent(0) == 0.0
    with pytest.raises(ValidationError, match="non-negative"):
        check_bonus_percent(-1)
