from __future__ import annotations

from ..core.constants import MAX_BASE_PAY, MAX_BONUS_PERCENT
from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value.strip()


def is_decimal_text(value: str) -> bool:
    """Digits with at most one decimal point; no sign, exponent or spaces."""
    if not value or value == ".":
        return False

    seen_point = False
    for ch in value:
        if ch.isdigit() and ch.isascii():
            continue
        if ch == "." and not seen_point:
            seen_point = True
            continue
        return False
    return True


def check_base_pay(num: float) -> float:
    if not (num > 0):
        raise ValidationError("Enter a positive number greater than 0")
    if not (num <= MAX_BASE_PAY):
        raise ValidationError("Enter a number not greater than 1000000")
    return float(num)


def check_bonus_percent(num: float) -> float:
    if not (num >= 0):
        raise ValidationError("Enter a non-negative number")
    if not (num <= MAX_BONUS_PERCENT):
        raise ValidationError("Enter a number not greater than 100")
    return float(num)


def parse_base_pay(value: str) -> float:
    text = (value or "").strip(" ")
    if not is_decimal_text(text):
        raise ValidationError("Enter a positive number up to 1000000 (decimal separator is a point)")
    return check_base_pay(float(text))


def parse_bonus_percent(value: str) -> float:
    text = (value or "").strip(" ")
    if not is_decimal_text(text):
        raise ValidationError("Enter a non-negative number up to 100 (decimal separator is a point)")
    return check_bonus_percent(float(text))


def parse_menu_choice(value: str, low: int, high: int) -> int:
    if not value:
        raise ValidationError(f"Enter a number from {low} to {high}")

    text = value.strip(" ")
    if not text or not all(ch.isdigit() and ch.isascii() for ch in text):
        raise ValidationError("Enter a whole number without letters or other symbols")

    choice = int(text)
    if choice < low or choice > high:
        raise ValidationError(f"The number must be in the range from {low} to {high}")
    return choice
