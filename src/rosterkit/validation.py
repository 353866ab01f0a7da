"""Contact field normalization and validation."""

from __future__ import annotations

import re


PHONE_DIGITS = 10

_NON_DIGIT = re.compile(r"\D")
_EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def phone_digits(value: str) -> str:
    return _NON_DIGIT.sub("", value)


def format_phone(value: str) -> str:
    """Format up to ten digits as ``(555) 123-4567``, partially while typing."""

    digits = phone_digits(value)[:PHONE_DIGITS]
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def is_valid_phone(value: str) -> bool:
    digits = phone_digits(value)
    return digits == "" or len(digits) == PHONE_DIGITS


def is_valid_email(value: str) -> bool:
    text = value.strip()
    return text == "" or bool(_EMAIL_PATTERN.match(text))
