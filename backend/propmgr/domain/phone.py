# backend/propmgr/domain/phone.py
from __future__ import annotations

import re

PHONE_DIGITS = 10

_NON_DIGIT = re.compile(r"\D")


def to_digits(value: str | None) -> str:
    return _NON_DIGIT.sub("", value or "")


def normalize_phone(value: str | None) -> str:
    """Strip everything but digits and keep at most the first 10."""
    return to_digits(value)[:PHONE_DIGITS]


def is_valid_phone(digits: str) -> bool:
    return len(digits) == PHONE_DIGITS and digits.isdigit()


def format_phone(value: str | None) -> str:
    """
    Display form used by the contact list: (555) 123-4567.
    Partial input is formatted as far as it goes, like the input mask does.
    """
    d = normalize_phone(value)
    if not d:
        return ""
    if len(d) <= 3:
        return f"({d}"
    if len(d) <= 6:
        return f"({d[:3]}) {d[3:]}"
    return f"({d[:3]}) {d[3:6]}-{d[6:]}"
