from __future__ import annotations

import pytest

from propmgr.domain.months import month_index, sort_key
from propmgr.domain.phone import format_phone, is_valid_phone, normalize_phone


@pytest.mark.parametrize(
    "raw,digits",
    [("(555) 123-4567", "5551234567"), ("555.123.4567 x12", "5551234567"), ("", ""), (None, "")],
)
def test_normalize_phone(raw, digits):
    assert normalize_phone(raw) == digits


def test_format_phone_full_and_partial():
    assert format_phone("5551234567") == "(555) 123-4567"
    assert format_phone("555") == "(555"
    assert format_phone("55512") == "(555) 12"
    assert format_phone("") == ""


def test_is_valid_phone():
    assert is_valid_phone("5551234567")
    assert not is_valid_phone("555123456")


def test_month_labels():
    assert month_index("Jan") == 1
    assert month_index("september") == 9
    assert month_index("07") == 7
    assert month_index("13") is None
    assert sort_key("???") == 13
    assert sorted(["Dec", "Apr", "Aug"], key=sort_key) == ["Apr", "Aug", "Dec"]
