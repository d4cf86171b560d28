"""Normalization of user-entered quote fields."""

from __future__ import annotations

import re
from typing import Any

_NON_DIGITS = re.compile(r"[^0-9]")
# A trailing "." or "," followed by one or two digits is a fractional part, not grouping.
_FRACTION = re.compile(r"[.,]\d{1,2}\s*$")


def to_title_case(value: str) -> str:
    # Split on single spaces only; str.title() would also capitalize after apostrophes.
    words = value.strip().lower().split(" ")
    return " ".join(w[:1].upper() + w[1:] for w in words)


def parse_sale_amount(value: Any) -> int:
    """Accept an int or a formatted amount such as "RD$ 1,250,000" and keep the digits.

    Signs and fractional parts are rejected rather than dropped.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        raise ValueError("sale amount must be a number or string")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError("sale amount must be a whole number")
        return int(value)

    text = str(value)
    if "-" in text:
        raise ValueError("sale amount must not be negative")
    if _FRACTION.search(text):
        raise ValueError("sale amount must be a whole number")
    digits = _NON_DIGITS.sub("", text)
    return int(digits) if digits else 0
