"""
Numeral Normalizer

Converts quantity tokens found in Chinese promo copy into numbers.

Handles:
- Arabic numerals: "2", "50", "7.5"
- Single Chinese digit characters: 一 二 兩 三 ... 十
- The "half" marker: 半 → 0.5

Anything else normalizes to 0. Callers treat 0 as "no usable quantity".

Example:
    >>> normalize("50")
    50.0
    >>> normalize("兩")
    2
    >>> normalize("半")
    0.5
    >>> normalize("千")
    0
"""

import re
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Union


# === Digit Table ===

CHINESE_DIGITS = {
    '一': 1,
    '二': 2,
    '兩': 2,
    '三': 3,
    '四': 4,
    '五': 5,
    '六': 6,
    '七': 7,
    '八': 8,
    '九': 9,
    '十': 10,
    '半': 0.5,
}

# Token class shared by the promotion patterns (digits, decimal point, Chinese digits).
# Patterns built from it compile with re.ASCII so \d stays 0-9
NUM_PATTERN = r'[一二兩三四五六七八九十\d\.]+'

# Leading decimal literal, parsed the lenient way ("2三" → 2)
DECIMAL_PREFIX = re.compile(r'[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def normalize(token: Optional[str]) -> Union[int, float]:
    """
    Normalize a numeral token to a number.

    Args:
        token: Arabic digits, a Chinese digit character, or 半

    Returns:
        Numeric value, or 0 if the token is empty or unrecognized
    """
    if not token:
        return 0

    text = token.strip()
    match = DECIMAL_PREFIX.match(text)
    if match:
        return float(match.group(0))

    return CHINESE_DIGITS.get(text, 0)


def format_number(value: Union[int, float]) -> str:
    """
    Render a number for display: 1000.0 → '1000', 7.5 → '7.5'.
    """
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _quantize(value: Union[int, float], places: int) -> Decimal:
    return Decimal(repr(float(value))).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


def round_half_up(value: Union[int, float], places: int = 0) -> float:
    """
    Round ties away from zero: round_half_up(6.25, 1) → 6.3.

    Built-in round() sends exact binary ties to the even digit instead.
    """
    return float(_quantize(value, places))


def format_fixed(value: Union[int, float], places: int) -> str:
    """
    Fixed-point display with half-up ties: format_fixed(0.625, 2) → '0.63'.
    """
    return str(_quantize(value, places))
