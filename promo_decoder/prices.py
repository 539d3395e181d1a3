"""
Base Price Extraction

Collects literal currency amounts from cleaned promo text, left to right.

Patterns (first matching alternative wins at each position):
- "50元"      → 50
- "$100"      → 100
- "1件50"     → 50 (unless the digits are followed by 折 or %)

Example:
    >>> extract_prices("1件50元加1元多1件")
    [50.0, 1.0]
    >>> extract_prices("3件7折")
    []
"""

import re
from typing import List, Optional


PRICE_PATTERN = re.compile(
    r'(?:(\d+)\s*元)'
    r'|(?:\$\s*(\d+))'
    r'|(?:[一二兩三四五六七八九十\d]+件(\d+)(?![折%]))',
    re.ASCII,
)


def extract_prices(text: str) -> List[float]:
    """
    Extract every literal price in order of appearance.

    Args:
        text: Whitespace-stripped promo text

    Returns:
        List of prices (may be empty)
    """
    if not text:
        return []

    prices = []
    for match in PRICE_PATTERN.finditer(text):
        digits = match.group(1) or match.group(2) or match.group(3)
        prices.append(float(digits))
    return prices


def base_price(prices: List[float]) -> Optional[float]:
    """First collected price, or None."""
    return prices[0] if prices else None
