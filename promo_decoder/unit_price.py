"""
Unit Price Comparison

Compares two offers by price per unit. Independent of the promo decoder.

Example:
    >>> unit_price(100, 4)
    25.0
    >>> compare_unit_prices((100, 4), (60, 2)).winner
    'A'
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .numerals import DECIMAL_PREFIX

Number = Union[int, float, str, None]


def _to_float(value: Number) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)

    match = DECIMAL_PREFIX.match(value.strip())
    if not match:
        return None
    return float(match.group(0))


def unit_price(price: Number, quantity: Number) -> Optional[float]:
    """
    Price per unit, or None unless both price and quantity are positive.

    Args:
        price: Total price (number or form string)
        quantity: Number of units (number or form string)
    """
    price_f = _to_float(price)
    quantity_f = _to_float(quantity)
    if not price_f or not quantity_f or price_f <= 0 or quantity_f <= 0:
        return None
    return price_f / quantity_f


@dataclass(frozen=True)
class UnitPriceComparison:
    unit_a: Optional[float]
    unit_b: Optional[float]
    winner: Optional[str]  # "A" | "B" | "Equal" | None when incomplete
    ratio: float = 1.0     # How many times pricier the loser is per unit


def compare_unit_prices(
    offer_a: Tuple[Number, Number],
    offer_b: Tuple[Number, Number],
) -> UnitPriceComparison:
    """
    Compare (price, quantity) pairs.

    Example:
        >>> compare_unit_prices((100, 4), (60, 2)).ratio
        1.2
    """
    unit_a = unit_price(*offer_a)
    unit_b = unit_price(*offer_b)

    if unit_a is None or unit_b is None:
        return UnitPriceComparison(unit_a, unit_b, None)

    if unit_a < unit_b:
        return UnitPriceComparison(unit_a, unit_b, "A", unit_b / unit_a)
    if unit_b < unit_a:
        return UnitPriceComparison(unit_a, unit_b, "B", unit_a / unit_b)
    return UnitPriceComparison(unit_a, unit_b, "Equal")
