"""
PromotionResult Schema

Unified output format that ALL promotion matchers must return.
Downstream consumers (result cards, ranking) rely on these fields only.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict


class PromotionType(Enum):
    THRESHOLD = "Threshold"
    ADD_ONE = "AddOne"
    NTH_SAVE = "NthSave"
    BOGO = "BOGO"
    NTH_ITEM = "NthItem"
    BUY_A_GET_B = "BuyAGetB"
    GROUP_DISC = "GroupDisc"
    SIMPLE = "Simple"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PromotionResult:
    """
    Decoded promotion.

    `value` is the effective discount on the base-10 scale
    (10 = full price, 5 = half price). UNKNOWN carries value 0 as a
    sentinel and must never be ranked against real results.

    Example:
        result = PromotionResult(
            type=PromotionType.BOGO,
            title="買1送1",
            discount_label="5.0 折",
            detail="買 1 拿 2，相當於 5.00 折",
            value=5.0,
        )
    """

    type: PromotionType
    title: str
    discount_label: str
    detail: str
    value: float

    @property
    def is_actionable(self) -> bool:
        """True for a real computed discount inside (0, 10]."""
        if self.type is PromotionType.UNKNOWN:
            return False
        return 0 < self.value <= 10

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "type": self.type.value,
            "title": self.title,
            "discountLabel": self.discount_label,
            "detail": self.detail,
            "value": self.value,
        }
