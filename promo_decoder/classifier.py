"""
Promotion Classifier

Main orchestrator that turns free-form promo copy into a PromotionResult.
Strips whitespace, extracts prices, then tries the matchers in priority
order and returns the first hit.

Usage:
    classifier = PromotionClassifier()
    result = classifier.classify("買一送一")
    # result.type == PromotionType.BOGO, result.value == 5.0

    # Rank several offers, cheapest first
    ranked = rank_promotions(["買一送一", "7折", "看不懂"])
"""

import logging
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from .matchers import MATCHERS, Matcher
from .prices import extract_prices
from .schema import PromotionResult, PromotionType

logger = logging.getLogger(__name__)

WHITESPACE = re.compile(r'\s')

UNKNOWN_TITLE = "無法翻譯"
UNKNOWN_DETAIL = "請輸入包含金額的文案，或標準折扣語法 (如: 買一送一)"


def clean_text(text: Optional[str]) -> str:
    """Remove every whitespace character."""
    if not text:
        return ""
    return WHITESPACE.sub('', text)


def unknown_result() -> PromotionResult:
    """Sentinel for text no matcher understood."""
    return PromotionResult(
        type=PromotionType.UNKNOWN,
        title=UNKNOWN_TITLE,
        discount_label="?",
        detail=UNKNOWN_DETAIL,
        value=0,
    )


class PromotionClassifier:
    """
    Rule-based promo text decoder.

    Stateless: the matcher sequence is fixed at construction and every
    call recomputes from scratch, so one instance can be shared freely.
    """

    def __init__(self, matchers: Optional[Sequence[Matcher]] = None):
        self.matchers: Tuple[Matcher, ...] = tuple(matchers if matchers is not None else MATCHERS)

    def classify(self, text: Optional[str]) -> PromotionResult:
        """
        Decode one promo phrase.

        Args:
            text: Raw promo copy, e.g. "1件50元 加1元多1件"

        Returns:
            First matching PromotionResult, or the UNKNOWN sentinel
        """
        cleaned = clean_text(text)
        if not cleaned:
            return unknown_result()

        prices = extract_prices(cleaned)

        for matcher in self.matchers:
            result = matcher(cleaned, prices)
            if result is not None:
                logger.debug(f"'{cleaned}' → {result.type.value} ({result.value})")
                return result

        logger.debug(f"'{cleaned}' → no matcher applied")
        return unknown_result()

    def classify_batch(self, texts: Iterable[str]) -> List[PromotionResult]:
        return [self.classify(text) for text in texts]

    def rank(self, texts: Iterable[str]) -> List[Tuple[str, PromotionResult]]:
        """
        Classify several offers and order the actionable ones cheapest first.

        Unknown and out-of-range results are dropped, never ranked.
        """
        decoded = [(text, self.classify(text)) for text in texts]
        actionable = [(text, result) for text, result in decoded if result.is_actionable]
        return sorted(actionable, key=lambda pair: pair[1].value)


# === Convenience Functions ===

_default_classifier = PromotionClassifier()


def classify(text: Optional[str]) -> PromotionResult:
    """
    Convenience function to decode a single phrase.

    Example:
        >>> classify("滿千送百").value
        9.0
    """
    return _default_classifier.classify(text)


def rank_promotions(texts: Iterable[str]) -> List[Tuple[str, PromotionResult]]:
    return _default_classifier.rank(texts)


# === Testing ===
if __name__ == "__main__":
    samples = [
        "1件50 加一元多一件",
        "買2送一",
        "第2件半價",
        "1件100元，加10元多一件",
        "滿千送百",
        "3件7折",
        "75折",
        "看不懂",
    ]

    print("Promotion Decoding:")
    print("-" * 60)
    for sample in samples:
        result = classify(sample)
        print(f"{sample:<20} → {result.type.value:<10} {result.discount_label:<8} {result.detail}")
