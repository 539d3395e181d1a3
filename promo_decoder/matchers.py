"""
Promotion Matchers

One pure function per promotion family. Each takes the cleaned text and the
extracted prices and returns a PromotionResult, or None to let the next
matcher try.

Ordered by priority (first match wins):
1. Threshold   滿千送百, 滿500折50
2. AddOne      1件50元加1元多1件
3. NthSave     第2件省20元 (second item only)
4. BOGO        買一送一, 買2送1
5. NthItem     第2件5折, 第2件半價
6. BuyAGetB    買$100送$50 (two different prices)
7. GroupDisc   3件7折 (no 第 in text)
8. Simple      7折, 75折
"""

import logging
import re
from typing import Callable, List, Optional

from .numerals import NUM_PATTERN, format_fixed, format_number, normalize, round_half_up
from .prices import base_price
from .schema import PromotionResult, PromotionType

logger = logging.getLogger(__name__)

Matcher = Callable[[str, List[float]], Optional[PromotionResult]]


# === Patterns ===

# 千/百 only make sense for the 滿千送百 idiom, so they stay out of NUM_PATTERN
THRESHOLD_TOKEN = r'[一二兩三四五六七八九十百千\d\.]+'

THRESHOLD_PATTERN = re.compile(
    rf'滿({THRESHOLD_TOKEN})(?:元)?(?:現?折|省|送)({THRESHOLD_TOKEN})',
    re.ASCII,
)
ADD_ONE_PATTERN = re.compile(rf'(?:加|多)({NUM_PATTERN})元?(?:加|多|送)({NUM_PATTERN})件', re.ASCII)
NTH_SAVE_PATTERN = re.compile(rf'第({NUM_PATTERN})件(?:省|折|現折)({NUM_PATTERN})元?', re.ASCII)
BOGO_PATTERN = re.compile(rf'買({NUM_PATTERN})送({NUM_PATTERN})', re.ASCII)
NTH_ITEM_PATTERN = re.compile(rf'第({NUM_PATTERN})件({NUM_PATTERN}|半)折?', re.ASCII)
GROUP_DISC_PATTERN = re.compile(rf'({NUM_PATTERN})件({NUM_PATTERN}|半)折', re.ASCII)
SIMPLE_PATTERN = re.compile(r'([\d\.]+)折', re.ASCII)


# === Helpers ===

def _build(
    promo_type: PromotionType,
    title: str,
    detail: str,
    rate: float,
    label: Optional[str] = None,
) -> Optional[PromotionResult]:
    """Assemble a result, rejecting rates outside (0, 10]."""
    value = round_half_up(rate, 2)
    if not 0 < value <= 10:
        logger.debug(f"{promo_type.value}: rate {rate} out of range, falling through")
        return None

    return PromotionResult(
        type=promo_type,
        title=title,
        discount_label=label if label is not None else f"{format_fixed(rate, 1)} 折",
        detail=detail,
        value=value,
    )


def _percent_saved(rate: float) -> int:
    return int(round_half_up((10 - rate) * 10))


# === Matchers ===

def match_threshold(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """
    Spend-threshold discount: "滿1000送100", "滿千送百".

    The 千/百 overrides are applied here only; the numeral table has no
    entry for either character.
    """
    match = THRESHOLD_PATTERN.search(text)
    if not match:
        return None

    raw_threshold, raw_amount = match.groups()

    threshold = normalize(raw_threshold)
    if '千' in raw_threshold:
        threshold = 1000

    amount = normalize(raw_amount)
    if '百' in raw_amount:
        amount = 100

    if threshold <= 0:
        return None

    final_price = threshold - amount
    rate = final_price / threshold * 10

    return _build(
        PromotionType.THRESHOLD,
        title=f"滿{format_number(threshold)}折{format_number(amount)}",
        detail=f"消費滿 ${format_number(threshold)} 省 ${format_number(amount)}",
        rate=rate,
    )


def match_add_one(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """
    Add a little, get more: "1件50元加1元多1件".

    Needs a base price.
    """
    match = ADD_ONE_PATTERN.search(text)
    base = base_price(prices)
    if not match or base is None or base <= 0:
        return None

    add_price = normalize(match.group(1))
    add_count = normalize(match.group(2))

    total_cost = base + add_price
    total_count = 1 + add_count
    rate = total_cost / (base * total_count) * 10

    return _build(
        PromotionType.ADD_ONE,
        title=f"加{format_number(add_price)}元多{format_number(add_count)}件",
        detail=(
            f"原價${format_number(base)}，加${format_number(add_price)}"
            f"多{format_number(add_count)}件。平均單件${format_fixed(total_cost / total_count, 1)}"
        ),
        rate=rate,
    )


def match_nth_save(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """
    Fixed amount off the second item: "1件100元第2件折20元".

    Only the ordinal 2 is decoded. Other ordinals fall through to
    match_nth_item.
    """
    match = NTH_SAVE_PATTERN.search(text)
    base = base_price(prices)
    if not match or base is None or base <= 0:
        return None

    nth = normalize(match.group(1))
    save_amount = normalize(match.group(2))
    if nth != 2:
        logger.debug(f"NthSave: ordinal {nth} is not 2, falling through")
        return None

    total_cost = base + (base - save_amount)
    rate = total_cost / (base * 2) * 10

    return _build(
        PromotionType.NTH_SAVE,
        title=f"第{format_number(nth)}件省{format_number(save_amount)}元",
        detail=(
            f"原價${format_number(base)}，第2件折${format_number(save_amount)}。"
            f"平均單件${format_number(total_cost / 2)}"
        ),
        rate=rate,
    )


def match_bogo(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """Buy N get M free: "買一送一", "買2送1"."""
    match = BOGO_PATTERN.search(text)
    if not match:
        return None

    buy = normalize(match.group(1))
    get = normalize(match.group(2))
    if buy <= 0 or get <= 0:
        return None

    total_items = buy + get
    rate = buy / total_items * 10

    return _build(
        PromotionType.BOGO,
        title=f"買{format_number(buy)}送{format_number(get)}",
        detail=f"買 {format_number(buy)} 拿 {format_number(total_items)}，相當於 {format_fixed(rate, 2)} 折",
        rate=rate,
    )


def match_nth_item(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """
    Discount on the Nth item only: "第2件5折", "第3件半", "第2件75折".

    Every item before the Nth is full price. The discount token is read as
    a 折 digit below 10 and as a percentage otherwise; 半 and 0.5 mean
    half price and display as 5.
    """
    match = NTH_ITEM_PATTERN.search(text)
    if not match:
        return None

    nth = normalize(match.group(1))
    raw_discount = match.group(2)
    discount = normalize(raw_discount)

    if raw_discount == '半' or discount == 0.5:
        factor = 0.5
        discount = 5
    elif discount < 10:
        factor = discount / 10
    else:
        factor = discount / 100

    if nth <= 1:
        return None

    total_cost = (nth - 1) * 1 + factor
    rate = total_cost / nth * 10

    return _build(
        PromotionType.NTH_ITEM,
        title=f"第{format_number(nth)}件{format_number(discount)}折",
        detail=f"購買 {format_number(nth)} 件平均，實際為 {format_fixed(rate, 2)} 折",
        rate=rate,
    )


def match_buy_a_get_b(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """Buy one product, get a differently priced one: "買$100送$50"."""
    if '買' not in text or '送' not in text or len(prices) < 2:
        return None

    price_a, price_b = prices[0], prices[1]
    total_value = price_a + price_b
    if total_value <= 0:
        return None

    rate = price_a / total_value * 10

    return _build(
        PromotionType.BUY_A_GET_B,
        title="買A送B (不同價)",
        detail=(
            f"買${format_number(price_a)}送${format_number(price_b)}。"
            f"總值${format_number(total_value)}，僅付${format_number(price_a)}"
        ),
        rate=rate,
    )


def match_group_discount(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """Same discount on every item in a group: "3件7折", "2件半折"."""
    # Ordinal copy belongs to the 第-matchers above
    if '第' in text:
        return None

    match = GROUP_DISC_PATTERN.search(text)
    if not match:
        return None

    count = normalize(match.group(1))
    raw_discount = match.group(2)
    discount = normalize(raw_discount)
    if discount == 0.5 or raw_discount == '半':
        discount = 5

    return _build(
        PromotionType.GROUP_DISC,
        title=f"{format_number(count)}件{format_number(discount)}折",
        detail=f"全部商品皆享 {format_number(discount)} 折優惠",
        rate=discount,
        label=f"{format_number(discount)} 折",
    )


def match_simple(text: str, prices: List[float]) -> Optional[PromotionResult]:
    """Plain discount: "7折", and "70折" read as 7."""
    match = SIMPLE_PATTERN.search(text)
    if not match:
        return None

    value = normalize(match.group(1))
    rate = value if value < 10 else value / 10

    return _build(
        PromotionType.SIMPLE,
        title="直接折扣",
        detail=f"直接省下 {_percent_saved(rate)}%",
        rate=rate,
        label=f"{format_number(rate)} 折",
    )


# === Registry ===
# Order is priority: earlier matchers shadow later ones

MATCHERS: List[Matcher] = [
    match_threshold,
    match_add_one,
    match_nth_save,
    match_bogo,
    match_nth_item,
    match_buy_a_get_b,
    match_group_discount,
    match_simple,
]
