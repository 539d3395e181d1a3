"""Tests for individual promotion matchers."""
import pytest

from promo_decoder.matchers import (
    MATCHERS,
    match_add_one,
    match_bogo,
    match_buy_a_get_b,
    match_group_discount,
    match_nth_item,
    match_nth_save,
    match_simple,
    match_threshold,
)
from promo_decoder.schema import PromotionType


class TestThreshold:

    def test_thousand_and_hundred_overrides(self):
        result = match_threshold("滿千送百", [])
        assert result.type is PromotionType.THRESHOLD
        assert result.title == "滿1000折100"
        assert result.detail == "消費滿 $1000 省 $100"
        assert result.value == 9.0

    def test_digits(self):
        assert match_threshold("滿1000省150", []).value == 8.5

    def test_zero_threshold_falls_through(self):
        assert match_threshold("滿百送十", []) is None

    def test_amount_above_threshold_falls_through(self):
        assert match_threshold("滿100送200", []) is None

    def test_no_match(self):
        assert match_threshold("買一送一", []) is None


class TestAddOne:

    def test_basic(self):
        result = match_add_one("1件50元加1元多1件", [50.0, 1.0])
        assert result.type is PromotionType.ADD_ONE
        assert result.title == "加1元多1件"
        assert result.detail == "原價$50，加$1多1件。平均單件$25.5"
        assert result.value == 5.1

    def test_requires_base_price(self):
        assert match_add_one("加1元多1件", []) is None

    def test_zero_base_price_falls_through(self):
        assert match_add_one("0元加1元多1件", [0.0, 1.0]) is None

    def test_average_rounds_ties_up(self):
        result = match_add_one("1件50元加0.5元多1件", [50.0, 5.0])
        assert result.detail.endswith("平均單件$25.3")


class TestNthSave:

    def test_second_item(self):
        result = match_nth_save("1件100元第2件折20元", [100.0, 20.0])
        assert result.type is PromotionType.NTH_SAVE
        assert result.title == "第2件省20元"
        assert result.detail == "原價$100，第2件折$20。平均單件$90"
        assert result.value == 9.0

    def test_cash_discount_wording(self):
        assert match_nth_save("1件100元第二件現折50元", [100.0, 50.0]).value == 7.5

    def test_only_second_ordinal(self):
        assert match_nth_save("1件100元第3件折20元", [100.0, 20.0]) is None

    def test_requires_base_price(self):
        assert match_nth_save("第2件省20", []) is None


class TestBogo:

    def test_buy_one_get_one(self):
        result = match_bogo("買一送一", [])
        assert result.type is PromotionType.BOGO
        assert result.title == "買1送1"
        assert result.discount_label == "5.0 折"
        assert result.detail == "買 1 拿 2，相當於 5.00 折"
        assert result.value == 5.0

    def test_buy_two_get_one(self):
        result = match_bogo("買2送一", [])
        assert result.discount_label == "6.7 折"
        assert result.value == 6.67

    def test_label_rounds_ties_up(self):
        result = match_bogo("買5送3", [])
        assert result.discount_label == "6.3 折"
        assert result.value == 6.25

    def test_detail_rounds_ties_up(self):
        result = match_bogo("買1送15", [])
        assert result.detail.endswith("相當於 0.63 折")
        assert result.value == 0.63

    def test_fullwidth_digits_are_not_numerals(self):
        assert match_bogo("買１送１", []) is None

    def test_zero_quantity_falls_through(self):
        assert match_bogo("買0送一", []) is None


class TestNthItem:

    def test_half_price_wording(self):
        result = match_nth_item("第2件半價", [])
        assert result.type is PromotionType.NTH_ITEM
        assert result.title == "第2件5折"
        assert result.value == 7.5

    def test_digit_discount(self):
        assert match_nth_item("第2件6折", []).value == 8.0

    def test_percentage_style_discount(self):
        assert match_nth_item("第2件75折", []).value == 8.75

    def test_decimal_half(self):
        assert match_nth_item("第2件0.5折", []).title == "第2件5折"

    def test_first_item_falls_through(self):
        assert match_nth_item("第1件5折", []) is None


class TestBuyAGetB:

    def test_two_prices(self):
        result = match_buy_a_get_b("買$100送$50", [100.0, 50.0])
        assert result.type is PromotionType.BUY_A_GET_B
        assert result.title == "買A送B (不同價)"
        assert result.detail == "買$100送$50。總值$150，僅付$100"
        assert result.value == 6.67

    def test_needs_two_prices(self):
        assert match_buy_a_get_b("買$100送好禮", [100.0]) is None

    def test_needs_both_keywords(self):
        assert match_buy_a_get_b("$100加$50", [100.0, 50.0]) is None


class TestGroupDiscount:

    def test_count_and_digit(self):
        result = match_group_discount("3件7折", [])
        assert result.type is PromotionType.GROUP_DISC
        assert result.discount_label == "7 折"
        assert result.detail == "全部商品皆享 7 折優惠"
        assert result.value == 7

    def test_half(self):
        assert match_group_discount("2件半折", []).value == 5

    def test_ordinal_text_is_skipped(self):
        assert match_group_discount("第3件7折", []) is None

    def test_out_of_range_falls_through(self):
        assert match_group_discount("2件80折", []) is None


class TestSimple:

    def test_digit(self):
        result = match_simple("7折", [])
        assert result.type is PromotionType.SIMPLE
        assert result.title == "直接折扣"
        assert result.discount_label == "7 折"
        assert result.detail == "直接省下 30%"
        assert result.value == 7

    def test_two_digits_divided(self):
        result = match_simple("75折", [])
        assert result.discount_label == "7.5 折"
        assert result.detail == "直接省下 25%"

    def test_lone_dot_falls_through(self):
        assert match_simple(".折", []) is None


class TestRegistry:

    def test_priority_order(self):
        assert MATCHERS == [
            match_threshold,
            match_add_one,
            match_nth_save,
            match_bogo,
            match_nth_item,
            match_buy_a_get_b,
            match_group_discount,
            match_simple,
        ]

    @pytest.mark.parametrize("matcher", MATCHERS)
    def test_matchers_ignore_empty_text(self, matcher):
        assert matcher("", []) is None
