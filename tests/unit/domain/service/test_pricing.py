"""Unit tests for the price helpers."""

from uuid import uuid4

import pytest

from empire.domain.error import ValidationError
from empire.domain.model import CartItem
from empire.domain.service import (
    PriceRange,
    compute_cart_totals,
    filter_and_sort,
    select_min_price_variant,
)
from empire.domain.value import (
    AccountId,
    CartId,
    CartItemId,
    Currency,
    ItemType,
    SortOrder,
)
from tests.factories import make_variant


class TestSelectMinPriceVariant:
    """Tests for select_min_price_variant."""

    def test_picks_cheapest(self):
        account_id = AccountId(uuid4())
        variants = [
            make_variant(account_id, 19.99),
            make_variant(account_id, 9.99),
            make_variant(account_id, 14.99),
        ]

        cheapest = select_min_price_variant(variants, Currency.USD)

        assert cheapest is variants[1]
        assert cheapest.price_usd == 9.99

    def test_first_wins_ties(self):
        account_id = AccountId(uuid4())
        variants = [
            make_variant(account_id, 20.0),
            make_variant(account_id, 5.0),
            make_variant(account_id, 5.0),
        ]

        assert select_min_price_variant(variants, Currency.USD) is variants[1]

    def test_compares_in_requested_currency(self):
        """The cheapest USD variant need not be the cheapest VND one."""
        account_id = AccountId(uuid4())
        variants = [
            make_variant(account_id, 10.0, price_vnd=100000),
            make_variant(account_id, 12.0, price_vnd=90000),
        ]

        assert select_min_price_variant(variants, Currency.USD) is variants[0]
        assert select_min_price_variant(variants, Currency.VND) is variants[1]

    def test_no_variants(self):
        assert select_min_price_variant([], Currency.USD) is None


class TestPriceRange:
    """Tests for PriceRange.parse and contains."""

    def test_blank_max_means_unbounded(self):
        price_range = PriceRange.parse("10", "")

        assert price_range == PriceRange(min=10.0, max=None)
        assert price_range.contains(10.0)
        assert price_range.contains(1_000_000.0)
        assert not price_range.contains(9.99)

    def test_blank_bounds_include_everything(self):
        price_range = PriceRange.parse("", "  ")

        assert price_range.min is None
        assert price_range.max is None
        assert price_range.contains(0.0)

    def test_bounds_are_inclusive(self):
        price_range = PriceRange.parse(5, 15)

        assert price_range.contains(5.0)
        assert price_range.contains(15.0)
        assert not price_range.contains(15.01)

    def test_non_numeric_bound_rejected(self):
        with pytest.raises(ValidationError, match="minimum"):
            PriceRange.parse("cheap", None)


class TestFilterAndSort:
    """Tests for filter_and_sort."""

    PRICES = {"a": 30.0, "b": 10.0, "c": None, "d": 20.0, "e": 10.0}

    def price_of(self, key):
        return self.PRICES[key]

    def test_default_sort_keeps_input_order(self):
        result = filter_and_sort(list(self.PRICES), self.price_of)

        assert result == ["a", "b", "c", "d", "e"]

    def test_ascending_is_stable_with_unpriced_last(self):
        result = filter_and_sort(
            list(self.PRICES), self.price_of, sort=SortOrder.PRICE_ASC
        )

        assert result == ["b", "e", "d", "a", "c"]

    def test_descending_is_stable_with_unpriced_last(self):
        result = filter_and_sort(
            list(self.PRICES), self.price_of, sort=SortOrder.PRICE_DESC
        )

        assert result == ["a", "d", "b", "e", "c"]

    def test_bounded_range_excludes_unpriced(self):
        result = filter_and_sort(
            list(self.PRICES), self.price_of, price_range=PriceRange(min=10.0)
        )

        assert result == ["a", "b", "d", "e"]

    def test_category_filter(self):
        categories = {"a": ["games"], "b": ["music"], "c": [], "d": ["games"], "e": []}

        result = filter_and_sort(
            list(self.PRICES),
            self.price_of,
            category="games",
            categories_of=lambda key: categories[key],
        )

        assert result == ["a", "d"]

    def test_blank_category_keeps_everything(self):
        result = filter_and_sort(
            list(self.PRICES),
            self.price_of,
            category="  ",
            categories_of=lambda key: [],
        )

        assert len(result) == 5


class TestComputeCartTotals:
    """Tests for compute_cart_totals."""

    def _line(self, price_usd: float, quantity: int) -> CartItem:
        return CartItem(
            id=CartItemId(uuid4()),
            cart_id=CartId(uuid4()),
            item_id=uuid4(),
            item_type=ItemType.COURSE,
            quantity=quantity,
            price_usd=price_usd,
            price_vnd=price_usd * 25000,
        )

    def test_applies_tax_rate(self):
        items = [self._line(10.0, 2), self._line(5.0, 1)]

        totals = compute_cart_totals(items, Currency.USD, 0.1)

        assert totals.subtotal == pytest.approx(25.0)
        assert totals.tax == pytest.approx(2.5)
        assert totals.total == pytest.approx(27.5)
        assert totals.item_count == 3

    def test_uses_requested_currency(self):
        totals = compute_cart_totals([self._line(2.0, 1)], Currency.VND, 0.0)

        assert totals.subtotal == pytest.approx(50000.0)
        assert totals.currency == Currency.VND

    def test_empty_cart(self):
        totals = compute_cart_totals([], Currency.USD, 0.1)

        assert totals.total == 0
        assert totals.item_count == 0
