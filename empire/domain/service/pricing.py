"""Stateless price computations used by catalogue listings and the cart."""

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TypeVar

from empire.domain.error import ValidationError
from empire.domain.model import AccountVariant, CartItem
from empire.domain.value import Currency, SortOrder

T = TypeVar("T")


def select_min_price_variant(
    variants: Iterable[AccountVariant], currency: Currency
) -> Optional[AccountVariant]:
    """Cheapest variant in ``currency``; the first one wins ties."""
    cheapest: Optional[AccountVariant] = None
    for variant in variants:
        if cheapest is None or variant.price(currency) < cheapest.price(currency):
            cheapest = variant
    return cheapest


def _parse_bound(value: str | float | None, name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        try:
            return float(value)
        except ValueError:
            raise ValidationError(f"Invalid {name} price: {value}")
    return float(value)


@dataclass(frozen=True)
class PriceRange:
    """Inclusive price bounds; ``None`` means unbounded."""

    min: Optional[float] = None
    max: Optional[float] = None

    @classmethod
    def parse(
        cls, min_value: str | float | None, max_value: str | float | None
    ) -> "PriceRange":
        """Build a range from raw query values, blank strings meaning no bound.

        Raises:
            ValidationError: A bound is not a number
        """
        return cls(
            min=_parse_bound(min_value, "minimum"),
            max=_parse_bound(max_value, "maximum"),
        )

    def contains(self, price: float) -> bool:
        if self.min is not None and price < self.min:
            return False
        if self.max is not None and price > self.max:
            return False
        return True


def filter_and_sort(
    items: Sequence[T],
    price_of: Callable[[T], Optional[float]],
    price_range: PriceRange = PriceRange(),
    sort: SortOrder = SortOrder.DEFAULT,
    category: Optional[str] = None,
    categories_of: Optional[Callable[[T], Iterable[str]]] = None,
) -> list[T]:
    """Filter catalogue items then order them by price.

    Items without a price only pass an unbounded range, and sort last.
    ``sort`` is stable, and ``SortOrder.DEFAULT`` keeps the input order.

    Args:
        items: Items to filter
        price_of: Price of an item in the active currency
        price_range: Inclusive bounds
        sort: Requested order
        category: Category id or slug to match; blank matches everything
        categories_of: Identifiers an item's category is known by
    """
    wanted = category.strip() if category else ""

    def keep(item: T) -> bool:
        if wanted and categories_of is not None:
            if wanted not in set(categories_of(item)):
                return False
        price = price_of(item)
        if price is None:
            return price_range.min is None and price_range.max is None
        return price_range.contains(price)

    result = [item for item in items if keep(item)]

    if sort == SortOrder.PRICE_ASC:
        result.sort(key=lambda i: (price_of(i) is None, price_of(i) or 0.0))
    elif sort == SortOrder.PRICE_DESC:
        result.sort(key=lambda i: (price_of(i) is None, -(price_of(i) or 0.0)))
    return result


@dataclass(frozen=True)
class CartTotals:
    """Cart amounts in one currency."""

    currency: Currency
    subtotal: float
    tax: float
    total: float
    item_count: int


def compute_cart_totals(
    items: Iterable[CartItem], currency: Currency, tax_rate: float
) -> CartTotals:
    """Sum cart lines and apply the flat tax rate."""
    items = list(items)
    subtotal = sum(item.line_total(currency) for item in items)
    tax = subtotal * tax_rate
    return CartTotals(
        currency=currency,
        subtotal=subtotal,
        tax=tax,
        total=subtotal + tax,
        item_count=sum(item.quantity for item in items),
    )
