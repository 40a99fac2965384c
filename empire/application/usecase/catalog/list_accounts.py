"""List accounts use case."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_currency, parse_enum
from empire.config import ShopSettings
from empire.domain.service import AccountService, PriceRange
from empire.domain.value import SortOrder

from .views import AccountItem


class ListAccountsRequest(BaseModel):
    """Listing filters; every field is optional and blank means unset."""

    currency: str | None = None
    category: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    sort: str | None = None


class ListAccountsResponse(BaseModel):
    accounts: list[AccountItem]
    currency: str


class ListAccountsUseCase:
    """Use case for the public account listing.

    Each listing is priced by its cheapest variant in the requested currency,
    which is also what the price filter and sort compare.
    """

    def __init__(
        self, account_service: AccountService, shop_settings: ShopSettings
    ) -> None:
        self.account_service = account_service
        self.shop_settings = shop_settings

    async def execute(self, request: ListAccountsRequest) -> ListAccountsResponse:
        """Execute list accounts flow.

        Raises:
            ValidationError: Unknown currency or sort, or non-numeric bound
        """
        currency = parse_currency(request.currency, self.shop_settings.default_currency)
        sort = parse_enum(SortOrder, request.sort or SortOrder.DEFAULT.value, "sort")
        price_range = PriceRange.parse(request.min_price, request.max_price)

        listings = await self.account_service.list_accounts(
            currency=currency,
            price_range=price_range,
            sort=sort,
            category=request.category,
        )
        return ListAccountsResponse(
            accounts=[AccountItem.from_listing(listing) for listing in listings],
            currency=currency.value,
        )
