"""Account listing domain service."""

from dataclasses import dataclass
from typing import Optional

import logfire

from empire.domain.error import NotFoundError, ValidationError
from empire.domain.model import Account, AccountVariant
from empire.domain.model.common import utcnow
from empire.domain.repository import AccountRepository, CategoryRepository
from empire.domain.value import AccountId, Currency, SortOrder

from .base import Service
from .pricing import PriceRange, filter_and_sort, select_min_price_variant


@dataclass
class AccountListing:
    """A listing with its cheapest variant in the requested currency."""

    account: Account
    min_variant: Optional[AccountVariant]
    currency: Currency

    @property
    def min_price(self) -> Optional[float]:
        if self.min_variant is None:
            return None
        return self.min_variant.price(self.currency)


def _category_keys(listing: AccountListing) -> list[str]:
    account = listing.account
    keys = []
    if account.category_id:
        keys.append(str(account.category_id))
    if account.category:
        keys.append(account.category.slug.root)
    return keys


class AccountService(Service):
    """Domain service for account listing operations."""

    def __init__(
        self,
        account_repository: AccountRepository,
        category_repository: CategoryRepository,
    ) -> None:
        """Initialize account service.

        Args:
            account_repository: Account repository
            category_repository: Category repository, to validate references
        """
        self.account_repository = account_repository
        self.category_repository = category_repository

    async def list_accounts(
        self,
        currency: Currency,
        price_range: PriceRange = PriceRange(),
        sort: SortOrder = SortOrder.DEFAULT,
        category: Optional[str] = None,
    ) -> list[AccountListing]:
        """Listings newest first, priced by their cheapest variant.

        Args:
            currency: Currency prices are compared in
            price_range: Inclusive bounds on the minimum price
            sort: Requested order
            category: Category id or slug to keep
        """
        with logfire.span(
            "account_service.list_accounts",
            currency=currency.value,
            sort=sort.value,
            category=category,
        ):
            accounts = await self.account_repository.find_all()
            listings = [
                AccountListing(
                    account=account,
                    min_variant=select_min_price_variant(account.variants, currency),
                    currency=currency,
                )
                for account in accounts
            ]
            result = filter_and_sort(
                listings,
                price_of=lambda listing: listing.min_price,
                price_range=price_range,
                sort=sort,
                category=category,
                categories_of=_category_keys,
            )
            logfire.info(
                "Accounts listed", total=len(listings), returned=len(result)
            )
            return result

    async def get_account(self, account_id: AccountId) -> Account:
        """Get a listing by ID.

        Raises:
            NotFoundError: If listing not found
        """
        with logfire.span("account_service.get_account", account_id=str(account_id)):
            account = await self.account_repository.find_by_id(account_id)
            if not account:
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            return account

    async def create_account(self, account: Account) -> Account:
        """Store a new listing with its variants and images.

        Raises:
            ValidationError: Unknown category
        """
        with logfire.span(
            "account_service.create_account",
            account_id=str(account.id),
            slug=account.slug.root,
            variants=len(account.variants),
        ):
            await self._check_category(account)
            saved = await self.account_repository.save(account)
            logfire.info("Account created", account_id=str(saved.id))
            return saved

    async def update_account(self, account_id: AccountId, account: Account) -> Account:
        """Replace a listing, its variants and its images.

        Raises:
            NotFoundError: Listing does not exist
            ValidationError: Unknown category
        """
        with logfire.span(
            "account_service.update_account", account_id=str(account_id)
        ):
            existing = await self.get_account(account_id)
            await self._check_category(account)
            updated = account.model_copy(
                update={
                    "id": existing.id,
                    "created_at": existing.created_at,
                    "updated_at": utcnow(),
                }
            )
            saved = await self.account_repository.save(updated)
            logfire.info(
                "Account updated",
                account_id=str(account_id),
                variants=len(saved.variants),
            )
            return saved

    async def delete_account(self, account_id: AccountId) -> None:
        """Delete a listing.

        Raises:
            NotFoundError: Listing does not exist
        """
        with logfire.span(
            "account_service.delete_account", account_id=str(account_id)
        ):
            if not await self.account_repository.delete(account_id):
                logfire.warn("Account not found", account_id=str(account_id))
                raise NotFoundError("Account", str(account_id))
            logfire.info("Account deleted", account_id=str(account_id))

    async def _check_category(self, account: Account) -> None:
        if account.category_id is None:
            return
        if not await self.category_repository.find_by_id(account.category_id):
            raise ValidationError(f"Unknown category: {account.category_id}")
