"""Account listing routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status

from empire.application.usecase.catalog import (
    AccountInput,
    CreateAccountRequest,
    CreateAccountUseCase,
    DeleteAccountRequest,
    DeleteAccountUseCase,
    GetAccountRequest,
    GetAccountResponse,
    GetAccountUseCase,
    ListAccountsRequest,
    ListAccountsResponse,
    ListAccountsUseCase,
    SaveAccountResponse,
    UpdateAccountRequest,
    UpdateAccountUseCase,
)
from empire.domain.service import AccessPolicy
from empire.interface.api.guards import require_admin, session_token
from empire.interface.api.routes.common import SuccessResponse

router = APIRouter(prefix="/accounts", tags=["catalog"], route_class=DishkaRoute)


@router.get("", response_model=ListAccountsResponse)
async def list_accounts(
    list_accounts_use_case: FromDishka[ListAccountsUseCase],
    currency: str | None = None,
    category: str | None = None,
    min_price: str | None = Query(default=None, alias="minPrice"),
    max_price: str | None = Query(default=None, alias="maxPrice"),
    sort: str | None = None,
) -> ListAccountsResponse:
    """Public listing, newest first, priced by each listing's cheapest variant.

    Args:
        currency: ``usd`` (default) or ``vnd``
        category: Category id or slug
        min_price: Inclusive lower bound (``minPrice``)
        max_price: Inclusive upper bound (``maxPrice``)
        sort: ``default``, ``price-asc`` or ``price-desc``
    """
    return await list_accounts_use_case.execute(
        ListAccountsRequest(
            currency=currency,
            category=category,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
        )
    )


@router.post(
    "",
    response_model=SaveAccountResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_account(
    request: AccountInput,
    create_account_use_case: FromDishka[CreateAccountUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SaveAccountResponse:
    """Create a listing with its variants and gallery images. Admin only."""
    await require_admin(access_policy, token)
    return await create_account_use_case.execute(CreateAccountRequest(account=request))


@router.get("/{account_id}", response_model=GetAccountResponse)
async def get_account(
    account_id: str,
    get_account_use_case: FromDishka[GetAccountUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> GetAccountResponse:
    """One listing with its relations, for editing. Admin only."""
    await require_admin(access_policy, token)
    return await get_account_use_case.execute(GetAccountRequest(account_id=account_id))


@router.put("/{account_id}", response_model=SaveAccountResponse)
async def update_account(
    account_id: str,
    request: AccountInput,
    update_account_use_case: FromDishka[UpdateAccountUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SaveAccountResponse:
    """Replace a listing, its variants and its gallery images. Admin only."""
    await require_admin(access_policy, token)
    return await update_account_use_case.execute(
        UpdateAccountRequest(account_id=account_id, account=request)
    )


@router.delete("/{account_id}", response_model=SuccessResponse)
async def delete_account(
    account_id: str,
    delete_account_use_case: FromDishka[DeleteAccountUseCase],
    access_policy: FromDishka[AccessPolicy],
    token: str | None = Depends(session_token),
) -> SuccessResponse:
    """Delete a listing. Admin only."""
    await require_admin(access_policy, token)
    await delete_account_use_case.execute(DeleteAccountRequest(account_id=account_id))
    return SuccessResponse(success=True)
