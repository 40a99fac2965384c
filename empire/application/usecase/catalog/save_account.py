"""Create and update account use cases."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.service import AccountService
from empire.domain.value import AccountId

from .builders import build_account, new_account_id
from .views import AccountInput, AccountItem


class CreateAccountRequest(BaseModel):
    account: AccountInput


class UpdateAccountRequest(BaseModel):
    account_id: str
    account: AccountInput


class SaveAccountResponse(BaseModel):
    account: AccountItem


class CreateAccountUseCase:
    """Use case for creating a listing with variants and gallery images."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: CreateAccountRequest) -> SaveAccountResponse:
        """Execute create account flow.

        Raises:
            ValidationError: Missing fields, invalid values or unknown category
        """
        account = build_account(new_account_id(), request.account)
        saved = await self.account_service.create_account(account)
        return SaveAccountResponse(account=AccountItem.from_domain(saved))


class UpdateAccountUseCase:
    """Use case for replacing a listing, its variants and gallery images."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: UpdateAccountRequest) -> SaveAccountResponse:
        """Execute update account flow.

        Raises:
            ValidationError: Missing fields, invalid values or unknown category
            NotFoundError: Listing does not exist
        """
        account_id = AccountId(parse_uuid(request.account_id, "account id"))
        account = build_account(account_id, request.account)
        saved = await self.account_service.update_account(account_id, account)
        return SaveAccountResponse(account=AccountItem.from_domain(saved))
