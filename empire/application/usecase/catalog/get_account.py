"""Get account use case."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.service import AccountService
from empire.domain.value import AccountId

from .views import AccountItem


class GetAccountRequest(BaseModel):
    account_id: str


class GetAccountResponse(BaseModel):
    account: AccountItem


class GetAccountUseCase:
    """Use case for reading one account listing with its relations."""

    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: GetAccountRequest) -> GetAccountResponse:
        account_id = AccountId(parse_uuid(request.account_id, "account id"))
        account = await self.account_service.get_account(account_id)
        return GetAccountResponse(account=AccountItem.from_domain(account))
