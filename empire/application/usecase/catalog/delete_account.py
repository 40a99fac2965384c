"""Delete account use case."""

from pydantic import BaseModel

from empire.application.usecase.parsing import parse_uuid
from empire.domain.service import AccountService
from empire.domain.value import AccountId


class DeleteAccountRequest(BaseModel):
    account_id: str


class DeleteAccountUseCase:
    def __init__(self, account_service: AccountService) -> None:
        self.account_service = account_service

    async def execute(self, request: DeleteAccountRequest) -> None:
        account_id = AccountId(parse_uuid(request.account_id, "account id"))
        await self.account_service.delete_account(account_id)
