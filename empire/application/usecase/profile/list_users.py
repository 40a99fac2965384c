"""List users use case (admin)."""

from pydantic import BaseModel, ConfigDict, Field

from empire.config import ShopSettings
from empire.domain.error import ValidationError
from empire.domain.service import ProfileService

from .views import ProfileItem


class ListUsersRequest(BaseModel):
    """Raw ``page`` / ``perPage`` query values; blank means default."""

    page: str | None = None
    per_page: str | None = None


class ListUsersResponse(BaseModel):
    """A page of profiles; serialized with camelCase pagination keys."""

    model_config = ConfigDict(populate_by_name=True)

    profiles: list[ProfileItem]
    total: int
    page: int
    per_page: int = Field(serialization_alias="perPage")
    total_pages: int = Field(serialization_alias="totalPages")


class ListUsersUseCase:
    """Use case for the paginated admin user list, oldest first."""

    def __init__(
        self, profile_service: ProfileService, shop_settings: ShopSettings
    ) -> None:
        self.profile_service = profile_service
        self.shop_settings = shop_settings

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        """Execute list users flow.

        Raises:
            ValidationError: Non-numeric values, page below 1 or perPage
                outside 1..max
        """
        page = _parse_int(request.page, "page", default=1)
        per_page = _parse_int(
            request.per_page,
            "perPage",
            default=self.shop_settings.users_default_per_page,
        )
        if page < 1:
            raise ValidationError("page must be at least 1")
        if not 1 <= per_page <= self.shop_settings.users_max_per_page:
            raise ValidationError(
                f"perPage must be between 1 and {self.shop_settings.users_max_per_page}"
            )

        result = await self.profile_service.list_page(page, per_page)
        return ListUsersResponse(
            profiles=[ProfileItem.from_domain(p) for p in result.profiles],
            total=result.total,
            page=result.page,
            per_page=result.per_page,
            total_pages=result.total_pages,
        )


def _parse_int(raw: str | None, field: str, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"Invalid {field}")
