"""List courses use case (cursor pagination)."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from empire.application.usecase.parsing import (
    parse_currency,
    parse_enum,
    parse_timestamp,
)
from empire.config import ShopSettings
from empire.domain.error import ValidationError
from empire.domain.service import CourseService, PriceRange, filter_and_sort
from empire.domain.value import SortOrder

from .views import CourseItem


class ListCoursesRequest(BaseModel):
    limit: str | None = None
    cursor: str | None = None  # ISO timestamp from the previous page
    currency: str | None = None
    min_price: str | None = None
    max_price: str | None = None
    sort: str | None = None


class ListCoursesResponse(BaseModel):
    """A page of courses; serialized with camelCase pagination keys."""

    model_config = ConfigDict(populate_by_name=True)

    items: list[CourseItem]
    next_cursor: Optional[datetime] = Field(serialization_alias="nextCursor")
    has_more: bool = Field(serialization_alias="hasMore")
    limit: int


class ListCoursesUseCase:
    """Use case for the public course listing.

    The price filter and sort apply to the fetched page only; pagination
    itself always walks creation time, newest first.
    """

    def __init__(
        self, course_service: CourseService, shop_settings: ShopSettings
    ) -> None:
        self.course_service = course_service
        self.shop_settings = shop_settings

    def _limit(self, raw: str | None) -> int:
        default = self.shop_settings.courses_default_limit
        if not raw:
            return default
        try:
            limit = int(raw)
        except ValueError:
            raise ValidationError("Invalid limit")
        if limit < 1:
            return default
        return min(limit, self.shop_settings.courses_max_limit)

    async def execute(self, request: ListCoursesRequest) -> ListCoursesResponse:
        """Execute list courses flow.

        Raises:
            ValidationError: Malformed limit, cursor, currency, sort or bounds
        """
        limit = self._limit(request.limit)
        cursor = parse_timestamp(request.cursor, "cursor")
        currency = parse_currency(request.currency, self.shop_settings.default_currency)
        sort = parse_enum(SortOrder, request.sort or SortOrder.DEFAULT.value, "sort")
        price_range = PriceRange.parse(request.min_price, request.max_price)

        page = await self.course_service.list_page(limit, cursor)
        courses = filter_and_sort(
            page.items,
            price_of=lambda course: course.price(currency),
            price_range=price_range,
            sort=sort,
        )
        return ListCoursesResponse(
            items=[CourseItem.from_domain(c) for c in courses],
            next_cursor=page.next_cursor,
            has_more=page.has_more,
            limit=page.limit,
        )
