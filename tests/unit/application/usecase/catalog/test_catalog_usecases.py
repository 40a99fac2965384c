"""Unit tests for the catalogue listing use cases."""

import pytest

from empire.application.usecase.catalog import (
    ListAccountsRequest,
    ListAccountsUseCase,
    ListCoursesRequest,
    ListCoursesUseCase,
)
from empire.domain.error import ValidationError
from empire.domain.repository import AccountRepository, CourseRepository
from tests.factories import make_account, make_course
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListAccountsUseCase:
    """Tests for ListAccountsUseCase."""

    @pytest.mark.asyncio
    async def test_listing_carries_min_price_and_variant(self, unit_env):
        # Arrange
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(ListAccountsUseCase)
        account = await account_repo.save(make_account("hbo", [19.99, 9.99, 14.99]))

        # Act
        response = await use_case.execute(ListAccountsRequest())

        # Assert
        assert response.currency == "usd"
        [item] = response.accounts
        assert item.min_price == 9.99
        assert item.min_variant_id == str(account.variants[1].id)
        assert len(item.variants) == 3

    @pytest.mark.asyncio
    async def test_currency_is_case_insensitive(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(ListAccountsUseCase)
        await account_repo.save(make_account("hbo", [2]))

        response = await use_case.execute(ListAccountsRequest(currency="VND"))

        assert response.currency == "vnd"
        assert response.accounts[0].min_price == 50000

    @pytest.mark.asyncio
    async def test_blank_bounds_keep_everything(self, unit_env):
        account_repo = await unit_env.get(AccountRepository)
        use_case = await unit_env.get(ListAccountsUseCase)
        await account_repo.save(make_account("a", [5]))
        await account_repo.save(make_account("b", []))

        response = await use_case.execute(
            ListAccountsRequest(min_price="", max_price="")
        )

        assert len(response.accounts) == 2

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_fields",
        [{"currency": "eur"}, {"sort": "name"}, {"min_price": "ten"}],
    )
    async def test_invalid_query_values_rejected(self, unit_env, request_fields):
        use_case = await unit_env.get(ListAccountsUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListAccountsRequest(**request_fields))


class TestListCoursesUseCase:
    """Tests for ListCoursesUseCase."""

    @pytest.mark.asyncio
    async def test_pages_with_cursor(self, unit_env):
        # Arrange
        course_repo = await unit_env.get(CourseRepository)
        use_case = await unit_env.get(ListCoursesUseCase)
        for i in range(3):
            await course_repo.save(make_course(f"course-{i}", minutes=i))

        # Act
        first = await use_case.execute(ListCoursesRequest(limit="2"))
        second = await use_case.execute(
            ListCoursesRequest(limit="2", cursor=first.next_cursor.isoformat())
        )

        # Assert
        assert [c.slug for c in first.items] == ["course-2", "course-1"]
        assert first.has_more
        assert [c.slug for c in second.items] == ["course-0"]
        assert not second.has_more
        assert second.next_cursor is None

    @pytest.mark.asyncio
    async def test_serializes_camel_case_pagination_keys(self, unit_env):
        use_case = await unit_env.get(ListCoursesUseCase)

        response = await use_case.execute(ListCoursesRequest())
        data = response.model_dump(by_alias=True)

        assert data["nextCursor"] is None
        assert data["hasMore"] is False
        assert data["limit"] == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw,expected", [("500", 50), ("0", 20), ("7", 7)])
    async def test_limit_is_clamped(self, unit_env, raw, expected):
        use_case = await unit_env.get(ListCoursesUseCase)

        response = await use_case.execute(ListCoursesRequest(limit=raw))

        assert response.limit == expected

    @pytest.mark.asyncio
    async def test_filter_and_sort_apply_to_page(self, unit_env):
        course_repo = await unit_env.get(CourseRepository)
        use_case = await unit_env.get(ListCoursesUseCase)
        await course_repo.save(make_course("cheap", price_usd=5, minutes=0))
        await course_repo.save(make_course("mid", price_usd=20, minutes=1))
        await course_repo.save(make_course("dear", price_usd=40, minutes=2))

        response = await use_case.execute(
            ListCoursesRequest(min_price="10", sort="price-asc")
        )

        assert [c.slug for c in response.items] == ["mid", "dear"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "request_fields", [{"limit": "many"}, {"cursor": "yesterday"}]
    )
    async def test_malformed_paging_rejected(self, unit_env, request_fields):
        use_case = await unit_env.get(ListCoursesUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(ListCoursesRequest(**request_fields))
