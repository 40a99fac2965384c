"""Unit tests for PromotionService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from empire.domain.error import NotFoundError, ValidationError
from empire.domain.model import Promotion
from empire.domain.model.common import utcnow
from empire.domain.repository import PromotionRepository
from empire.domain.service import PromotionService
from empire.domain.value import PromotionCode, PromotionId, PromotionStatus
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _fields(**overrides) -> dict:
    now = utcnow()
    fields = {
        "code": "summer10",
        "name_en": "Summer sale",
        "name_vi": "Khuyen mai he",
        "discount_percent": 10,
        "start_date": now - timedelta(days=1),
        "end_date": now + timedelta(days=1),
    }
    fields.update(overrides)
    return fields


class TestCreatePromotion:
    """Tests for create_promotion."""

    @pytest.mark.asyncio
    async def test_create_derives_status_and_upper_cases_code(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)

        promotion = await promotion_service.create_promotion(**_fields())

        assert promotion.code.root == "SUMMER10"
        assert promotion.status == PromotionStatus.ACTIVE
        assert promotion.used_count == 0

    @pytest.mark.asyncio
    async def test_future_start_is_scheduled(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        now = utcnow()

        promotion = await promotion_service.create_promotion(
            **_fields(
                start_date=now + timedelta(days=2), end_date=now + timedelta(days=5)
            )
        )

        assert promotion.status == PromotionStatus.SCHEDULED

    @pytest.mark.asyncio
    async def test_duplicate_code_rejected_case_insensitively(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        await promotion_service.create_promotion(**_fields(code="SUMMER10"))

        with pytest.raises(ValidationError, match="already exists"):
            await promotion_service.create_promotion(**_fields(code="summer10"))

    @pytest.mark.asyncio
    async def test_inverted_dates_rejected(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        now = utcnow()

        with pytest.raises(ValidationError, match="end_date"):
            await promotion_service.create_promotion(
                **_fields(start_date=now, end_date=now - timedelta(days=1))
            )

    @pytest.mark.asyncio
    async def test_missing_dates_rejected(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)

        with pytest.raises(ValidationError, match="required"):
            await promotion_service.create_promotion(**_fields(end_date=None))


class TestReadPromotions:
    """Status is recomputed whenever promotions are read."""

    @pytest.mark.asyncio
    async def test_list_recomputes_stale_status(self, unit_env):
        # Arrange
        promotion_service = await unit_env.get(PromotionService)
        promotion_repo = await unit_env.get(PromotionRepository)

        stale = Promotion(
            id=PromotionId(uuid4()),
            code=PromotionCode("OLD"),
            name_en="Old",
            name_vi="Old",
            discount_percent=5,
            start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            end_date=datetime(2024, 1, 31, tzinfo=timezone.utc),
            status=PromotionStatus.ACTIVE,
        )
        await promotion_repo.save(stale)

        # Act
        listed = await promotion_service.list_promotions(
            now=datetime(2024, 2, 1, tzinfo=timezone.utc)
        )
        fetched = await promotion_service.get_promotion(stale.id)

        # Assert
        assert listed[0].status == PromotionStatus.EXPIRED
        assert fetched.status == PromotionStatus.EXPIRED

    @pytest.mark.asyncio
    async def test_get_missing_promotion(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)

        with pytest.raises(NotFoundError):
            await promotion_service.get_promotion(PromotionId(uuid4()))


class TestUpdateAndDeletePromotion:
    """Tests for update_promotion and delete_promotion."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        created = await promotion_service.create_promotion(**_fields())

        updated = await promotion_service.update_promotion(
            created.id, discount_percent=25
        )

        assert updated.discount_percent == 25
        assert updated.code == created.code
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_update_to_taken_code_rejected(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        await promotion_service.create_promotion(**_fields(code="FIRST"))
        second = await promotion_service.create_promotion(**_fields(code="SECOND"))

        with pytest.raises(ValidationError, match="already exists"):
            await promotion_service.update_promotion(second.id, code="first")

    @pytest.mark.asyncio
    async def test_update_missing_promotion(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)

        with pytest.raises(NotFoundError):
            await promotion_service.update_promotion(
                PromotionId(uuid4()), discount_percent=5
            )

    @pytest.mark.asyncio
    async def test_delete(self, unit_env):
        promotion_service = await unit_env.get(PromotionService)
        created = await promotion_service.create_promotion(**_fields())

        await promotion_service.delete_promotion(created.id)

        with pytest.raises(NotFoundError):
            await promotion_service.delete_promotion(created.id)
