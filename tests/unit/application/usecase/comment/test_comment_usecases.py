"""Unit tests for the comment use cases."""

from uuid import uuid4

import pytest

from empire.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from empire.domain.error import ValidationError
from empire.domain.repository import ProfileRepository
from empire.domain.service import CommentService
from tests.factories import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_reply_returns_author(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        profile_repo = await unit_env.get(ProfileRepository)
        author = await profile_repo.save(make_profile(full_name="Bob"))
        use_case = CreateCommentUseCase(comment_service)
        item_id = str(uuid4())

        root = await use_case.execute(
            CreateCommentRequest(
                item_id=item_id,
                item_type="course",
                comment="Question",
                author_id=str(author.id),
            )
        )

        # Act
        reply = await use_case.execute(
            CreateCommentRequest(
                item_id=item_id,
                item_type="course",
                comment="Answer",
                parent_id=root.comment.id,
                author_id=str(author.id),
            )
        )

        # Assert
        assert reply.comment.parent_id == root.comment.id
        assert reply.comment.user is not None
        assert reply.comment.user.full_name == "Bob"
        assert reply.comment.user.role == "user"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "fields",
        [
            {"item_type": "account", "comment": "x"},
            {"item_id": str(uuid4()), "comment": "x"},
            {"item_id": str(uuid4()), "item_type": "account"},
        ],
    )
    async def test_missing_fields_rejected(self, unit_env, fields):
        use_case = CreateCommentUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError, match="Missing"):
            await use_case.execute(
                CreateCommentRequest(**fields, author_id=str(uuid4()))
            )

    @pytest.mark.asyncio
    async def test_unknown_item_type_rejected(self, unit_env):
        use_case = CreateCommentUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError, match="item_type"):
            await use_case.execute(
                CreateCommentRequest(
                    item_id=str(uuid4()),
                    item_type="post",
                    comment="x",
                    author_id=str(uuid4()),
                )
            )

    @pytest.mark.asyncio
    async def test_malformed_parent_id_rejected(self, unit_env):
        use_case = CreateCommentUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError, match="parent_id"):
            await use_case.execute(
                CreateCommentRequest(
                    item_id=str(uuid4()),
                    item_type="account",
                    comment="x",
                    parent_id="not-a-uuid",
                    author_id=str(uuid4()),
                )
            )


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_nested_tree_and_total(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        create = CreateCommentUseCase(comment_service)
        use_case = GetCommentsUseCase(comment_service)
        item_id = str(uuid4())
        author_id = str(uuid4())

        root = await create.execute(
            CreateCommentRequest(
                item_id=item_id, item_type="account", comment="root", author_id=author_id
            )
        )
        await create.execute(
            CreateCommentRequest(
                item_id=item_id,
                item_type="account",
                comment="reply",
                parent_id=root.comment.id,
                author_id=author_id,
            )
        )

        # Act
        response = await use_case.execute(
            GetCommentsRequest(item_id=item_id, item_type="account")
        )

        # Assert
        assert response.total == 2
        assert len(response.comments) == 1
        assert response.comments[0].comment == "root"
        assert [r.comment for r in response.comments[0].replies] == ["reply"]
        assert response.comments[0].replies[0].replies == []

    @pytest.mark.asyncio
    async def test_missing_params_rejected(self, unit_env):
        use_case = GetCommentsUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError, match="Missing"):
            await use_case.execute(GetCommentsRequest(item_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_invalid_item_type_rejected(self, unit_env):
        use_case = GetCommentsUseCase(await unit_env.get(CommentService))

        with pytest.raises(ValidationError, match="expected one of account, course"):
            await use_case.execute(
                GetCommentsRequest(item_id=str(uuid4()), item_type="review")
            )
