"""Integration tests for CommentRepository."""

from uuid import uuid4

import pytest

from empire.domain.repository import CommentRepository
from empire.domain.service import AuthService
from empire.domain.value import ItemType
from tests.factories import DEFAULT_PASSWORD, make_comment
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_delete_thread_removes_nested_replies(self, integration_env):
        # Arrange
        auth_service = await integration_env.get(AuthService)
        comment_repo = await integration_env.get(CommentRepository)
        author = await auth_service.register(
            f"thread-{uuid4().hex[:12]}@example.com", DEFAULT_PASSWORD, "Thread Author"
        )
        item_id = uuid4()
        root = await comment_repo.save(make_comment(item_id, author.id, "Root"))
        reply = await comment_repo.save(
            make_comment(item_id, author.id, "Reply", parent_id=root.id, minutes=1)
        )
        await comment_repo.save(
            make_comment(item_id, author.id, "Nested", parent_id=reply.id, minutes=2)
        )

        # Act
        deleted = await comment_repo.delete_thread(root.id)

        # Assert
        assert deleted == 3
        assert await comment_repo.find_by_subject(item_id, ItemType.ACCOUNT) == []
        assert await comment_repo.find_by_id(reply.id) is None
