"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from empire.domain.model import Comment
from empire.domain.repository import CommentRepository
from empire.domain.value import CommentId, ItemType
from empire.persistence.mappers import comment_to_dict, row_to_comment
from empire.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_subject(self, item_id: UUID, item_type: ItemType) -> List[Comment]:
        """Comments of a subject, oldest first (id breaks timestamp ties)."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.item_id == item_id)
            .where(comments_table.c.item_type == item_type.value)
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def find_all(self) -> List[Comment]:
        stmt = select(comments_table).order_by(desc(comments_table.c.created_at))
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete_thread(self, comment_id: CommentId) -> int:
        """Delete a comment and its replies.

        The subtree is collected with a recursive CTE so the count is exact;
        the ``ON DELETE CASCADE`` on ``parent_id`` would remove the same rows.
        """
        subtree = (
            select(comments_table.c.id)
            .where(comments_table.c.id == comment_id)
            .cte(name="subtree", recursive=True)
        )
        subtree = subtree.union_all(
            select(comments_table.c.id).where(
                comments_table.c.parent_id == subtree.c.id
            )
        )
        stmt = (
            comments_table.delete()
            .where(comments_table.c.id.in_(select(subtree.c.id)))
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        deleted = len(result.fetchall())
        await self.session.flush()
        return deleted
