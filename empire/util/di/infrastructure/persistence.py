"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from empire.config import Settings
from empire.domain.repository import (
    AccountRepository,
    CartRepository,
    CategoryRepository,
    CommentRepository,
    CourseRepository,
    IdentityRepository,
    ProfileRepository,
    PromotionRepository,
)
from empire.persistence.database import create_engine, create_session_factory
from empire.persistence.repository import (
    PostgresAccountRepository,
    PostgresCartRepository,
    PostgresCategoryRepository,
    PostgresCommentRepository,
    PostgresCourseRepository,
    PostgresIdentityRepository,
    PostgresProfileRepository,
    PostgresPromotionRepository,
)
from empire.util.di.base import ProviderBase
from empire.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The session is committed at the end of the request if no exception
        occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.debug("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, session: AsyncSession) -> IdentityRepository:
        return PostgresIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        return PostgresProfileRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_category_repository(self, session: AsyncSession) -> CategoryRepository:
        return PostgresCategoryRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_account_repository(self, session: AsyncSession) -> AccountRepository:
        return PostgresAccountRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_course_repository(self, session: AsyncSession) -> CourseRepository:
        return PostgresCourseRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_promotion_repository(self, session: AsyncSession) -> PromotionRepository:
        return PostgresPromotionRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_cart_repository(self, session: AsyncSession) -> CartRepository:
        return PostgresCartRepository(session)
