"""PostgreSQL providers: engine, per-request session, repositories."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from forum.config import Settings
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from forum.domain.service import AfterCommit
from forum.persistence.database import create_engine, create_session_factory
from forum.persistence.repository import (
    PostgresCommentRepository,
    PostgresPostRepository,
    PostgresReactionRepository,
    PostgresUserRepository,
)
from forum.util.di.base import ProviderBase
from forum.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Repositories for users, posts, comments and reactions."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one AsyncSession per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Pooled engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    def get_after_commit(self) -> AfterCommit:
        return AfterCommit()

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        after_commit: AfterCommit,
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        A reaction change and its point delta commit together or not at all.
        Deferred media deletes run only once the commit has succeeded.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            logfire.debug("Session committed")
            await after_commit.run()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_reaction_repository(self, session: AsyncSession) -> ReactionRepository:
        return PostgresReactionRepository(session)
