"""Domain layer DI providers."""

from dishka import Scope, provide

from forum.config import AuthSettings, MediaSettings
from forum.domain.repository import (
    CommentRepository,
    PostRepository,
    ReactionRepository,
    UserRepository,
)
from forum.domain.service import (
    AfterCommit,
    AuthService,
    CommentService,
    JWTService,
    MediaStore,
    PostService,
    ReactionService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services, including the reaction ledger.

    REQUEST-scoped so every service in a request shares the repositories,
    and with them one database transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, user_repository: UserRepository, auth_settings: AuthSettings
    ) -> AuthService:
        return AuthService(user_repository=user_repository, auth_settings=auth_settings)

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        return UserService(user_repository=user_repository)

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        media_store: MediaStore,
        media_settings: MediaSettings,
        after_commit: AfterCommit,
    ) -> PostService:
        return PostService(
            post_repository=post_repository,
            media_store=media_store,
            media_settings=media_settings,
            after_commit=after_commit,
        )

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_reaction_service(
        self,
        reaction_repository: ReactionRepository,
        post_service: PostService,
        comment_service: CommentService,
        user_service: UserService,
    ) -> ReactionService:
        return ReactionService(
            reaction_repository=reaction_repository,
            post_service=post_service,
            comment_service=comment_service,
            user_service=user_service,
        )
