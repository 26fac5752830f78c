"""Application layer DI providers."""

from dishka import Scope, provide

from forum.application.usecase.auth import (
    GetCurrentUserUseCase,
    LoginUseCase,
    SignupUseCase,
)
from forum.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from forum.application.usecase.post import (
    CreatePostUseCase,
    DeletePostImageUseCase,
    DeletePostUseCase,
    GetPostUseCase,
    ListPostsUseCase,
    UpdatePostUseCase,
)
from forum.application.usecase.reaction import ReactUseCase, WithdrawReactionUseCase
from forum.application.usecase.user import (
    CheckDisplayNameUseCase,
    DeleteAccountUseCase,
    GetProfileUseCase,
    UpdateProfileUseCase,
)
from forum.domain.service import (
    AuthService,
    CommentService,
    JWTService,
    PostService,
    ReactionService,
    UserService,
)
from forum.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """One REQUEST-scoped instance of each use case, built from domain services."""

    scope = Scope.REQUEST

    # Auth use cases
    @provide
    def get_signup_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> SignupUseCase:
        return SignupUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_login_use_case(
        self, auth_service: AuthService, jwt_service: JWTService
    ) -> LoginUseCase:
        return LoginUseCase(auth_service=auth_service, jwt_service=jwt_service)

    @provide
    def get_current_user_use_case(
        self, jwt_service: JWTService, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(jwt_service=jwt_service, user_service=user_service)

    # User use cases
    @provide
    def get_get_profile_use_case(self, user_service: UserService) -> GetProfileUseCase:
        return GetProfileUseCase(user_service=user_service)

    @provide
    def get_update_profile_use_case(
        self, user_service: UserService
    ) -> UpdateProfileUseCase:
        return UpdateProfileUseCase(user_service=user_service)

    @provide
    def get_delete_account_use_case(
        self, user_service: UserService, auth_service: AuthService
    ) -> DeleteAccountUseCase:
        return DeleteAccountUseCase(
            user_service=user_service, auth_service=auth_service
        )

    @provide
    def get_check_display_name_use_case(
        self, user_service: UserService
    ) -> CheckDisplayNameUseCase:
        return CheckDisplayNameUseCase(user_service=user_service)

    # Post use cases
    @provide
    def get_create_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> CreatePostUseCase:
        return CreatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_get_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> GetPostUseCase:
        return GetPostUseCase(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_list_posts_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> ListPostsUseCase:
        return ListPostsUseCase(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_update_post_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> UpdatePostUseCase:
        return UpdatePostUseCase(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_delete_post_use_case(
        self,
        post_service: PostService,
        comment_service: CommentService,
        reaction_service: ReactionService,
    ) -> DeletePostUseCase:
        return DeletePostUseCase(
            post_service=post_service,
            comment_service=comment_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_delete_post_image_use_case(
        self,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> DeletePostImageUseCase:
        return DeletePostImageUseCase(
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    # Comment use cases
    @provide
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> CreateCommentUseCase:
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> ListCommentsUseCase:
        return ListCommentsUseCase(
            comment_service=comment_service,
            post_service=post_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        user_service: UserService,
        reaction_service: ReactionService,
    ) -> UpdateCommentUseCase:
        return UpdateCommentUseCase(
            comment_service=comment_service,
            user_service=user_service,
            reaction_service=reaction_service,
        )

    @provide
    def get_delete_comment_use_case(
        self, comment_service: CommentService, reaction_service: ReactionService
    ) -> DeleteCommentUseCase:
        return DeleteCommentUseCase(
            comment_service=comment_service, reaction_service=reaction_service
        )

    # Reaction use cases
    @provide
    def get_react_use_case(
        self, reaction_service: ReactionService, comment_service: CommentService
    ) -> ReactUseCase:
        return ReactUseCase(
            reaction_service=reaction_service, comment_service=comment_service
        )

    @provide
    def get_withdraw_reaction_use_case(
        self, reaction_service: ReactionService, comment_service: CommentService
    ) -> WithdrawReactionUseCase:
        return WithdrawReactionUseCase(
            reaction_service=reaction_service, comment_service=comment_service
        )
