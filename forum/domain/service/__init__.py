"""Domain services."""

from .after_commit import AfterCommit
from .auth_service import AuthService
from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .media_store import MediaStore
from .post_service import PostService
from .reaction_service import ReactionResult, ReactionService
from .user_service import UserService

__all__ = [
    "AfterCommit",
    "AuthService",
    "CommentService",
    "JWTService",
    "MediaStore",
    "PostService",
    "ReactionResult",
    "ReactionService",
    "Service",
    "UserService",
]
