"""Post use cases."""

from .common import ImageUpload, PostView
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostResponse, DeletePostUseCase
from .delete_post_image import DeletePostImageRequest, DeletePostImageUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsRequest, ListPostsResponse, ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostImageRequest",
    "DeletePostImageUseCase",
    "DeletePostRequest",
    "DeletePostResponse",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ImageUpload",
    "ListPostsRequest",
    "ListPostsResponse",
    "ListPostsUseCase",
    "PostView",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
