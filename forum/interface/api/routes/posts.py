"""Post routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostImageRequest,
    DeletePostImageUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ImageUpload,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    PostView,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from forum.config import PaginationSettings
from forum.domain.service import JWTService
from forum.interface.api.auth import get_access_token

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


async def read_image(image: UploadFile | None) -> ImageUpload | None:
    """Read an uploaded image into memory.

    An empty file field (no file chosen in the form) counts as no image.
    """
    if image is None or not image.filename:
        return None

    content = await image.read()
    return ImageUpload(
        content=content,
        content_type=image.content_type,
        filename=image.filename,
    )


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    create_post_use_case: FromDishka[CreatePostUseCase],
    jwt_service: FromDishka[JWTService],
    title: str = Form(),
    body: str = Form(),
    image: UploadFile | None = File(default=None),
    token: str | None = Depends(get_access_token),
) -> PostView:
    """Create a new post from a multipart form.

    Requires authentication. Awards the author the post creation points.

    Args:
        create_post_use_case: Create post use case from DI
        jwt_service: JWT service for token verification (injected)
        title: Post title
        body: Post body
        image: Optional image file
        token: JWT from Bearer header or cookie

    Returns:
        Created post
    """
    user_id = jwt_service.authenticate(token)

    return await create_post_use_case.execute(
        CreatePostRequest(
            author_id=str(user_id),
            title=title,
            body=body,
            image=await read_image(image),
        )
    )


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    pagination: FromDishka[PaginationSettings],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
) -> ListPostsResponse:
    """List posts, newest first.

    Args:
        list_posts_use_case: List posts use case from DI
        pagination: Pagination defaults from DI
        page: 1-based page number
        limit: Page size (server default when omitted, capped at the maximum)

    Returns:
        One page of posts with the total count
    """
    page_size = min(limit or pagination.default_limit, pagination.max_limit)
    return await list_posts_use_case.execute(
        ListPostsRequest(page=page, limit=page_size)
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> PostView:
    """Get a post with its author and full reaction sets."""
    return await get_post_use_case.execute(GetPostRequest(post_id=post_id))


@router.put("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    jwt_service: FromDishka[JWTService],
    title: str | None = Form(default=None),
    body: str | None = Form(default=None),
    image: UploadFile | None = File(default=None),
    token: str | None = Depends(get_access_token),
) -> PostView:
    """Edit a post. Only the author can edit.

    Omitted fields keep their value. A new image replaces the old one.

    Raises:
        NotAuthorizedError: If the caller is not the author (403)
    """
    user_id = jwt_service.authenticate(token)

    return await update_post_use_case.execute(
        UpdatePostRequest(
            post_id=post_id,
            user_id=str(user_id),
            title=title,
            body=body,
            image=await read_image(image),
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> DeletePostResponse:
    """Delete a post with its comments, reactions and image.

    Only the author can delete. The post creation points are taken back.
    """
    user_id = jwt_service.authenticate(token)
    return await delete_post_use_case.execute(
        DeletePostRequest(post_id=post_id, user_id=str(user_id))
    )


@router.delete("/{post_id}/image", response_model=PostView)
async def delete_post_image(
    post_id: str,
    delete_post_image_use_case: FromDishka[DeletePostImageUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(get_access_token),
) -> PostView:
    """Remove a post's image. Only the author can remove it."""
    user_id = jwt_service.authenticate(token)
    return await delete_post_image_use_case.execute(
        DeletePostImageRequest(post_id=post_id, user_id=str(user_id))
    )
