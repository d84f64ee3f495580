"""
FastAPI router for posts.

All routes require a bearer token and delegate to use cases.
Ownership checks happen in the use cases; error mapping is handled
by the centralized error handlers.
"""

from fastapi import APIRouter, Depends, Response, status

from postboard.application.posts.create_post import CreatePostUseCase
from postboard.application.posts.delete_post import DeletePostUseCase
from postboard.application.posts.dtos import (
    CreatePostCommand,
    DeletePostCommand,
    ShowPostQuery,
    UpdatePostCommand,
)
from postboard.application.posts.get_my_latest_post import GetMyLatestPostUseCase
from postboard.application.posts.list_my_posts import ListMyPostsUseCase
from postboard.application.posts.list_posts import ListPostsUseCase
from postboard.application.posts.show_post import ShowPostUseCase
from postboard.application.posts.update_post import UpdatePostUseCase
from postboard.domain.entities import User
from postboard.interfaces.dependencies import (
    get_create_post_use_case,
    get_current_user,
    get_delete_post_use_case,
    get_list_my_posts_use_case,
    get_list_posts_use_case,
    get_my_latest_post_use_case,
    get_show_post_use_case,
    get_update_post_use_case,
)
from postboard.interfaces.posts.schemas import (
    CreatePostRequest,
    LatestPostResponse,
    PostItem,
    PostListResponse,
    PostResponse,
    UpdatePostRequest,
)
from postboard.interfaces.schemas import ErrorResponse

router = APIRouter(
    prefix="/posts",
    tags=["posts"],
    responses={401: {"model": ErrorResponse}},
)


@router.get(
    "",
    response_model=PostListResponse,
    summary="List posts",
    description="Every post, newest first, with the owner's nickname.",
)
def list_posts(
    _caller: User = Depends(get_current_user),
    use_case: ListPostsUseCase = Depends(get_list_posts_use_case),
) -> PostListResponse:
    return PostListResponse(posts=[PostItem.from_result(r) for r in use_case.execute()])


@router.get(
    "/myPosts",
    response_model=PostListResponse,
    summary="List my posts",
)
def list_my_posts(
    caller: User = Depends(get_current_user),
    use_case: ListMyPostsUseCase = Depends(get_list_my_posts_use_case),
) -> PostListResponse:
    """Posts owned by the caller, newest first."""
    results = use_case.execute(caller)
    return PostListResponse(posts=[PostItem.from_result(r) for r in results])


@router.get(
    "/myLatestPost",
    response_model=LatestPostResponse,
    summary="Get my latest post",
)
def my_latest_post(
    caller: User = Depends(get_current_user),
    use_case: GetMyLatestPostUseCase = Depends(get_my_latest_post_use_case),
) -> LatestPostResponse:
    """The caller's newest post, or ``null`` if they have none."""
    result = use_case.execute(caller)
    return LatestPostResponse(post=PostItem.from_result(result) if result else None)


@router.get(
    "/{post_id}",
    response_model=PostResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Show a post",
)
def show_post(
    post_id: str,
    _caller: User = Depends(get_current_user),
    use_case: ShowPostUseCase = Depends(get_show_post_use_case),
) -> PostResponse:
    result = use_case.execute(ShowPostQuery(post_id=post_id))
    return PostResponse(post=PostItem.from_result(result))


@router.post(
    "",
    response_model=PostResponse,
    status_code=status.HTTP_201_CREATED,
    responses={422: {"model": ErrorResponse}},
    summary="Create a post",
)
def create_post(
    request: CreatePostRequest,
    caller: User = Depends(get_current_user),
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> PostResponse:
    """Create a post owned by the caller."""
    command = CreatePostCommand(
        caller=caller,
        title=request.post.title,
        body=request.post.body,
    )
    return PostResponse(post=PostItem.from_result(use_case.execute(command)))


@router.patch(
    "/{post_id}",
    response_model=PostResponse,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Update a post",
)
def update_post(
    post_id: str,
    request: UpdatePostRequest,
    caller: User = Depends(get_current_user),
    use_case: UpdatePostUseCase = Depends(get_update_post_use_case),
) -> PostResponse:
    """Patch a post. Only its owner may do this."""
    command = UpdatePostCommand(
        caller=caller,
        post_id=post_id,
        changes=request.post.model_dump(exclude_unset=True),
    )
    return PostResponse(post=PostItem.from_result(use_case.execute(command)))


@router.delete(
    "/{post_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Delete a post",
)
def delete_post(
    post_id: str,
    caller: User = Depends(get_current_user),
    use_case: DeletePostUseCase = Depends(get_delete_post_use_case),
) -> Response:
    """Delete a post. Only its owner may do this."""
    use_case.execute(DeletePostCommand(caller=caller, post_id=post_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
