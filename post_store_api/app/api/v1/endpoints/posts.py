"""
Post endpoints for API v1.

These routes expose a CRUD API over the in-memory post store, plus an
endpoint for appending comments to a post.  Failures are answered as
``{"message": ...}`` objects by the error handler registered in
``main.create_app``.  The list and create routes answer both
``/posts`` and ``/posts/`` without a redirect.  The
``/category/{category}`` route is declared before ``/{post_id}`` so
that it is not captured as a post id.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response, status

from post_store_api.app.core.errors import PostNotFoundError
from post_store_api.app.schemas.post import Comment, CommentCreate, Post, PostCreate, PostUpdate
from post_store_api.app.services.post_service import PostService

router = APIRouter()


def get_post_service(request: Request) -> PostService:
    """Return the store owned by the running application."""
    return request.app.state.post_service


@router.get("", response_model=List[Post], include_in_schema=False)
@router.get("/", response_model=List[Post])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[Post]:
    """Return every post in insertion order."""
    return service.list_posts()


@router.get("/category/{category}", response_model=List[Post])
async def list_posts_by_category(
    category: str,
    service: PostService = Depends(get_post_service),
) -> List[Post]:
    """Return posts whose category matches exactly.

    An unknown category is not an error; the list is simply empty.
    """
    return service.list_posts_by_category(category)


@router.get("/{post_id}", response_model=Post)
async def get_post(post_id: str, service: PostService = Depends(get_post_service)) -> Post:
    post = service.get_post(post_id)
    if post is None:
        raise PostNotFoundError()
    return post


@router.post("", response_model=Post, status_code=status.HTTP_201_CREATED, include_in_schema=False)
@router.post("/", response_model=Post, status_code=status.HTTP_201_CREATED)
async def create_post(
    data: Optional[PostCreate] = None,
    service: PostService = Depends(get_post_service),
) -> Post:
    """Create a post.

    ``title``, ``image``, ``description``, ``category`` and ``comments``
    are all required; ``comments`` may be an empty list.
    """
    return service.create_post(data)


@router.post("/{post_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def add_comment(
    post_id: str,
    data: Optional[CommentCreate] = None,
    service: PostService = Depends(get_post_service),
) -> Comment:
    """Append a comment to a post and return the comment alone."""
    comment = service.add_comment(post_id, data)
    if comment is None:
        raise PostNotFoundError()
    return comment


@router.patch("/{post_id}", response_model=Post)
async def update_post(
    post_id: str,
    data: Optional[PostUpdate] = None,
    service: PostService = Depends(get_post_service),
) -> Post:
    """Partially update a post.  Falsy values are ignored."""
    post = service.update_post(post_id, data)
    if post is None:
        raise PostNotFoundError()
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_post(post_id: str, service: PostService = Depends(get_post_service)) -> Response:
    deleted = service.delete_post(post_id)
    if not deleted:
        raise PostNotFoundError()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
