"""News post and SG note admin routes."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from confsite.api.deps import CurrentUser, DBSession
from confsite.api.errors import not_found
from confsite.models import Post, PostType
from confsite.schemas.post import PostCreate, PostResponse, PostUpdate
from confsite.services.post_service import PostService

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostResponse])
async def list_posts(
    current_user: CurrentUser,
    db: DBSession,
    type: PostType | None = Query(None, description="Filter by post type"),
) -> list[Post]:
    """List posts, newest first."""
    return await PostService(db).list_posts(type)


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(data: PostCreate, current_user: CurrentUser, db: DBSession) -> Post:
    return await PostService(db).create(data)


@router.get("/{post_id}", response_model=PostResponse)
async def get_post(post_id: UUID, current_user: CurrentUser, db: DBSession) -> Post:
    post = await PostService(db).get_by_id(post_id)
    if not post:
        raise not_found("Post")
    return post


@router.put("/{post_id}", response_model=PostResponse)
async def update_post(
    post_id: UUID,
    data: PostUpdate,
    current_user: CurrentUser,
    db: DBSession,
) -> Post:
    post = await PostService(db).update(post_id, data)
    if not post:
        raise not_found("Post")
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(post_id: UUID, current_user: CurrentUser, db: DBSession) -> None:
    deleted = await PostService(db).delete(post_id)
    if not deleted:
        raise not_found("Post")
