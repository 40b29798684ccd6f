"""Service for news posts and SG notes."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from confsite.models import Post, PostType
from confsite.schemas.post import PostCreate, PostUpdate


class PostService:
    """Service for post CRUD operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_posts(self, post_type: PostType | None = None) -> list[Post]:
        """List posts newest first, optionally of one type."""
        query = select(Post).order_by(Post.created_at.desc(), Post.id)
        if post_type:
            query = query.where(Post.type == post_type)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_by_id(self, post_id: UUID, post_type: PostType | None = None) -> Post | None:
        query = select(Post).where(Post.id == post_id)
        if post_type:
            query = query.where(Post.type == post_type)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, data: PostCreate) -> Post:
        post = Post(**data.model_dump())
        self.db.add(post)
        await self.db.flush()
        await self.db.refresh(post)
        return post

    async def update(self, post_id: UUID, data: PostUpdate) -> Post | None:
        post = await self.get_by_id(post_id)
        if not post:
            return None

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(post, field, value)

        await self.db.flush()
        await self.db.refresh(post)
        return post

    async def delete(self, post_id: UUID) -> bool:
        post = await self.get_by_id(post_id)
        if not post:
            return False

        await self.db.delete(post)
        await self.db.flush()
        return True
