"""Comment repository for database operations."""

from sqlalchemy import delete, select

from blog_service.models.comment import CommentDB
from blog_service.monitoring import get_logger
from blog_service.repositories.base import BaseRepository
from blog_service.utils.helpers import utc_now

logger = get_logger(__name__)


class CommentRepository(BaseRepository[CommentDB]):
    """Repository for comments, the existence-dependent children of a blog."""

    model = CommentDB

    async def create(self, *, blog_id: str, author_id: str, content: str) -> CommentDB:
        """Insert a comment on a blog."""
        comment = CommentDB(
            blog_id=blog_id,
            author_id=author_id,
            content=content,
            created_at=utc_now(),
        )
        return await self._add_and_refresh(comment)

    async def get_by_blog(self, blog_id: str) -> list[CommentDB]:
        """
        Get all comments of a blog, oldest first.

        Args:
            blog_id: Owning blog ID

        Returns:
            list[CommentDB]: Comments of the blog
        """
        query = (
            select(CommentDB)
            # pyrefly: ignore [bad-argument-type]
            .where(CommentDB.blog_id == blog_id)
            # pyrefly: ignore [bad-argument-type]
            .order_by(CommentDB.created_at, CommentDB.id)
        )
        result = await self._execute(query)
        return list(result.scalars().all())

    async def delete_by_blog(self, blog_id: str) -> int:
        """
        Delete every comment referencing a blog.

        Args:
            blog_id: Owning blog ID

        Returns:
            int: Number of comments deleted
        """
        # pyrefly: ignore [bad-argument-type]
        result = await self._execute(delete(CommentDB).where(CommentDB.blog_id == blog_id))
        deleted = result.rowcount or 0
        logger.info("comments_cascade_deleted", blog_id=blog_id, count=deleted)
        return deleted
