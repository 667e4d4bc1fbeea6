"""Blog repository for database operations."""

from sqlalchemy import select

from blog_service.errors.database import NotFoundError
from blog_service.models.blog import BlogDB
from blog_service.monitoring import get_logger
from blog_service.repositories.base import BaseRepository
from blog_service.utils.helpers import utc_now

logger = get_logger(__name__)


class BlogRepository(BaseRepository[BlogDB]):
    """
    Repository for Blog database operations.

    Writes are flushed, not committed: the surrounding transaction decides
    when they become durable unless ``commit`` is called explicitly.
    """

    model = BlogDB

    async def get_all(self) -> list[BlogDB]:
        """
        Get all blogs in insertion order.

        Returns:
            list[BlogDB]: List of blogs
        """
        # pyrefly: ignore [bad-argument-type]
        query = select(BlogDB).order_by(BlogDB.created_at, BlogDB.id)
        result = await self._execute(query)
        return list(result.scalars().all())

    async def create(
        self,
        *,
        title: str,
        author_id: str,
        content: str,
        photo_url: str,
        photo_asset_id: str | None,
    ) -> BlogDB:
        """
        Insert a new blog post; identity and creation time are assigned here.

        Returns:
            BlogDB: Created blog database model

        Raises:
            StoreError: If the insert fails
        """
        db_blog = BlogDB(
            author_id=author_id,
            title=title,
            content=content,
            photo_url=photo_url,
            photo_asset_id=photo_asset_id,
            created_at=utc_now(),
        )
        db_blog = await self._add_and_refresh(db_blog)
        logger.info("blog_inserted", blog_id=db_blog.id, author_id=author_id)
        return db_blog

    async def replace(
        self,
        blog_id: str,
        *,
        title: str,
        author_id: str,
        content: str,
        photo_url: str,
        photo_asset_id: str | None,
    ) -> BlogDB:
        """
        Replace the mutable fields of a blog in a single write.

        Args:
            blog_id: Blog ID

        Returns:
            BlogDB: Updated blog

        Raises:
            NotFoundError: If the blog does not exist
            StoreError: If the write fails
        """
        db_blog = await self.get_by_id(blog_id)
        if db_blog is None:
            raise NotFoundError(detail=f"Blog with ID {blog_id} not found")

        db_blog.title = title
        db_blog.author_id = author_id
        db_blog.content = content
        db_blog.photo_url = photo_url
        db_blog.photo_asset_id = photo_asset_id
        db_blog.updated_at = utc_now()

        return await self._add_and_refresh(db_blog)
