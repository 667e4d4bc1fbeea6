"""Comment service: create and list the comments of a blog."""

from blog_service.configs.settings import BLOG_NOT_FOUND
from blog_service.errors import NotFoundError
from blog_service.monitoring import get_logger
from blog_service.repositories import BlogRepository, CommentRepository
from blog_service.schemas import CommentSchema
from blog_service.services.blog_lifecycle import ensure_object_id
from blog_service.services.projection import to_comment

logger = get_logger(__name__)


class CommentService:
    """Comments exist only while their blog exists."""

    def __init__(self, blogs: BlogRepository, comments: CommentRepository) -> None:
        self.blogs = blogs
        self.comments = comments

    async def _ensure_blog(self, blog_id: str) -> None:
        ensure_object_id("blogId", blog_id)
        if await self.blogs.get_by_id(blog_id) is None:
            raise NotFoundError(detail=BLOG_NOT_FOUND)

    async def create(self, *, blog_id: str, author_id: str, content: str) -> CommentSchema:
        """
        Add a comment to an existing blog.

        Raises:
            NotFoundError: If the blog does not exist
            StoreError: If the insert fails
        """
        ensure_object_id("author", author_id)
        await self._ensure_blog(blog_id)

        comment = await self.comments.create(blog_id=blog_id, author_id=author_id, content=content)
        await self.comments.commit()

        logger.info("comment_created", comment_id=comment.id, blog_id=blog_id)
        return to_comment(comment)

    async def list_for_blog(self, blog_id: str) -> list[CommentSchema]:
        """Return the comments of a blog, oldest first."""
        await self._ensure_blog(blog_id)
        return [to_comment(comment) for comment in await self.comments.get_by_blog(blog_id)]
