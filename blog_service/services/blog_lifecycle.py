"""
Blog lifecycle service.

Sequences asset store and record store calls for creating, updating and
deleting blogs. The two stores share no transaction, so each operation is
ordered to leave orphaned assets rather than records pointing at missing
photos:

- create: upload, then insert. An insert failure orphans the new asset.
- update: upload the new photo, replace and commit the record, then discard
  the old asset. Discard failures are logged and counted, never raised.
- delete: discard the asset, then delete the blog and its comments in one
  transaction. Discard failures never block record deletion.

No operation retries and none takes a per-record lock: concurrent writes to
the same blog are last-write-wins.
"""

from blog_service.configs.settings import BLOG_NOT_FOUND
from blog_service.errors import (
    InvalidAssetReferenceError,
    InvalidIdentifierError,
    NotFoundError,
    StoreError,
)
from blog_service.models import BlogDB
from blog_service.monitoring import get_logger
from blog_service.repositories import BlogRepository, CommentRepository, UserRepository
from blog_service.schemas import BlogDetail, BlogSummary
from blog_service.services.asset_codec import resolve_asset_id
from blog_service.services.assets import AssetGateway
from blog_service.services.photo import PhotoPayload
from blog_service.services.projection import to_detail, to_summary
from blog_service.utils.ids import is_object_id

logger = get_logger(__name__)


def ensure_object_id(field: str, value: str) -> None:
    """
    Reject malformed identifiers before any side effect.

    Raises:
        InvalidIdentifierError: If ``value`` is not a 24-character hex string
    """
    if not is_object_id(value):
        raise InvalidIdentifierError(field, value)


class BlogLifecycle:
    """Create, read, update and delete blogs together with their photos."""

    def __init__(
        self,
        blogs: BlogRepository,
        comments: CommentRepository,
        users: UserRepository,
        assets: AssetGateway,
    ) -> None:
        self.blogs = blogs
        self.comments = comments
        self.users = users
        self.assets = assets

    async def _load(self, blog_id: str) -> BlogDB:
        ensure_object_id("blogId", blog_id)
        blog = await self.blogs.get_by_id(blog_id)
        if blog is None:
            raise NotFoundError(detail=BLOG_NOT_FOUND)
        return blog

    def _asset_id_of(self, blog: BlogDB) -> str | None:
        """Return the asset id of a blog's photo, or None if it cannot be recovered."""
        try:
            return resolve_asset_id(blog)
        except InvalidAssetReferenceError:
            logger.warning(
                "asset_reference_unresolvable",
                blog_id=blog.id,
                photo_url=blog.photo_url,
            )
            return None

    async def create(
        self,
        *,
        title: str,
        author_id: str,
        content: str,
        photo: PhotoPayload,
    ) -> BlogSummary:
        """
        Upload the photo and insert the blog.

        Returns:
            BlogSummary: The stored blog

        Raises:
            ValidationError: If an id or the photo payload is invalid
            AssetStoreError: If the upload fails; nothing is stored
            StoreError: If the insert fails; the uploaded asset is orphaned
        """
        ensure_object_id("author", author_id)

        uploaded = await self.assets.upload(photo)

        try:
            blog = await self.blogs.create(
                title=title,
                author_id=author_id,
                content=content,
                photo_url=uploaded.access_url,
                photo_asset_id=uploaded.asset_id,
            )
            await self.blogs.commit()
        except StoreError as e:
            logger.warning(
                "asset_orphaned",
                asset_id=uploaded.asset_id,
                operation="create",
                error=e.detail,
            )
            raise

        logger.info("blog_created", blog_id=blog.id, author_id=author_id)
        return to_summary(blog)

    async def get_all(self) -> list[BlogSummary]:
        """Return every blog in insertion order."""
        return [to_summary(blog) for blog in await self.blogs.get_all()]

    async def get_by_id(self, blog_id: str) -> BlogDetail:
        """
        Return a blog with its author expanded.

        Raises:
            NotFoundError: If the blog does not exist
        """
        blog = await self._load(blog_id)
        author = await self.users.get_by_id(blog.author_id)
        return to_detail(blog, author)

    async def update(
        self,
        blog_id: str,
        *,
        title: str,
        author_id: str,
        content: str,
        photo: PhotoPayload | None = None,
    ) -> BlogSummary:
        """
        Replace a blog's fields, and its photo when one is supplied.

        Args:
            blog_id: Blog to update
            title: New title
            author_id: New author ID
            content: New content
            photo: New photo payload; the current photo is kept when None

        Returns:
            BlogSummary: The updated blog

        Raises:
            NotFoundError: If the blog does not exist
            ValidationError: If an id or the photo payload is invalid
            AssetStoreError: If the new photo cannot be uploaded; nothing changes
            StoreError: If the replace fails
        """
        ensure_object_id("author", author_id)
        existing = await self._load(blog_id)

        if photo is None:
            updated = await self.blogs.replace(
                blog_id,
                title=title,
                author_id=author_id,
                content=content,
                photo_url=existing.photo_url,
                photo_asset_id=existing.photo_asset_id,
            )
            await self.blogs.commit()
            logger.info("blog_updated", blog_id=blog_id, photo_replaced=False)
            return to_summary(updated)

        # Resolved before the replace mutates the row
        old_asset_id = self._asset_id_of(existing)

        uploaded = await self.assets.upload(photo)

        try:
            updated = await self.blogs.replace(
                blog_id,
                title=title,
                author_id=author_id,
                content=content,
                photo_url=uploaded.access_url,
                photo_asset_id=uploaded.asset_id,
            )
            await self.blogs.commit()
        except StoreError as e:
            logger.warning(
                "asset_orphaned",
                asset_id=uploaded.asset_id,
                blog_id=blog_id,
                operation="update",
                error=e.detail,
            )
            raise

        if old_asset_id is not None:
            await self.assets.discard(old_asset_id, blog_id=blog_id, operation="update")

        logger.info("blog_updated", blog_id=blog_id, photo_replaced=True)
        return to_summary(updated)

    async def delete(self, blog_id: str) -> None:
        """
        Delete a blog, its photo and all of its comments.

        The photo removal is best effort. The blog and its comments are
        deleted in one transaction.

        Raises:
            NotFoundError: If the blog does not exist; nothing is changed
            StoreError: If the record deletion fails
        """
        existing = await self._load(blog_id)

        asset_id = self._asset_id_of(existing)
        if asset_id is not None:
            await self.assets.discard(asset_id, blog_id=blog_id, operation="delete")

        await self.blogs.delete(blog_id)
        removed_comments = await self.comments.delete_by_blog(blog_id)
        await self.blogs.commit()

        logger.info("blog_deleted", blog_id=blog_id, comments_deleted=removed_comments)
