"""
Response projections.

Maps database rows onto the response models. Internal-only columns such as
``photo_asset_id`` are never exposed. Pure functions, no I/O.
"""

from blog_service.models import BlogDB, CommentDB, UserDB
from blog_service.schemas import AuthorProfile, BlogDetail, BlogSummary, CommentSchema
from blog_service.utils.helpers import format_timestamp


def to_summary(blog: BlogDB) -> BlogSummary:
    """Project a blog row onto the summary shape used by create, update and listing."""
    return BlogSummary(
        id=blog.id,
        title=blog.title,
        author_id=blog.author_id,
        content=blog.content,
        photo=blog.photo_url,
        created_at=format_timestamp(blog.created_at),
        updated_at=format_timestamp(blog.updated_at),
    )


def to_author_profile(user: UserDB | None) -> AuthorProfile | None:
    if user is None:
        return None
    return AuthorProfile(id=user.id, name=user.name, username=user.username)


def to_detail(blog: BlogDB, author: UserDB | None) -> BlogDetail:
    """
    Project a blog row onto the detail shape.

    Args:
        blog: Blog database row
        author: Author row, or None if the account no longer exists

    Returns:
        BlogDetail: Summary fields plus the author profile
    """
    summary = to_summary(blog)
    return BlogDetail(**summary.model_dump(), author=to_author_profile(author))


def to_comment(comment: CommentDB) -> CommentSchema:
    return CommentSchema(
        id=comment.id,
        blog_id=comment.blog_id,
        author_id=comment.author_id,
        content=comment.content,
        created_at=format_timestamp(comment.created_at),
    )
