"""Tests for the blog, comment and user repositories on SQLite."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from blog_service.errors import DuplicateEntryError, NotFoundError, StoreConnectionError
from blog_service.repositories import BlogRepository, CommentRepository, UserRepository
from blog_service.utils import is_object_id

MISSING_ID = "65f1c0a2b3d4e5f601234567"
AUTHOR_ID = "507f1f77bcf86cd799439011"


async def _create_blog(repo: BlogRepository, title: str = "Title") -> str:
    blog = await repo.create(
        title=title,
        author_id=AUTHOR_ID,
        content="Body",
        photo_url=f"https://cdn.example.com/{title}.png",
        photo_asset_id=title,
    )
    return blog.id


class TestBlogRepository:
    @pytest.mark.asyncio
    async def test_create_assigns_identity_and_timestamp(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)

        blog = await repo.create(
            title="Title",
            author_id=AUTHOR_ID,
            content="Body",
            photo_url="https://cdn.example.com/a.png",
            photo_asset_id="a",
        )

        assert is_object_id(blog.id)
        assert blog.created_at is not None
        assert blog.updated_at is None

    @pytest.mark.asyncio
    async def test_get_by_id_and_get_or_raise(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)
        blog_id = await _create_blog(repo)

        found = await repo.get_by_id(blog_id)
        assert found is not None
        assert found.title == "Title"
        assert await repo.get_by_id(MISSING_ID) is None
        with pytest.raises(NotFoundError):
            await repo.get_or_raise(MISSING_ID)

    @pytest.mark.asyncio
    async def test_get_all_returns_every_blog(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)
        ids = {await _create_blog(repo, title) for title in ("a", "b", "c")}

        blogs = await repo.get_all()

        assert {blog.id for blog in blogs} == ids

    @pytest.mark.asyncio
    async def test_get_all_keeps_creation_order(
        self,
        db_session: AsyncSession,
    ) -> None:
        repo = BlogRepository(db_session)
        titles = [f"post-{index}" for index in range(8)]
        for title in titles:
            await _create_blog(repo, title)

        blogs = await repo.get_all()

        assert [blog.title for blog in blogs] == titles

    @pytest.mark.asyncio
    async def test_replace_updates_fields(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)
        blog_id = await _create_blog(repo)

        updated = await repo.replace(
            blog_id,
            title="New",
            author_id="507f1f77bcf86cd799439012",
            content="New body",
            photo_url="https://cdn.example.com/new.png",
            photo_asset_id="new",
        )

        assert updated.title == "New"
        assert updated.author_id == "507f1f77bcf86cd799439012"
        assert updated.photo_asset_id == "new"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_replace_missing_raises(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)

        with pytest.raises(NotFoundError):
            await repo.replace(
                MISSING_ID,
                title="T",
                author_id=AUTHOR_ID,
                content="C",
                photo_url="https://cdn.example.com/x.png",
                photo_asset_id=None,
            )

    @pytest.mark.asyncio
    async def test_delete(self, db_session: AsyncSession) -> None:
        repo = BlogRepository(db_session)
        blog_id = await _create_blog(repo)

        assert await repo.delete(blog_id) is True
        assert await repo.get_by_id(blog_id) is None
        assert await repo.delete(blog_id) is False

    @pytest.mark.asyncio
    async def test_driver_errors_become_store_errors(self) -> None:
        session = MagicMock(spec=AsyncSession)
        session.execute = AsyncMock(
            side_effect=OperationalError("SELECT", {}, Exception("connection refused")),
        )
        repo = BlogRepository(session)

        with pytest.raises(StoreConnectionError):
            await repo.get_by_id(MISSING_ID)

    @pytest.mark.asyncio
    async def test_commit_failure_rolls_back(self) -> None:
        session = MagicMock(spec=AsyncSession)
        session.commit = AsyncMock(
            side_effect=OperationalError("COMMIT", {}, Exception("connection lost")),
        )
        session.rollback = AsyncMock()
        repo = BlogRepository(session)

        with pytest.raises(StoreConnectionError):
            await repo.commit()

        session.rollback.assert_awaited_once()


class TestCommentRepository:
    @pytest.mark.asyncio
    async def test_create_and_list_by_blog(self, db_session: AsyncSession) -> None:
        blog_id = await _create_blog(BlogRepository(db_session))
        repo = CommentRepository(db_session)

        await repo.create(blog_id=blog_id, author_id=AUTHOR_ID, content="one")
        await repo.create(blog_id=blog_id, author_id=AUTHOR_ID, content="two")

        comments = await repo.get_by_blog(blog_id)
        assert sorted(comment.content for comment in comments) == ["one", "two"]

    @pytest.mark.asyncio
    async def test_delete_by_blog_only_touches_that_blog(self, db_session: AsyncSession) -> None:
        blogs = BlogRepository(db_session)
        first = await _create_blog(blogs, "first")
        second = await _create_blog(blogs, "second")
        repo = CommentRepository(db_session)
        for content in ("a", "b"):
            await repo.create(blog_id=first, author_id=AUTHOR_ID, content=content)
        await repo.create(blog_id=second, author_id=AUTHOR_ID, content="c")

        deleted = await repo.delete_by_blog(first)

        assert deleted == 2
        assert await repo.get_by_blog(first) == []
        assert len(await repo.get_by_blog(second)) == 1

    @pytest.mark.asyncio
    async def test_delete_by_blog_without_comments(self, db_session: AsyncSession) -> None:
        assert await CommentRepository(db_session).delete_by_blog(MISSING_ID) == 0


class TestUserRepository:
    @pytest.mark.asyncio
    async def test_create_and_get(self, db_session: AsyncSession) -> None:
        repo = UserRepository(db_session)

        user = await repo.create(name="Ada", username="ada", email="ada@example.com")

        found = await repo.get_by_id(user.id)
        assert found is not None
        assert found.username == "ada"

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, db_session: AsyncSession) -> None:
        repo = UserRepository(db_session)
        await repo.create(name="Ada", username="ada", email="ada@example.com")

        with pytest.raises(DuplicateEntryError):
            await repo.create(name="Other", username="ada", email="other@example.com")
