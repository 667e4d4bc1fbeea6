"""User repository for database operations."""

from blog_service.models.user import UserDB
from blog_service.repositories.base import BaseRepository


class UserRepository(BaseRepository[UserDB]):
    """Read access to user accounts, used to expand blog authors."""

    model = UserDB

    async def create(self, *, name: str, username: str, email: str) -> UserDB:
        """Insert a user account (seeding and tests; registration lives elsewhere)."""
        return await self._add_and_refresh(UserDB(name=name, username=username, email=email))
