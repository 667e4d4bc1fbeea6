"""Base repository for database operations."""

from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import Result
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.base import Executable
from sqlmodel import SQLModel

from blog_service.errors.database import (
    DuplicateEntryError,
    NotFoundError,
    StoreConnectionError,
    StoreError,
)


class BaseRepository[ModelT: SQLModel]:
    """
    Base repository implementing common CRUD operations.

    Every database call goes through ``_execute`` or ``_add_and_refresh`` so
    driver and constraint failures always surface as ``StoreError``.

    Attributes:
        model: The SQLModel database model type.
        id_field: The name of the primary key field (default: "id").
    """

    model: type[ModelT]
    id_field: str = "id"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def get_by_id(self, record_id: str) -> ModelT | None:
        """
        Get a record by its ID.

        Args:
            record_id: Record ID

        Returns:
            ModelT | None: Record if found, None otherwise
        """
        id_column = getattr(self.model, self.id_field)
        result = await self._execute(select(self.model).where(id_column == record_id))
        return result.scalar_one_or_none()

    async def get_or_raise(self, record_id: str) -> ModelT:
        """
        Get a record by ID or raise an exception if not found.

        Raises:
            NotFoundError: If record is not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            raise NotFoundError(
                detail=f"{self.model.__name__} with ID {record_id} not found",
            )
        return record

    async def delete(self, record_id: str) -> bool:
        """
        Delete a record by ID.

        Args:
            record_id: Record ID

        Returns:
            bool: True if record was deleted, False if not found
        """
        record = await self.get_by_id(record_id)
        if record is None:
            return False

        try:
            await self.session.delete(record)
            await self.session.flush()
        except SQLAlchemyError as e:
            raise StoreError(detail=f"Failed to delete record: {e}") from e
        return True

    async def commit(self) -> None:
        """Make all pending writes of the session durable."""
        try:
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreConnectionError(detail=f"Failed to commit transaction: {e}") from e

    async def _execute(self, statement: Executable) -> Result[Any]:
        """Execute a statement, translating driver errors into ``StoreError``."""
        try:
            return await self.session.execute(statement)
        except IntegrityError as e:
            raise StoreError(detail=f"Database integrity error: {e.orig or e}") from e
        except SQLAlchemyError as e:
            raise StoreConnectionError(detail=f"Database query failed: {e}") from e

    async def _add_and_refresh(self, record: ModelT) -> ModelT:
        """
        Add a record and refresh it from the database with error handling.

        Args:
            record: Record to add

        Returns:
            ModelT: Refreshed record

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            StoreError: For other database errors
        """
        try:
            self.session.add(record)
            await self.session.flush()
            await self.session.refresh(record)
            return record
        except IntegrityError as e:
            await self.session.rollback()
            error_msg = str(e.orig) if e.orig else str(e)
            if "unique" in error_msg.lower() or "duplicate" in error_msg.lower():
                raise DuplicateEntryError(detail=error_msg) from e
            raise StoreError(detail=f"Database integrity error: {error_msg}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StoreConnectionError(detail=f"Failed to save record: {e}") from e
