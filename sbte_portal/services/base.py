"""Base service class with transaction management for database operations."""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, List, Optional, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from sbte_portal.exceptions import (
    DatabaseConnectionError,
    InvalidFilterError,
    RecordNotFoundError,
)
from sbte_portal.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseService(Generic[T]):
    """Shared persistence operations for one model.

    Writes commit on success. Any SQLAlchemy failure is logged, rolled back
    when it happened during a write, and re-raised as DatabaseConnectionError
    with the original exception chained as ``__cause__`` so callers can still
    tell an IntegrityError apart.

    Usage:
        class CollegeService(BaseService[College]):
            model = College

        service = CollegeService(db_session)
        college = await service.create(name="Government Polytechnic")
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    @property
    def model_name(self) -> str:
        return self.model.__name__

    @asynccontextmanager
    async def _translate_errors(
        self, action: str, *, write: bool = False, **context: Any
    ) -> AsyncIterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            if write:
                await self.db.rollback()
            logger.error(
                f"{self.model_name} {action} failed",
                extra={"model": self.model_name, "action": action, **context},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during {self.model_name} {action}"
            ) from e

    def _check_attributes(self, keys: Any, action: str) -> None:
        for key in keys:
            if not hasattr(self.model, key):
                raise InvalidFilterError(
                    f"Invalid {action} '{key}' for model {self.model_name}"
                )

    async def create(self, **kwargs: Any) -> T:
        """Insert a record and commit.

        Raises:
            DatabaseConnectionError: If the insert fails, including integrity
                constraint violations (chained as the cause).
        """
        async with self._translate_errors("create", write=True):
            instance = self.model(**kwargs)
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)
            await self.db.commit()
        logger.debug(f"Created {self.model_name}", extra={"id": instance.id})
        return instance

    async def get_by_id(self, record_id: str) -> Optional[T]:
        """Retrieve a record by its primary key, or None if absent."""
        async with self._translate_errors("get", id=record_id):
            result = await self.db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()

    async def get_by_id_or_fail(self, record_id: str) -> T:
        """Retrieve a record by ID or raise RecordNotFoundError."""
        record = await self.get_by_id(record_id)
        if record is None:
            raise RecordNotFoundError(self.model_name, record_id)
        return record

    async def get_all(self) -> List[T]:
        """Retrieve every record, oldest first."""
        async with self._translate_errors("list"):
            result = await self.db.execute(
                select(self.model).order_by(self.model.created_at)
            )
            return list(result.scalars().all())

    async def find(self, **filters: Any) -> List[T]:
        """Find records whose columns equal the given values.

        Raises:
            InvalidFilterError: If a filter key is not a model attribute.
            DatabaseConnectionError: If the query fails.
        """
        self._check_attributes(filters, "filter key")
        query = select(self.model).filter_by(**filters)
        async with self._translate_errors("find", filters=filters):
            result = await self.db.execute(query)
            return list(result.scalars().all())

    async def update(self, record_id: str, **kwargs: Any) -> T:
        """Assign attributes on an existing record and commit.

        Raises:
            RecordNotFoundError: If the record does not exist.
            InvalidFilterError: If an attribute is not on the model.
            DatabaseConnectionError: If the write fails.
        """
        self._check_attributes(kwargs, "attribute")
        record = await self.get_by_id_or_fail(record_id)
        async with self._translate_errors("update", write=True, id=record_id):
            for key, value in kwargs.items():
                setattr(record, key, value)
            await self.db.flush()
            await self.db.refresh(record)
            await self.db.commit()
        logger.debug(f"Updated {self.model_name}", extra={"id": record_id})
        return record

    async def delete(self, record_id: str) -> None:
        """Delete a record and commit.

        Raises:
            RecordNotFoundError: If the record does not exist.
            DatabaseConnectionError: If the write fails, e.g. rows still
                reference it.
        """
        record = await self.get_by_id_or_fail(record_id)
        async with self._translate_errors("delete", write=True, id=record_id):
            await self.db.delete(record)
            await self.db.commit()
        logger.debug(f"Deleted {self.model_name}", extra={"id": record_id})
