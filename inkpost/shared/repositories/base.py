"""
Base Repository

Generic repository with the CRUD operations every entity shares.
Entity-specific repositories inherit from this class.

What This Provides:
===================
- get(id)        → Fetch single record by primary key
- list()         → List records with pagination, equality filters, ordering
- exists()       → Check if record exists
- create()       → Create new record
- update()       → Partial update of an existing record
- delete()       → Hard delete record

Generic Type Pattern:
=====================
    class BlogRepository(BaseRepository[Blog]):
        pass

    repo = BlogRepository(db)
    blog = await repo.get(42)  # Returns Blog, not Any

Primary keys are UUIDs for users and serial integers for blogs, comments and
saved blogs, so ids are typed as `RecordId`.

flush() vs commit():
====================
Repository methods only flush(). The transaction is committed by get_db()
after the request handler completes (or by the worker after each event), so
a failure anywhere in the request rolls back every write it made.
"""

from typing import Any, Generic, Optional, Type, TypeVar, Union
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.functions import count as sql_count

from inkpost.shared.models.base import Base


ModelType = TypeVar("ModelType", bound=Base)
RecordId = Union[int, UUID]

# Serial primary keys are Postgres INTEGER columns
MAX_SERIAL_ID = 2_147_483_647


def is_storable_id(record_id: RecordId) -> bool:
    """
    Whether an id can be bound against its primary key column at all.

    Integers outside the INTEGER range cannot name any row, and asyncpg
    refuses to encode them, so callers treat them as not found.
    """
    if isinstance(record_id, int):
        return -MAX_SERIAL_ID - 1 <= record_id <= MAX_SERIAL_ID
    return True


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameter:
        ModelType: The SQLAlchemy model class this repository manages

    Attributes:
        model: The SQLAlchemy model class
        session: The async database session
    """

    def __init__(self, model: Type[ModelType], session: AsyncSession) -> None:
        """
        Initialize the repository.

        Args:
            model: SQLAlchemy model class (e.g., User, Blog)
            session: Async database session from get_db()
        """
        self.model = model
        self.session = session

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get(self, record_id: RecordId) -> Optional[ModelType]:
        """
        Get a single record by its primary key.

        Args:
            record_id: The id of the record to fetch

        Returns:
            The model instance if found, None otherwise

        SQL Generated:
            SELECT * FROM blogs WHERE id = 42
        """
        if not is_storable_id(record_id):
            return None
        result = await self.session.execute(select(self.model).where(self.model.id == record_id))
        return result.scalar_one_or_none()

    async def list(
        self,
        *,
        offset: int = 0,
        limit: Optional[int] = 100,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        order_desc: bool = True,
    ) -> list[ModelType]:
        """
        List records with pagination and optional filtering.

        Args:
            offset: Number of records to skip
            limit: Maximum records to return (None = no limit)
            filters: Dict of field=value for WHERE clauses
            order_by: Field name to order results by
            order_desc: If True, order descending; if False, ascending

        Returns:
            List of model instances

        SQL Generated:
            SELECT * FROM comments WHERE blog_id = 42
            ORDER BY created_at DESC, id DESC
        """
        query = select(self.model)

        if filters:
            for field, value in filters.items():
                if hasattr(self.model, field):
                    query = query.where(getattr(self.model, field) == value)

        if order_by and hasattr(self.model, order_by):
            order_field = getattr(self.model, order_by)
            # id breaks ties between rows created in the same instant
            if order_desc:
                query = query.order_by(order_field.desc(), self.model.id.desc())
            else:
                query = query.order_by(order_field, self.model.id)

        query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def exists(self, record_id: RecordId) -> bool:
        """
        Check if a record exists without loading it.

        Args:
            record_id: The id to check

        Returns:
            True if record exists, False otherwise
        """
        if not is_storable_id(record_id):
            return False
        result = await self.session.execute(
            select(sql_count()).select_from(self.model).where(self.model.id == record_id)
        )
        return (result.scalar() or 0) > 0

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create(self, **kwargs: Any) -> ModelType:
        """
        Create a new record.

        Flushes to get the generated id, then refreshes to load
        server defaults such as created_at.

        Args:
            **kwargs: Field values for the new record

        Returns:
            The created model instance with all DB-generated values
        """
        instance = self.model(**kwargs)
        self.session.add(instance)
        await self.session.flush()
        await self.session.refresh(instance)
        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # UPDATE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def update(
        self,
        record_id: RecordId,
        **kwargs: Any,
    ) -> Optional[ModelType]:
        """
        Update a record by id.

        Only fields that are provided and not None are written, which is what
        the partial-update endpoints need.

        Args:
            record_id: id of the record to update
            **kwargs: Fields to update (None values are ignored)

        Returns:
            Updated model instance, or None if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return None

        for field, value in kwargs.items():
            if hasattr(instance, field) and value is not None:
                setattr(instance, field, value)

        await self.session.flush()
        await self.session.refresh(instance)

        return instance

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete(self, record_id: RecordId) -> bool:
        """
        Hard delete a record by id.

        Args:
            record_id: id of the record to delete

        Returns:
            True if deleted, False if not found
        """
        instance = await self.get(record_id)
        if not instance:
            return False

        await self.session.delete(instance)
        await self.session.flush()
        return True
