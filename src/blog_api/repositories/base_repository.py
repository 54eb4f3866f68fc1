"""
Base repository class providing the raw storage operations.

This class is the thin layer directly on top of SQLAlchemy's async session. It
provides the operation set the storage adapter consumes:

    insert (create), select-all (get_all), select-by-id (get_by_id),
    select-by-field (find_by_field), coalescing update (update), delete (delete)

It deliberately does NOT translate errors. Driver/ORM exceptions (IntegrityError,
OperationalError, NoResultFound, ...) propagate unchanged so that the storage adapter
(`PostRepository`) can classify them while the specific signal is still available.
Rollback on failure is also the adapter's job (see `storage_error_handler`).

Unlike abstract base classes, `BaseRepository` does not enforce any required methods;
model-specific adapters compose it and add their own semantics.
"""
import time
from typing import TypeVar, Generic, Type, Any
from uuid import UUID
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, update, delete, func, bindparam
from sqlalchemy.exc import NoResultFound
import logging

from blog_api.database.base import Base
from blog_api.validators.model_validators import validate_model_kwargs

# Type variable for the model class
ModelType = TypeVar("ModelType", bound=Base)

# Setup logging
logger = logging.getLogger(__name__)


class BaseRepository(Generic[ModelType]):
    """
    Generic base repository providing common CRUD operations.

    Type Parameters:
        ModelType: The SQLAlchemy model class this repository manages.
    """

    def __init__(self, model: Type[ModelType], db: AsyncSession):
        """
        Initialize the repository.

        Args:
            model: The SQLAlchemy model class (e.g. PostModel, not PostModel())
            db: The async database session (usually injected via a FastAPI dependency)
        """
        self.model = model
        self.db = db

    def _check_fields(self, kwargs: dict, *, insert: bool = False) -> None:
        validate_model_kwargs(self.model, kwargs, insert=insert)

    # =================================================================================================================
    # Create
    # =================================================================================================================

    async def create(self, **kwargs) -> ModelType:
        """
        Insert a new row and return it with DB-generated fields populated.

        Raises:
            ValueError: unknown or missing required fields (caller bug, not a DB error).
            IntegrityError: constraint violation reported by the database.
        """
        logger.debug(
            "repo.create.start",
            extra={
                "model": self.model.__name__,
                "operation": "create",
                # list keys only (avoids logging values)
                "provided_keys": sorted(kwargs.keys()),
            },
        )

        self._check_fields(kwargs, insert=True)

        start = time.perf_counter()

        entity = self.model(**kwargs)
        self.db.add(entity)
        # flush() sends the INSERT inside the current transaction (no commit) so
        # constraint violations surface here; refresh() loads server defaults (created_at).
        await self.db.flush()
        await self.db.refresh(entity)

        logger.debug(
            "repo.create.success",
            extra={
                "model": self.model.__name__,
                "operation": "create",
                "id": getattr(entity, "id", None),
                "duration_ms": int((time.perf_counter() - start) * 1000),
            },
        )
        # No commit here: the request-scoped session dependency commits once the endpoint succeeds
        return entity

    # =================================================================================================================
    # Read (single entity)
    # =================================================================================================================

    async def get_by_id(self, entity_id: UUID) -> ModelType | None:
        """
        Get an entity by its ID, or None if no row matches.
        """
        # populate_existing: overwrite any stale copy already held in the session's identity map
        result = await self.db.execute(
            select(self.model)
            .where(self.model.id == entity_id)
            .execution_options(populate_existing=True)
        )
        entity = result.scalar_one_or_none()
        logger.debug(f"Retrieved {self.model.__name__} by ID: {entity_id} (found={entity is not None})")
        return entity

    async def get_by_id_or_raise(self, entity_id: UUID) -> ModelType:
        """
        Get an entity by its ID.

        Raises:
            NoResultFound: If no row has this ID.
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NoResultFound(f"{self.model.__name__} with ID {entity_id} not found")
        return entity

    async def find_by_field(self, field: str, value: Any) -> ModelType | None:
        """
        Find a single entity by any (unique) field.

        Raises:
            ValueError: If the field does not exist on the model.
            MultipleResultsFound: If the field is not unique and several rows match.
        """
        self._check_fields({field: value})

        result = await self.db.execute(
            select(self.model).where(getattr(self.model, field) == value)
        )
        entity = result.scalar_one_or_none()
        logger.debug(f"Found {self.model.__name__} by {field} (found={entity is not None})")
        return entity

    async def find_by_field_or_raise(self, field: str, value: Any) -> ModelType:
        """
        Raises:
            NoResultFound: If no row matches.
        """
        entity = await self.find_by_field(field, value)
        if entity is None:
            raise NoResultFound(f"{self.model.__name__} with {field} not found")
        return entity

    # =================================================================================================================
    # Read (multiple entities)
    # =================================================================================================================

    async def get_all(self, order_by: str | None = None) -> list[ModelType]:
        """
        Get all entities (full scan, no paging).

        Args:
            order_by: Field name to order results by (ascending). Defaults to 'created_at' DESC if present.
        """
        query = select(self.model)

        if order_by:
            if hasattr(self.model, order_by):
                query = query.order_by(getattr(self.model, order_by))
            else:
                logger.warning(
                    f"Ignored invalid 'order_by' field: '{order_by}' does not exist on {self.model.__name__}")
        elif hasattr(self.model, "created_at"):
            # newest first; id as tie-breaker for rows created within the same clock tick
            query = query.order_by(self.model.created_at.desc(), self.model.id)

        result = await self.db.execute(query)
        entities = list(result.scalars().all())
        logger.debug(f"Retrieved {len(entities)} {self.model.__name__} entities")
        return entities

    # =================================================================================================================
    # Update
    # =================================================================================================================

    async def update(self, entity_id: UUID, **kwargs) -> ModelType | None:
        """
        Partially update an entity by its ID.

        Each provided column is set to COALESCE(:new_value, column): a None value keeps
        the stored one. The merge happens in SQL, so the statement never needs the
        current row to be loaded first.

        Returns:
            The updated entity, or None if no row has this ID.

        Raises:
            ValueError: unknown fields.
            IntegrityError: if the update violates a constraint.
        """
        self._check_fields(kwargs)

        columns = self.model.__table__.c
        values = {
            key: func.coalesce(bindparam(f"new_{key}", value, type_=columns[key].type), columns[key])
            for key, value in kwargs.items()
        }

        if not values:
            logger.debug(f"No fields provided for updating {self.model.__name__}; returning current row")
            return await self.get_by_id(entity_id)

        stmt = (
            update(self.model)
            .where(self.model.id == entity_id)
            .values(values)
            .execution_options(synchronize_session=False)
        )
        result = await self.db.execute(stmt)

        # rowcount == 0 means no row with this ID
        if result.rowcount == 0:
            logger.debug(f"{self.model.__name__} with ID {entity_id} not found for update")
            return None

        # Reload so server-side values (and the coalesced columns) are current
        updated_entity = await self.get_by_id(entity_id)
        logger.debug(f"Updated {self.model.__name__} with ID: {entity_id}")
        return updated_entity

    # =================================================================================================================
    # Delete
    # =================================================================================================================

    async def delete(self, entity_id: UUID) -> bool:
        """
        Delete an entity by its ID.

        Returns:
            True if a row was deleted, False if none matched (deletion is idempotent).
        """
        result = await self.db.execute(delete(self.model).where(self.model.id == entity_id))
        deleted = result.rowcount > 0
        logger.debug(f"Deleted {self.model.__name__} with ID {entity_id}: {deleted}")
        return deleted
