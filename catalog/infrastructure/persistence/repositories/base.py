"""Base repository: primary-key lookup, pagination and commit with error mapping."""

from typing import Any, Generic, TypeVar

from sqlalchemy import Select, func, inspect as sa_inspect, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog.application.dtos.pagination import page_meta
from catalog.application.interfaces.errors import AlreadyExistsError, NotFoundError
from catalog.infrastructure.persistence.database import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_pk, paginate and commit helpers.

    Subclasses map ORM rows to application DTOs; rows never leave the
    repository. Writes end with _commit() so they are durable on return.
    """

    resource_type = "resource"

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_pk(self, pk: Any, *, refresh: bool = False) -> ModelType | None:
        """Return a single record by primary key, or None.

        refresh=True reloads a row already in the session (server defaults,
        onupdate timestamps, replaced collections).
        """
        stmt = select(self.model).where(
            *(col == pk for col in sa_inspect(self.model).primary_key)
        )
        if refresh:
            stmt = stmt.execution_options(populate_existing=True)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_or_raise(self, pk: Any, *, refresh: bool = False) -> ModelType:
        """Return record by primary key. Raises NotFoundError."""
        row = await self.get_by_pk(pk, refresh=refresh)
        if row is None:
            raise NotFoundError(resource_type=self.resource_type, resource_id=pk)
        return row

    async def exists(self, model: type[Base], pk: Any) -> bool:
        """Return True if a row of model with primary key pk exists."""
        return await self.db.get(model, pk) is not None

    async def paginate(
        self, stmt: Select[Any], page: int, size: int
    ) -> tuple[list[Any], dict[str, int | bool]]:
        """Return (rows of page, Paginated field values) for stmt.

        page is 1-based; stmt must already carry its ORDER BY.
        """
        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        count = (await self.db.execute(count_stmt)).scalar_one()
        result = await self.db.execute(stmt.offset((page - 1) * size).limit(size))
        return list(result.scalars().all()), page_meta(count, page, size)

    async def _commit(self, resource_id: Any = None) -> None:
        """Commit the session; a uniqueness violation becomes AlreadyExistsError."""
        try:
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            raise AlreadyExistsError(
                str(e.orig), resource_type=self.resource_type, resource_id=resource_id
            ) from e

    async def _delete_by_pk(self, pk: Any) -> None:
        """Delete the record with primary key pk. Raises NotFoundError."""
        row = await self.get_or_raise(pk)
        await self.db.delete(row)
        await self.db.commit()
