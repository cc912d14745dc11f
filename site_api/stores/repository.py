"""Generic record repository.

One instance per entity, owned by RecordStore. Each call runs in its own
session, so every mutation is committed before the call returns.

"Not found" is reported with None/False; faults raise StorageError.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Generic, Literal, TypeVar

from sqlalchemy import delete, inspect, select

from site_api.stores.database import Base

if TYPE_CHECKING:
    from site_api.stores.database import RecordStore

ModelT = TypeVar("ModelT", bound=Base)

logger = logging.getLogger("uvicorn.error")


class Repository(Generic[ModelT]):
    """CRUD access to one table."""

    def __init__(self, store: "RecordStore", model: type[ModelT]) -> None:
        self._store = store
        self.model = model
        self._columns = {attr.key for attr in inspect(model).column_attrs}

    def _writable(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        # Identity and creation time are owned by the store.
        return {k: v for k, v in fields.items() if k in self._columns and k not in ("id", "created_at")}

    async def insert(self, fields: Mapping[str, Any]) -> ModelT:
        """Persist a new record and return it with id (and created_at) assigned."""
        record = self.model(**self._writable(fields))
        async with self._store.session() as session:
            session.add(record)
            await session.flush()
        return record

    async def find_all(self, *, sort: Literal["newest", "oldest"] | None = None) -> list[ModelT]:
        """Return every record.

        Args:
            sort: "newest"/"oldest" orders by creation time (unique per record);
                None keeps store order.
        """
        query = select(self.model)
        if sort == "newest":
            query = query.order_by(self.model.created_at.desc(), self.model.id.desc())
        elif sort == "oldest":
            query = query.order_by(self.model.created_at.asc(), self.model.id.asc())
        async with self._store.session() as session:
            result = await session.execute(query)
            return list(result.scalars().all())

    async def find_by_id(self, record_id: str) -> ModelT | None:
        async with self._store.session() as session:
            return await session.get(self.model, record_id)

    async def update_by_id(self, record_id: str, fields: Mapping[str, Any]) -> ModelT | None:
        """Apply the given fields to a record.

        Returns:
            Updated record, or None if no record has this id.
        """
        async with self._store.session() as session:
            record = await session.get(self.model, record_id)
            if record is None:
                return None
            for key, value in self._writable(fields).items():
                setattr(record, key, value)
            await session.flush()
            return record

    async def delete_by_id(self, record_id: str) -> bool:
        """Delete a record. Returns False when nothing matched."""
        async with self._store.session() as session:
            result = await session.execute(delete(self.model).where(self.model.id == record_id))
            return result.rowcount > 0

    async def upsert_by_key(self, key: str, value: Any, fields: Mapping[str, Any]) -> ModelT:
        """Update the record whose ``key`` equals ``value``, or insert one.

        Select and write share one transaction; a unique index on ``key``
        turns a lost insert race into StorageError rather than a duplicate.
        """
        if key not in self._columns:
            raise ValueError(f"{self.model.__name__} has no column {key!r}")

        column = getattr(self.model, key)
        async with self._store.session() as session:
            result = await session.execute(select(self.model).where(column == value).limit(1))
            record = result.scalar_one_or_none()
            if record is None:
                record = self.model(**{**self._writable(fields), key: value})
                session.add(record)
                logger.debug(f"Upsert inserted {self.model.__tablename__} {key}={value!r}")
            else:
                for name, new_value in self._writable(fields).items():
                    if name != key:
                        setattr(record, name, new_value)
            await session.flush()
            return record
