"""
Shared persistence helpers for the services.

``RowCodec`` converts between schema values and SQLite columns.
Columns listed in ``json_columns`` hold nested lists or objects and
are stored as JSON text.  Columns listed in ``bool_columns`` are
stored as 0/1 integers.  ``required_columns`` may not be set to
``NULL`` by an update.  Both ``CountryService`` and
``CountryRecordService`` build on it.

Timeline events, leaders, political systems, parties, relations, laws,
statistics and economic data are all flat rows with an ``id``, a
``country_id`` and a set of entity columns.  ``CountryRecordService``
implements list/get/create/update/delete once; each domain service
subclasses it and declares its table, columns and schemas.
"""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Type

from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel

from country_atlas_api.app.core.db import decode_json, encode_json, get_cursor


class RowCodec:
    """Column conversion and partial-update helpers for one table."""

    table: str = ""
    object_type: str = "record"
    columns: Tuple[str, ...] = ()
    json_columns: FrozenSet[str] = frozenset()
    bool_columns: FrozenSet[str] = frozenset()
    required_columns: FrozenSet[str] = frozenset()
    read_schema: Type[BaseModel] = BaseModel

    @classmethod
    def _to_column(cls, column: str, value: Any) -> Any:
        """Convert a schema value into its stored representation."""
        if column in cls.json_columns:
            return encode_json(jsonable_encoder(value))
        if column in cls.bool_columns:
            return None if value is None else int(value)
        return value

    @classmethod
    def _from_row(cls, row: sqlite3.Row) -> Dict[str, Any]:
        """Decode a row into a dict keyed by attribute name."""
        record = dict(row)
        for column in cls.json_columns:
            record[column] = decode_json(record.get(column))
        for column in cls.bool_columns:
            if record.get(column) is not None:
                record[column] = bool(record[column])
        return record

    @classmethod
    def _row_to_read(cls, row: sqlite3.Row) -> BaseModel:
        return cls.read_schema.model_validate(cls._from_row(row))

    @classmethod
    def _public_name(cls, column: str) -> str:
        field = cls.read_schema.model_fields.get(column)
        return field.alias if field is not None and field.alias else column

    @classmethod
    def _provided_columns(cls, data: BaseModel) -> List[str]:
        """Columns present in a PATCH body.

        Raises ``ValueError`` when one of them is a required column set
        to ``null``.
        """
        provided = [column for column in cls.columns if column in data.model_fields_set]
        for column in provided:
            if column in cls.required_columns and getattr(data, column) is None:
                raise ValueError(f"{cls._public_name(column)} cannot be null")
        return provided

    @classmethod
    def _write_columns(
        cls,
        cursor: sqlite3.Cursor,
        record_id: int,
        data: BaseModel,
        provided: List[str],
    ) -> None:
        if not provided:
            return
        assignments = ", ".join(f"{column} = ?" for column in provided)
        values = [cls._to_column(column, getattr(data, column)) for column in provided]
        cursor.execute(
            f"UPDATE {cls.table} SET {assignments} WHERE id = ?",
            values + [record_id],
        )
        logging.getLogger(__name__).info(
            "Updated %s %s (%s)", cls.object_type, record_id, ", ".join(provided)
        )


class CountryRecordService(RowCodec):
    """Base service for tables keyed by ``id`` with a ``country_id`` column."""

    @classmethod
    async def list_for_country(cls, country_id: int) -> List[BaseModel]:
        """Return every record of ``country_id`` ordered by id.

        An unknown country simply yields an empty list.
        """
        with get_cursor() as cursor:
            rows = cursor.execute(
                f"SELECT * FROM {cls.table} WHERE country_id = ? ORDER BY id ASC",
                (country_id,),
            ).fetchall()
            return [cls._row_to_read(row) for row in rows]

    @classmethod
    async def get_for_country(cls, country_id: int) -> Optional[BaseModel]:
        """Return the oldest record of ``country_id`` or ``None``.

        Used for one-per-country entities (political system, economy).
        """
        with get_cursor() as cursor:
            row = cursor.execute(
                f"SELECT * FROM {cls.table} WHERE country_id = ? ORDER BY id ASC LIMIT 1",
                (country_id,),
            ).fetchone()
            return cls._row_to_read(row) if row else None

    @classmethod
    async def get(cls, record_id: int, country_id: Optional[int] = None) -> Optional[BaseModel]:
        """Retrieve a record by id.

        When ``country_id`` is given, a record belonging to another
        country is treated as missing.
        """
        with get_cursor() as cursor:
            row = cls._fetch(cursor, record_id, country_id)
            return cls._row_to_read(row) if row else None

    @classmethod
    async def create(cls, country_id: int, data: BaseModel) -> BaseModel:
        """Insert a record for ``country_id`` and return it.

        The country's existence is checked by the caller.
        """
        logger = logging.getLogger(__name__)
        columns = ("country_id",) + cls.columns
        values = [country_id] + [cls._to_column(column, getattr(data, column)) for column in cls.columns]
        placeholders = ", ".join("?" for _ in columns)
        with get_cursor() as cursor:
            cursor.execute(
                f"INSERT INTO {cls.table} ({', '.join(columns)}) VALUES ({placeholders})",
                values,
            )
            record_id = cursor.lastrowid
            logger.info("Created %s %s for country %s", cls.object_type, record_id, country_id)
            row = cls._fetch(cursor, record_id)
            return cls._row_to_read(row)

    @classmethod
    async def update(
        cls,
        record_id: int,
        data: BaseModel,
        country_id: Optional[int] = None,
    ) -> Optional[BaseModel]:
        """Apply a partial update and return the updated record.

        Only fields present in the request body are written; an explicit
        ``null`` clears the column.  Returns ``None`` when the record does
        not exist.  Raises ``ValueError`` when a required column would be
        cleared.
        """
        provided = cls._provided_columns(data)
        with get_cursor() as cursor:
            if cls._fetch(cursor, record_id, country_id) is None:
                return None
            cls._write_columns(cursor, record_id, data, provided)
            row = cls._fetch(cursor, record_id)
            return cls._row_to_read(row)

    @classmethod
    async def delete(cls, record_id: int, country_id: Optional[int] = None) -> bool:
        """Delete a record by id.

        Returns ``True`` if a record was deleted, ``False`` otherwise.
        """
        logger = logging.getLogger(__name__)
        query = f"DELETE FROM {cls.table} WHERE id = ?"
        params: List[Any] = [record_id]
        if country_id is not None:
            query += " AND country_id = ?"
            params.append(country_id)
        with get_cursor() as cursor:
            cursor.execute(query, params)
            affected = cursor.rowcount
        if affected:
            logger.info("Deleted %s %s", cls.object_type, record_id)
        return affected > 0

    @classmethod
    def _fetch(
        cls,
        cursor: sqlite3.Cursor,
        record_id: int,
        country_id: Optional[int] = None,
    ) -> Optional[sqlite3.Row]:
        query = f"SELECT * FROM {cls.table} WHERE id = ?"
        params: List[Any] = [record_id]
        if country_id is not None:
            query += " AND country_id = ?"
            params.append(country_id)
        return cursor.execute(query, params).fetchone()
