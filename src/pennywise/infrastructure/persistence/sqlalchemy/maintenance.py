"""Database maintenance: default categories, JSON backup and restore."""

from __future__ import annotations

import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from sqlalchemy import Date, DateTime, Numeric, Table, func, insert, select, text
from sqlalchemy.ext.asyncio import AsyncSession

from pennywise.infrastructure.persistence.sqlalchemy.models import Base, CategoryModel

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = (
    "Housing",
    "Transport",
    "Food",
    "Health",
    "Insurance",
    "Family",
    "Leisure",
    "Travel",
    "Clothing",
    "Subscriptions",
    "Taxes",
    "Savings",
    "Loans",
    "Donations",
    "Unexpected",
    "Other",
)

BackupData = dict[str, list[dict[str, Any]]]


async def seed_categories(session: AsyncSession) -> int:
    """
    Insert the default categories that are not present yet.

    Returns
    -------
    Number of categories inserted
    """
    result = await session.execute(select(CategoryModel.name))
    existing = set(result.scalars().all())

    missing = [name for name in DEFAULT_CATEGORIES if name not in existing]
    session.add_all(CategoryModel(name=name) for name in missing)
    await session.flush()

    logger.info("Seeded %d default categories", len(missing))
    return len(missing)


def _to_json(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    return value


def _from_json(table: Table, row: dict[str, Any]) -> dict[str, Any]:
    parsed: dict[str, Any] = {}
    for name, value in row.items():
        column = table.columns.get(name)
        if column is None:
            continue
        if value is not None:
            if isinstance(column.type, DateTime):
                value = datetime.fromisoformat(value)
            elif isinstance(column.type, Date):
                value = date.fromisoformat(value)
            elif isinstance(column.type, Numeric):
                value = Decimal(value)
        parsed[name] = value
    return parsed


async def backup_data(session: AsyncSession) -> BackupData:
    """
    Dump every table to JSON-serializable rows, keyed by table name.

    Dates and timestamps become ISO strings and decimals become strings.
    """
    data: BackupData = {}
    for table in Base.metadata.sorted_tables:
        result = await session.execute(select(table).order_by(table.c.id))
        data[table.name] = [
            {key: _to_json(value) for key, value in row.items()}
            for row in result.mappings().all()
        ]
        logger.info("Backed up %d rows from %s", len(data[table.name]), table.name)
    return data


async def restore_data(session: AsyncSession, data: BackupData) -> dict[str, int]:
    """
    Insert rows produced by ``backup_data`` into empty tables.

    Tables are filled parents first, keeping their original ids. On
    PostgreSQL the id sequences are then moved past the restored ids.

    Returns
    -------
    Number of rows restored per table
    """
    counts: dict[str, int] = {}
    for table in Base.metadata.sorted_tables:
        rows = [_from_json(table, row) for row in data.get(table.name, [])]
        if rows:
            await session.execute(insert(table), rows)
        counts[table.name] = len(rows)
        logger.info("Restored %d rows into %s", len(rows), table.name)

    await session.flush()

    if session.get_bind().dialect.name == "postgresql":
        await _reset_sequences(session)

    return counts


async def _reset_sequences(session: AsyncSession) -> None:
    for table in Base.metadata.sorted_tables:
        max_id = (await session.execute(select(func.max(table.c.id)))).scalar()
        await session.execute(
            text("SELECT setval(pg_get_serial_sequence(:table, 'id'), :value, :called)"),
            {"table": table.name, "value": max_id or 1, "called": max_id is not None},
        )
    logger.info("PostgreSQL id sequences reset")
