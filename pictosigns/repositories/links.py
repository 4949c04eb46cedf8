# pictosigns/repositories/links.py
"""
Many-to-many link tables (material_*, app_*).

Each link table holds an owner column and a linked column. Reads are grouped
in memory by owner id; writes replace an owner's links wholesale and leave the
commit to the caller.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from sqlalchemy import Table, delete, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.core.errors import LookupFailed


def group_links(
    db: Session, table: Table, owner: str, column: str, owner_ids: Sequence[int]
) -> Dict[int, List[int]]:
    stmt = (
        select(table.c[owner], table.c[column])
        .where(table.c[owner].in_(owner_ids))
        .order_by(table.c[owner], table.c[column])
    )
    try:
        rows = db.execute(stmt).all()
    except SQLAlchemyError as e:
        raise LookupFailed(table.name) from e

    grouped: Dict[int, List[int]] = defaultdict(list)
    for owner_id, linked_id in rows:
        grouped[owner_id].append(linked_id)
    return grouped


def clear_links(db: Session, table: Table, owner: str, owner_id: int) -> None:
    db.execute(delete(table).where(table.c[owner] == owner_id))


def replace_links(
    db: Session, table: Table, owner: str, column: str, owner_id: int, linked_ids: Iterable[int]
) -> None:
    clear_links(db, table, owner, owner_id)
    # duplicates would break the composite primary key
    rows = [{owner: owner_id, column: linked_id} for linked_id in dict.fromkeys(linked_ids)]
    if rows:
        db.execute(insert(table), rows)
