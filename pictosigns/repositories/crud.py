# pictosigns/repositories/crud.py
"""
Row-level helpers shared by the flat catalog resources.

Writes follow the catalog convention: id 0 inserts a new row, any other id
updates that row in place (a missing row is a no-op, like a plain UPDATE).
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Type, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.core.errors import LookupFailed, WriteFailed
from pictosigns.db import Base

M = TypeVar("M", bound=Base)


def list_all(db: Session, model: Type[M], entity: str, order_by=None) -> List[M]:
    stmt = select(model)
    stmt = stmt.order_by(order_by if order_by is not None else model.id)
    try:
        return list(db.scalars(stmt))
    except SQLAlchemyError as e:
        raise LookupFailed(entity) from e


def get(db: Session, model: Type[M], entity: str, row_id: int) -> Optional[M]:
    if row_id == 0:
        return None
    try:
        return db.get(model, row_id)
    except SQLAlchemyError as e:
        raise LookupFailed(entity, row_id) from e


def upsert(
    db: Session, model: Type[M], entity: str, values: Dict[str, Any], *, commit: bool = True
) -> int:
    """Insert (id 0) or update a row and return its id.

    With ``commit=False`` the row is only flushed, so the caller can add
    dependent rows in the same transaction.
    """
    values = dict(values)
    row_id = values.pop("id", 0) or 0
    action = "insert" if row_id == 0 else "update"
    try:
        if row_id == 0:
            row = model(**values)
            db.add(row)
            db.flush()
            row_id = row.id
        else:
            db.execute(update(model).where(model.id == row_id).values(**values))
        if commit:
            db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed(action, entity, row_id) from e
    return row_id


def remove(db: Session, model: Type[M], entity: str, row_id: int) -> None:
    """Delete a row and commit, along with anything pending in the session."""
    try:
        db.execute(delete(model).where(model.id == row_id))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("delete", entity, row_id) from e
