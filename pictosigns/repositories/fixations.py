# pictosigns/repositories/fixations.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.core.errors import LookupFailed, WriteFailed
from pictosigns.models import Fixation, FixationCondition
from pictosigns.schemas import FixationJson, SetFixationRequest

from . import crud


def find_fixation_by_id(db: Session, fixation_id: int) -> Optional[Fixation]:
    return crud.get(db, Fixation, "fixation", fixation_id)


def get_conditions(db: Session, fixation_id: int) -> List[FixationCondition]:
    if fixation_id == 0:
        return []
    stmt = (
        select(FixationCondition)
        .where(FixationCondition.fixation_id == fixation_id)
        .order_by(FixationCondition.id)
    )
    try:
        return list(db.scalars(stmt))
    except SQLAlchemyError as e:
        raise LookupFailed("fixation_conditions", fixation_id) from e


def find_conditions(db: Session, fixation_id: int, shape_id: int) -> List[FixationCondition]:
    """Conditions of one (fixation, shape) pair, in storage order."""
    stmt = (
        select(FixationCondition)
        .where(FixationCondition.fixation_id == fixation_id)
        .where(FixationCondition.shape_id == shape_id)
        .order_by(FixationCondition.id)
    )
    try:
        return list(db.scalars(stmt))
    except SQLAlchemyError as e:
        raise LookupFailed("fixation_conditions", f"{fixation_id}/{shape_id}") from e


def save_fixation(db: Session, payload: SetFixationRequest) -> int:
    """Insert or update a fixation; its conditions are replaced wholesale."""
    values = payload.model_dump(include=set(FixationJson.model_fields))
    fixation_id = crud.upsert(db, Fixation, "fixation", values, commit=False)

    try:
        db.execute(delete(FixationCondition).where(FixationCondition.fixation_id == fixation_id))
        for condition in payload.conditions:
            fields = condition.model_dump(exclude={"id", "fixation_id"})
            db.add(FixationCondition(fixation_id=fixation_id, **fields))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("attach conditions to", "fixation", fixation_id) from e

    return fixation_id


def delete_fixation(db: Session, fixation_id: int) -> None:
    try:
        db.execute(delete(FixationCondition).where(FixationCondition.fixation_id == fixation_id))
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("delete conditions of", "fixation", fixation_id) from e
    crud.remove(db, Fixation, "fixation", fixation_id)
