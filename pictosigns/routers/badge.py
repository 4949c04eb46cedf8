# pictosigns/routers/badge.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Badge
from pictosigns.repositories import crud
from pictosigns.schemas import BadgeJson

router = APIRouter(tags=["badge"])


@router.get("/badge", response_model=List[BadgeJson])
def list_badges(db: Session = Depends(get_db)):
    return [BadgeJson.model_validate(b) for b in crud.list_all(db, Badge, "badges")]


@router.put("/badge", status_code=204, response_class=Response)
def put_badge(
    payload: BadgeJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.upsert(db, Badge, "badge", payload.model_dump())
    return Response(status_code=204)


@router.delete("/badge/{badge_id}", status_code=204, response_class=Response)
def delete_badge(
    badge_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Badge, "badge", badge_id)
    return Response(status_code=204)
