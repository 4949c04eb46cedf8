# pictosigns/routers/fixation.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Fixation, Shape
from pictosigns.repositories import crud
from pictosigns.repositories import fixations as repo
from pictosigns.schemas import (
    FixationConditionJson,
    FixationConditionsResponse,
    FixationJson,
    SetFixationRequest,
    ShapeJson,
)

router = APIRouter(tags=["fixation"])


def _load_fixation(db: Session, fixation_id: int) -> FixationJson:
    if fixation_id == 0:
        return FixationJson()
    fixation = repo.find_fixation_by_id(db, fixation_id)
    if fixation is None:
        raise HTTPException(status_code=404, detail="Fixation not found")
    return FixationJson.model_validate(fixation)


@router.get("/fixation", response_model=List[FixationJson])
def list_fixations(db: Session = Depends(get_db)):
    return [FixationJson.model_validate(f) for f in crud.list_all(db, Fixation, "fixations")]


@router.get("/fixation/{fixation_id}", response_model=FixationJson)
def get_fixation(fixation_id: int, db: Session = Depends(get_db)):
    return _load_fixation(db, fixation_id)


@router.get("/fixation/{fixation_id}/conditions", response_model=FixationConditionsResponse)
def get_fixation_conditions(fixation_id: int, db: Session = Depends(get_db)):
    """Everything the condition editor needs: the fixation, its rows and every shape."""
    fixation = _load_fixation(db, fixation_id)
    conditions = repo.get_conditions(db, fixation_id)
    shapes = crud.list_all(db, Shape, "shapes")
    return FixationConditionsResponse(
        fixation=fixation,
        conditions=[FixationConditionJson.model_validate(c) for c in conditions],
        shapes=[ShapeJson.model_validate(s) for s in shapes],
    )


@router.put("/fixation", status_code=204, response_class=Response)
def put_fixation(
    payload: SetFixationRequest,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    repo.save_fixation(db, payload)
    return Response(status_code=204)


@router.delete("/fixation/{fixation_id}", status_code=204, response_class=Response)
def delete_fixation(
    fixation_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    repo.delete_fixation(db, fixation_id)
    return Response(status_code=204)
