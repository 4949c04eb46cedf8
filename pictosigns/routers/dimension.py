# pictosigns/routers/dimension.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Dimension
from pictosigns.repositories import crud
from pictosigns.schemas import DimensionJson

router = APIRouter(tags=["dimension"])


@router.get("/dimension", response_model=List[DimensionJson])
def list_dimensions(db: Session = Depends(get_db)):
    # preset sizes, in the order the shop shows them
    rows = crud.list_all(db, Dimension, "dimensions", order_by=Dimension.pos)
    return [DimensionJson.model_validate(d) for d in rows]


@router.put("/dimension", status_code=204, response_class=Response)
def put_dimension(
    payload: DimensionJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.upsert(db, Dimension, "dimension", payload.model_dump())
    return Response(status_code=204)


@router.delete("/dimension/{dimension_id}", status_code=204, response_class=Response)
def delete_dimension(
    dimension_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Dimension, "dimension", dimension_id)
    return Response(status_code=204)
