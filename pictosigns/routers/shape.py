# pictosigns/routers/shape.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Shape
from pictosigns.repositories import crud
from pictosigns.schemas import ShapeJson

router = APIRouter(tags=["shape"])


@router.get("/shape", response_model=List[ShapeJson])
def list_shapes(db: Session = Depends(get_db)):
    return [ShapeJson.model_validate(s) for s in crud.list_all(db, Shape, "shapes")]


@router.get("/shape/{shape_id}", response_model=ShapeJson)
def get_shape(shape_id: int, db: Session = Depends(get_db)):
    if shape_id == 0:
        return ShapeJson()
    shape = crud.get(db, Shape, "shape", shape_id)
    if shape is None:
        raise HTTPException(status_code=404, detail="Shape not found")
    return ShapeJson.model_validate(shape)


@router.put("/shape", status_code=204, response_class=Response)
def put_shape(
    payload: ShapeJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.upsert(db, Shape, "shape", payload.model_dump())
    return Response(status_code=204)


@router.delete("/shape/{shape_id}", status_code=204, response_class=Response)
def delete_shape(
    shape_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Shape, "shape", shape_id)
    return Response(status_code=204)
