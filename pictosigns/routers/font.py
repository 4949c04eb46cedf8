# pictosigns/routers/font.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Font
from pictosigns.repositories import crud
from pictosigns.schemas import FontJson

# fonts are an admin-only resource, reads included
router = APIRouter(tags=["font"], dependencies=[Depends(require_bearer)])


@router.get("/font", response_model=List[FontJson])
def list_fonts(db: Session = Depends(get_db)):
    return [FontJson.model_validate(f) for f in crud.list_all(db, Font, "fonts")]


@router.put("/font", status_code=204, response_class=Response)
def put_font(payload: FontJson, db: Session = Depends(get_db)):
    crud.upsert(db, Font, "font", payload.model_dump())
    return Response(status_code=204)


@router.delete("/font/{font_id}", status_code=204, response_class=Response)
def delete_font(font_id: int, db: Session = Depends(get_db)):
    crud.remove(db, Font, "font", font_id)
    return Response(status_code=204)
