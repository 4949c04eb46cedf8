# pictosigns/routers/app.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.repositories import apps as repo
from pictosigns.schemas import AppJson

# storefront setup is admin-only, reads included
router = APIRouter(tags=["app"], dependencies=[Depends(require_bearer)])


@router.get("/app", response_model=List[AppJson])
def list_apps(db: Session = Depends(get_db)):
    return repo.list_apps(db)


@router.put("/app", status_code=204, response_class=Response)
def put_app(payload: AppJson, db: Session = Depends(get_db)):
    repo.save_app(db, payload)
    return Response(status_code=204)


@router.delete("/app/{app_id}", status_code=204, response_class=Response)
def delete_app(app_id: int, db: Session = Depends(get_db)):
    repo.delete_app(db, app_id)
    return Response(status_code=204)
