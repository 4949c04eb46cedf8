# pictosigns/routers/picto.py
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Picto
from pictosigns.repositories import crud
from pictosigns.repositories import pictos as repo
from pictosigns.schemas import PictoJson, PictoSearchResponse

router = APIRouter(tags=["picto"])


@router.get("/picto", response_model=PictoSearchResponse)
def get_pictos(search: Optional[str] = Query(None), db: Session = Depends(get_db)):
    """
    Without ``search`` the whole library is returned. With it, the pictos
    whose tags contain the pattern, or a suggested tag when none do.
    """
    if search is None:
        pictos, suggestion = repo.list_pictos(db), None
    else:
        pictos, suggestion = repo.search(db, search)
    return PictoSearchResponse(
        pictos=[PictoJson.model_validate(p) for p in pictos],
        suggestion=suggestion,
    )


@router.put("/picto", status_code=204, response_class=Response)
def put_picto(
    payload: PictoJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.upsert(db, Picto, "picto", payload.model_dump())
    return Response(status_code=204)


@router.delete("/picto/{picto_id}", status_code=204, response_class=Response)
def delete_picto(
    picto_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Picto, "picto", picto_id)
    return Response(status_code=204)
