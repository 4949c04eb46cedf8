# pictosigns/routers/discount.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Discount
from pictosigns.repositories import crud
from pictosigns.repositories.discounts import get_all_discounts
from pictosigns.schemas import DiscountJson

router = APIRouter(tags=["discount"])


@router.get("/discount", response_model=List[DiscountJson])
def list_discounts(db: Session = Depends(get_db)):
    return [DiscountJson.model_validate(d) for d in get_all_discounts(db)]


@router.put("/discount", status_code=204, response_class=Response)
def put_discount(
    payload: DiscountJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.upsert(db, Discount, "discount", payload.model_dump())
    return Response(status_code=204)


@router.delete("/discount/{discount_id}", status_code=204, response_class=Response)
def delete_discount(
    discount_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Discount, "discount", discount_id)
    return Response(status_code=204)
