# pictosigns/repositories/discounts.py
from typing import List

from sqlalchemy.orm import Session

from pictosigns.models import Discount

from . import crud


def get_all_discounts(db: Session) -> List[Discount]:
    return crud.list_all(db, Discount, "discounts")
