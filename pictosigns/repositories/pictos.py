# pictosigns/repositories/pictos.py
from typing import List, Optional, Tuple

from sqlalchemy.orm import Session

from pictosigns.core.logging_config import logger
from pictosigns.models import Picto
from pictosigns.services.picto_search import search_pictos

from . import crud


def list_pictos(db: Session) -> List[Picto]:
    return crud.list_all(db, Picto, "pictos")


def search(db: Session, pattern: str) -> Tuple[List[Picto], Optional[str]]:
    pictos, suggestion = search_pictos(list_pictos(db), pattern)
    logger.bind(pattern=pattern, hits=len(pictos), suggestion=suggestion).info("picto_search")
    return pictos, suggestion
