# pictosigns/repositories/templates.py
from typing import List, Optional

from sqlalchemy.orm import Session

from pictosigns.models import Template
from pictosigns.schemas import TemplateJson

from . import crud

EMPTY_CONFIG = "{}"


def list_templates(db: Session) -> List[Template]:
    return crud.list_all(db, Template, "templates", order_by=Template.name)


def find_template_by_id(db: Session, template_id: int) -> Optional[Template]:
    return crud.get(db, Template, "template", template_id)


def save_template(db: Session, payload: TemplateJson) -> int:
    """New templates start from an empty layout; updates store the layout sent."""
    values = payload.model_dump()
    if payload.id == 0 or not payload.config:
        values["config"] = EMPTY_CONFIG
    return crud.upsert(db, Template, "template", values)
