# pictosigns/routers/template.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import Template
from pictosigns.repositories import crud
from pictosigns.repositories import templates as repo
from pictosigns.schemas import TemplateJson

router = APIRouter(tags=["template"])


@router.get("/template", response_model=List[TemplateJson])
def list_templates(db: Session = Depends(get_db)):
    return [TemplateJson.model_validate(t) for t in repo.list_templates(db)]


@router.get("/template/{template_id}", response_model=TemplateJson)
def get_template(template_id: int, db: Session = Depends(get_db)):
    if template_id == 0:
        return TemplateJson()
    template = repo.find_template_by_id(db, template_id)
    if template is None:
        raise HTTPException(status_code=404, detail="Template not found")
    return TemplateJson.model_validate(template)


@router.put("/template", status_code=204, response_class=Response)
def put_template(
    payload: TemplateJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    repo.save_template(db, payload)
    return Response(status_code=204)


@router.delete("/template/{template_id}", status_code=204, response_class=Response)
def delete_template(
    template_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    crud.remove(db, Template, "template", template_id)
    return Response(status_code=204)
