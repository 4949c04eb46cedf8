# pictosigns/routers/material.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.repositories import materials as repo
from pictosigns.schemas import MaterialBase, MaterialJson

router = APIRouter(tags=["material"])


@router.get("/material", response_model=List[MaterialJson])
def list_materials(db: Session = Depends(get_db)):
    return repo.list_materials(db)


@router.get("/material/{material_id}", response_model=MaterialBase)
def get_material(material_id: int, db: Session = Depends(get_db)):
    if material_id == 0:
        return MaterialBase()
    material = repo.find_material_by_id(db, material_id)
    if material is None:
        raise HTTPException(status_code=404, detail="Material not found")
    return MaterialBase.model_validate(material)


@router.put("/material", status_code=204, response_class=Response)
def put_material(
    payload: MaterialJson,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    repo.save_material(db, payload)
    return Response(status_code=204)


@router.delete("/material/{material_id}", status_code=204, response_class=Response)
def delete_material(
    material_id: int,
    db: Session = Depends(get_db),
    _user_id: int = Depends(require_bearer),
):
    repo.delete_material(db, material_id)
    return Response(status_code=204)
