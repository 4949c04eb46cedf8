# pictosigns/repositories/materials.py
from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.core.errors import WriteFailed
from pictosigns.models import (
    Material,
    material_badges,
    material_dimensions,
    material_discounts,
    material_fixations,
    material_shapes,
)
from pictosigns.schemas import MaterialBase, MaterialJson

from . import crud
from .links import clear_links, group_links, replace_links

# (json field, link table, linked column)
LINKS = (
    ("dimension_ids", material_dimensions, "dimension_id"),
    ("discount_ids", material_discounts, "discount_id"),
    ("fixation_ids", material_fixations, "fixation_id"),
    ("shape_ids", material_shapes, "shape_id"),
    ("badge_ids", material_badges, "badge_id"),
)


def find_material_by_id(db: Session, material_id: int) -> Optional[Material]:
    return crud.get(db, Material, "material", material_id)


def list_materials(db: Session) -> List[MaterialJson]:
    materials = crud.list_all(db, Material, "materials", order_by=Material.title)
    ids = [m.id for m in materials]

    grouped = {
        field: group_links(db, table, "material_id", column, ids) for field, table, column in LINKS
    }

    return [
        MaterialJson.model_validate(m).model_copy(
            update={field: grouped[field].get(m.id, []) for field, _, _ in LINKS}
        )
        for m in materials
    ]


def save_material(db: Session, payload: MaterialJson) -> int:
    """Insert or update a material and replace all of its links."""
    values = payload.model_dump(include=set(MaterialBase.model_fields))
    material_id = crud.upsert(db, Material, "material", values, commit=False)

    try:
        for field, table, column in LINKS:
            replace_links(db, table, "material_id", column, material_id, getattr(payload, field))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("link", "material", material_id) from e

    return material_id


def delete_material(db: Session, material_id: int) -> None:
    try:
        for _, table, _ in LINKS:
            clear_links(db, table, "material_id", material_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("unlink", "material", material_id) from e
    crud.remove(db, Material, "material", material_id)
