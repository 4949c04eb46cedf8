# pictosigns/repositories/apps.py
from __future__ import annotations

from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.core.errors import WriteFailed
from pictosigns.models import App, app_fonts, app_materials, app_users
from pictosigns.schemas import AppJson

from . import crud
from .links import clear_links, group_links, replace_links

# (json field, link table, linked column)
LINKS = (
    ("user_ids", app_users, "user_id"),
    ("material_ids", app_materials, "material_id"),
    ("font_ids", app_fonts, "font_id"),
)


def list_apps(db: Session) -> List[AppJson]:
    apps = crud.list_all(db, App, "apps")
    ids = [a.id for a in apps]

    grouped = {field: group_links(db, table, "app_id", column, ids) for field, table, column in LINKS}

    return [
        AppJson(
            id=a.id,
            name=a.name,
            **{field: grouped[field].get(a.id, []) for field, _, _ in LINKS},
        )
        for a in apps
    ]


def save_app(db: Session, payload: AppJson) -> int:
    """Insert or update an app and replace its users, materials and fonts."""
    app_id = crud.upsert(db, App, "app", {"id": payload.id, "name": payload.name}, commit=False)

    try:
        for field, table, column in LINKS:
            replace_links(db, table, "app_id", column, app_id, getattr(payload, field))
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("link", "app", app_id) from e

    return app_id


def delete_app(db: Session, app_id: int) -> None:
    try:
        for _, table, _ in LINKS:
            clear_links(db, table, "app_id", app_id)
    except SQLAlchemyError as e:
        db.rollback()
        raise WriteFailed("unlink", "app", app_id) from e
    crud.remove(db, App, "app", app_id)
