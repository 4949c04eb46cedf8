# pictosigns/repositories/users.py
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pictosigns.auth.passwords import hash_password
from pictosigns.core.errors import LookupFailed
from pictosigns.models import User
from pictosigns.schemas import UserJson

from . import crud


def find_by_username(db: Session, username: str) -> Optional[User]:
    try:
        return db.scalars(select(User).where(User.username == username).limit(1)).first()
    except SQLAlchemyError as e:
        raise LookupFailed("user", username) from e


def save_user(db: Session, payload: UserJson) -> int:
    values = {"id": payload.id, "username": payload.username, "is_admin": payload.is_admin}
    # new users always get a hash; updates keep the old one unless a password is sent
    if payload.id == 0 or payload.password:
        values["password"] = hash_password(payload.password)
    return crud.upsert(db, User, "user", values)
