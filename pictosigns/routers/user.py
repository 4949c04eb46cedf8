# pictosigns/routers/user.py
from typing import List

from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.db import get_db
from pictosigns.models import User
from pictosigns.repositories import crud
from pictosigns.repositories.users import save_user
from pictosigns.schemas import UserJson

router = APIRouter(tags=["user"], dependencies=[Depends(require_bearer)])


@router.get("/user", response_model=List[UserJson])
def list_users(db: Session = Depends(get_db)):
    # password hashes never leave the server, UserJson excludes them
    return [UserJson.model_validate(u) for u in crud.list_all(db, User, "users")]


@router.put("/user", status_code=204, response_class=Response)
def put_user(payload: UserJson, db: Session = Depends(get_db)):
    save_user(db, payload)
    return Response(status_code=204)


@router.delete("/user/{user_id}", status_code=204, response_class=Response)
def delete_user(user_id: int, db: Session = Depends(get_db)):
    crud.remove(db, User, "user", user_id)
    return Response(status_code=204)
