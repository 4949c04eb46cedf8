# pictosigns/routers/auth.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from pictosigns.auth.deps import require_bearer
from pictosigns.auth.jwt import TokenService, get_token_service
from pictosigns.auth.passwords import verify_password
from pictosigns.core.logging_config import logger
from pictosigns.db import get_db
from pictosigns.repositories.users import find_by_username
from pictosigns.schemas import SignInRequest, SignInResponse

router = APIRouter(tags=["auth"])


@router.post("/sign-in", response_model=SignInResponse)
def sign_in(
    payload: SignInRequest,
    db: Session = Depends(get_db),
    tokens: TokenService = Depends(get_token_service),
):
    user = find_by_username(db, payload.username)
    if not user or not verify_password(payload.password, user.password):
        logger.bind(username=payload.username).warning("sign_in_rejected")
        raise HTTPException(status_code=401, detail="Invalid username or password")

    token = tokens.create_access_token(user_id=user.id)
    logger.bind(user_id=user.id).info("sign_in")
    return SignInResponse(user_id=user.id, token=token)


@router.get("/auth-check", status_code=204, response_class=Response)
def auth_check(_user_id: int = Depends(require_bearer)):
    return Response(status_code=204)
