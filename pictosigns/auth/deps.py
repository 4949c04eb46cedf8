# pictosigns/auth/deps.py
import jwt
from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from pictosigns.auth.jwt import TokenService, get_token_service

security = HTTPBearer(auto_error=False)  # 401 instead of 403 on a missing header


def require_bearer(
    creds: HTTPAuthorizationCredentials | None = Depends(security),
    tokens: TokenService = Depends(get_token_service),
) -> int:
    """Guard for admin routes; returns the user id carried by the token."""
    if not creds or not creds.credentials:
        raise HTTPException(
            status_code=401,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = tokens.decode_token(creds.credentials)
    except jwt.InvalidTokenError:
        raise HTTPException(
            status_code=401,
            detail="Invalid authentication token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user_id = payload.get("sub")
    if not user_id or not str(user_id).isdigit():
        raise HTTPException(status_code=401, detail="Invalid token payload")

    return int(user_id)
