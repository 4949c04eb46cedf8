# pictosigns/auth/jwt.py
from datetime import datetime, timedelta, timezone
from functools import lru_cache

import jwt

from pictosigns.core.errors import ConfigurationError
from pictosigns.core.settings import settings

ALGORITHM = "HS256"


class TokenService:
    """Issues and checks the bearer tokens of the admin API."""

    def __init__(self, secret: str, *, exp_hours: int = 24):
        if not secret:
            raise ConfigurationError("JWT_SECRET is not configured")
        self._secret = secret
        self._exp_hours = exp_hours

    def create_access_token(self, *, user_id: int) -> str:
        now = datetime.now(timezone.utc)
        payload = {
            "sub": str(user_id),
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(hours=self._exp_hours)).timestamp()),
        }
        return jwt.encode(payload, self._secret, algorithm=ALGORITHM)

    def decode_token(self, token: str) -> dict:
        """Raises ``jwt.InvalidTokenError`` on a bad signature, expiry or garbage."""
        return jwt.decode(token, self._secret, algorithms=[ALGORITHM])


@lru_cache(maxsize=1)
def get_token_service() -> TokenService:
    """Singleton for FastAPI DI, built from settings."""
    return TokenService(settings.JWT_SECRET or "", exp_hours=settings.JWT_EXP_HOURS)
