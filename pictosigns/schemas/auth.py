# pictosigns/schemas/auth.py
from pydantic import BaseModel

from .base import CamelModel


class SignInRequest(BaseModel):
    username: str
    password: str


class SignInResponse(CamelModel):
    user_id: int
    token: str
