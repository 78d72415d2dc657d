from typing import Optional

from pydantic import BaseModel, Field


class Token(BaseModel):
    """Bearer Access Token"""

    access_token: str
    token_type: str


class TokenPayload(BaseModel):
    """Payload for Bearer Access Token"""
    sub: str  # user id
    role: str
    name: Optional[str] = None
    exp: int
    iat: int


class UserRegister(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    name: str = Field(min_length=1)


class LoginRequest(BaseModel):
    username: str
    password: str
