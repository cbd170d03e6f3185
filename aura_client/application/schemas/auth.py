"""Pydantic v2 schemas (DTOs) for authentication requests and responses."""

from pydantic import BaseModel


class UserSchema(BaseModel):
    """Wire shape of ``/auth/me`` and the ``user`` field of token responses."""

    id: int
    email: str
    username: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None
    calorie_goal: int | None = None
    created_at: str | None = None


class TokenResponseSchema(BaseModel):
    access_token: str
    token_type: str
    user: UserSchema


class RegisterRequest(BaseModel):
    """JSON body of ``POST /auth/register``.

    The backend has no separate username; the email doubles as one.
    """

    username: str
    email: str
    password: str
    full_name: str
