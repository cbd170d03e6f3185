"""Domain entities for the authenticated user."""

from dataclasses import dataclass


@dataclass
class User:
    """The account returned by ``/auth/me`` and embedded in token responses."""

    id: int
    email: str
    username: str | None = None
    full_name: str | None = None
    avatar_url: str | None = None
    calorie_goal: int | None = None
    created_at: str | None = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.username or self.email


@dataclass
class AuthToken:
    """Bearer credential issued by login or register."""

    access_token: str
    token_type: str
    user: User
