"""Pydantic v2 schemas (DTOs) for the language-learning endpoints."""

from pydantic import BaseModel, Field


class VocabWordSchema(BaseModel):
    id: int
    word: str
    translation: str
    example: str | None = None
    language: str | None = None
    learned: bool = False


class StreakSchema(BaseModel):
    total_words: int | None = None
    learned_words: int | None = None
    streak_days: int
    progress_percent: int | None = None


class RoleplayRequest(BaseModel):
    """JSON body of ``POST /languages/roleplay``.

    ``history`` holds earlier turns rendered as ``"User: ..."`` / ``"AI: ..."``.
    """

    scenario: str
    message: str
    history: list[str] = Field(default_factory=list)


class RoleplayResponseSchema(BaseModel):
    reply: str
    correction: str | None = None
    tip: str | None = None
