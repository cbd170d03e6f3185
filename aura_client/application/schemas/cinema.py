"""Pydantic v2 schemas (DTOs) for the cinema endpoints."""

from pydantic import BaseModel, Field


class MovieSchema(BaseModel):
    id: int | None = None
    tmdb_id: int | None = None
    title: str
    year: int | str | None = None  # int on older backends, str on newer ones
    rating: float | None = None
    poster_url: str | None = None
    watched: bool | None = None  # true / false (watchlist) / null (neither)
    overview: str | None = None
    review: str | None = None


class MovieResultsSchema(BaseModel):
    """Wrapped list shape: ``{"results": [...]}``."""

    results: list[MovieSchema]


# Movie lists arrive either bare or wrapped, depending on the backend version.
MovieListSchema = list[MovieSchema] | MovieResultsSchema


class CastMemberSchema(BaseModel):
    name: str
    character: str | None = None
    profile_url: str | None = None


class MovieDetailsSchema(BaseModel):
    title: str
    tmdb_id: int | None = None
    original_title: str | None = None
    year: int | str | None = None
    runtime: int | None = None
    rating: float | None = None
    vote_count: int | None = None
    genres: list[str] = Field(default_factory=list)
    tagline: str | None = None
    overview: str | None = None
    cast: list[CastMemberSchema] = Field(default_factory=list)
    directors: list[str] = Field(default_factory=list)
    writers: list[str] = Field(default_factory=list)
    poster_url: str | None = None
    backdrop_url: str | None = None


class MovieWordSchema(BaseModel):
    word: str
    translation: str
    example: str | None = None
    context: str | None = None


class MovieWordsResponse(BaseModel):
    words: list[MovieWordSchema]


class FilmCritiqueResponse(BaseModel):
    critique: str
