"""Domain entities for the cinema tracker — framework-independent."""

from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from enum import Enum


class WatchStatus(str, Enum):
    """Where a movie sits in the user's lists.

    The backend sends a nullable ``watched`` flag: ``true`` means watched,
    ``false`` means on the watchlist but not yet watched, ``null`` means
    neither.
    """

    WATCHED = "watched"
    IN_WATCHLIST = "in_watchlist"
    NEITHER = "neither"

    @classmethod
    def from_flag(cls, watched: bool | None) -> "WatchStatus":
        if watched is True:
            return cls.WATCHED
        if watched is False:
            return cls.IN_WATCHLIST
        return cls.NEITHER


@dataclass
class Movie:
    """A movie as listed by trending, search or the user's own list."""

    title: str
    id: int | None = None  # local database id
    tmdb_id: int | None = None  # external catalogue id
    year: str | None = None
    rating: float | None = None
    poster_url: str | None = None
    watch_status: WatchStatus = WatchStatus.NEITHER
    overview: str | None = None
    review: str | None = None

    @property
    def stable_id(self) -> int | None:
        """Identifier used for list keys and deduplication."""
        if self.tmdb_id is not None:
            return self.tmdb_id
        return self.id

    def matches(self, movie_id: int) -> bool:
        return self.tmdb_id == movie_id or self.id == movie_id

    def with_status(self, status: WatchStatus) -> "Movie":
        return replace(self, watch_status=status)


@dataclass
class CastMember:
    name: str
    character: str | None = None
    profile_url: str | None = None


@dataclass
class MovieDetails:
    """Full catalogue record shown on the movie detail screen."""

    title: str
    tmdb_id: int | None = None
    original_title: str | None = None
    year: str | None = None
    runtime: int | None = None
    rating: float | None = None
    vote_count: int | None = None
    genres: list[str] = field(default_factory=list)
    tagline: str | None = None
    overview: str | None = None
    cast: list[CastMember] = field(default_factory=list)
    directors: list[str] = field(default_factory=list)
    writers: list[str] = field(default_factory=list)
    poster_url: str | None = None
    backdrop_url: str | None = None


@dataclass
class MovieWord:
    """A vocabulary item extracted from a movie's dialogue."""

    word: str
    translation: str
    example: str | None = None
    context: str | None = None


def deduplicate_movies(movies: Iterable[Movie]) -> list[Movie]:
    """Keep the first occurrence of each stable id, preserving order.

    Entries without a usable id (missing or 0) cannot be keyed and are dropped.
    """
    seen: set[int] = set()
    unique: list[Movie] = []
    for movie in movies:
        key = movie.stable_id
        if not key or key in seen:
            continue
        seen.add(key)
        unique.append(movie)
    return unique
