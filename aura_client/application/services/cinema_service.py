"""Application service (use case) for the cinema screen."""

import asyncio
import logging
from dataclasses import dataclass, field

from aura_client.application.interfaces import CinemaApi
from aura_client.application.services.result import Result, capture
from aura_client.domain.entities import (
    Movie,
    MovieDetails,
    MovieWord,
    WatchStatus,
    deduplicate_movies,
)

logger = logging.getLogger(__name__)

CRITIQUE_FALLBACK = "Could not load the review"


@dataclass
class CinemaState:
    """What the cinema screen renders: three movie lists and their views."""

    trending: list[Movie] = field(default_factory=list)
    my_movies: list[Movie] = field(default_factory=list)
    search_results: list[Movie] = field(default_factory=list)

    @property
    def unique_trending(self) -> list[Movie]:
        return deduplicate_movies(self.trending)

    @property
    def unique_search_results(self) -> list[Movie]:
        return deduplicate_movies(self.search_results)

    @property
    def watched(self) -> list[Movie]:
        return [m for m in self.my_movies if m.watch_status is WatchStatus.WATCHED]

    @property
    def watchlist(self) -> list[Movie]:
        return [m for m in self.my_movies if m.watch_status is WatchStatus.IN_WATCHLIST]

    def find(self, movie_id: int) -> Movie | None:
        return next((m for m in self.my_movies if m.matches(movie_id)), None)


class CinemaService:
    """Trending, personal list and search. Depends on the CinemaApi port (DI).

    Every read degrades to an empty value on failure. Mutations are applied
    to the local list first; with ``rollback_failed_mutations`` a failed call
    restores the previous entry, otherwise the local change is kept.
    """

    def __init__(self, api: CinemaApi, *, rollback_failed_mutations: bool = True):
        self._api = api
        self._rollback = rollback_failed_mutations
        self.state = CinemaState()

    async def load_all(self) -> CinemaState:
        trending, mine = await asyncio.gather(
            capture(self._api.get_trending(), operation="Load trending"),
            capture(self._api.get_my_movies(), operation="Load my list"),
        )
        self.state.trending = trending.value_or([])
        self.state.my_movies = mine.value_or([])
        return self.state

    async def search(self, query: str) -> list[Movie]:
        if not query.strip():
            self.state.search_results = []
            return []
        result = await capture(self._api.search_movies(query), operation="Search movies")
        self.state.search_results = result.value_or([])
        return self.state.search_results

    async def refresh_my_movies(self) -> list[Movie]:
        """Refetch the personal list, keeping the current one on failure."""
        result = await capture(self._api.get_my_movies(), operation="Reload my list")
        if result.ok:
            self.state.my_movies = result.value_or([])
        return self.state.my_movies

    async def mark_watched(self, tmdb_id: int, review: str | None = None) -> Result[Movie]:
        index = next(
            (i for i, m in enumerate(self.state.my_movies) if m.matches(tmdb_id)), None
        )
        previous = self.state.my_movies[index] if index is not None else None
        if previous is not None:
            self.state.my_movies[index] = previous.with_status(WatchStatus.WATCHED)

        result = await capture(
            self._api.mark_watched(tmdb_id, review), operation="Mark watched"
        )
        if not result.ok and self._rollback:
            if previous is not None:
                self._restore(previous)
            return result
        if previous is None:
            await self.refresh_my_movies()
        return result

    async def add_to_watchlist(self, tmdb_id: int) -> Result[Movie]:
        result = await capture(
            self._api.add_to_watchlist(tmdb_id), operation="Add to watchlist"
        )
        await self.refresh_my_movies()
        return result

    def is_in_watchlist(self, tmdb_id: int) -> bool:
        movie = self.state.find(tmdb_id)
        return movie is not None and movie.watch_status is not WatchStatus.NEITHER

    async def movie_details(self, tmdb_id: int) -> MovieDetails | None:
        result = await capture(
            self._api.get_movie_details(tmdb_id), operation="Load movie details"
        )
        return result.value

    async def movie_words(self, tmdb_id: int) -> list[MovieWord]:
        result = await capture(
            self._api.get_movie_words(tmdb_id), operation="Load movie words"
        )
        return result.value_or([])

    async def film_critique(self, tmdb_id: int) -> str:
        result = await capture(
            self._api.get_film_critique(tmdb_id), operation="Load film critique"
        )
        return result.value_or(CRITIQUE_FALLBACK)

    def _restore(self, previous: Movie) -> None:
        # The list may have been replaced while the call was in flight.
        for i, movie in enumerate(self.state.my_movies):
            if movie.stable_id == previous.stable_id:
                self.state.my_movies[i] = previous
                return
