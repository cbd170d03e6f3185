"""Unit tests for the MovieQuiz."""

import random

import pytest

from aura_client.application.interfaces import CinemaApi
from aura_client.application.services import MovieQuiz
from aura_client.domain.entities import Movie, MovieDetails, MovieWord
from aura_client.domain.exceptions import NetworkError


# ── Fakes ──


class FakeCinemaApi(CinemaApi):
    """Only the words endpoint is used by the quiz."""

    def __init__(self, words: list[MovieWord] | None = None, fail: bool = False):
        self.words = words or []
        self.fail = fail
        self.requested: list[int] = []

    async def get_movie_words(self, tmdb_id: int) -> list[MovieWord]:
        self.requested.append(tmdb_id)
        if self.fail:
            raise NetworkError()
        return list(self.words)

    async def get_trending(self) -> list[Movie]:
        raise NotImplementedError

    async def get_my_movies(self) -> list[Movie]:
        raise NotImplementedError

    async def search_movies(self, query: str) -> list[Movie]:
        raise NotImplementedError

    async def mark_watched(self, tmdb_id: int, review: str | None = None) -> Movie:
        raise NotImplementedError

    async def add_to_watchlist(self, tmdb_id: int) -> Movie:
        raise NotImplementedError

    async def get_movie_details(self, tmdb_id: int) -> MovieDetails:
        raise NotImplementedError

    async def get_film_critique(self, tmdb_id: int) -> str:
        raise NotImplementedError


WORDS = [
    MovieWord("Angst", "fear"),
    MovieWord("Verrat", "betrayal"),
    MovieWord("Rache", "revenge"),
]


@pytest.fixture
def quiz() -> MovieQuiz:
    return MovieQuiz(FakeCinemaApi(WORDS), rng=random.Random(7))


# ── Tests ──


@pytest.mark.asyncio
async def test_start_opens_first_question(quiz: MovieQuiz):
    await quiz.start(348)

    assert quiz.total == 3
    assert quiz.current_word.word == "Angst"
    assert quiz.progress == 0.0
    assert quiz.score == 0
    assert not quiz.finished


@pytest.mark.asyncio
async def test_options_hold_answer_and_three_distinct_distractors(quiz: MovieQuiz):
    await quiz.start(348)

    options = quiz.options()

    assert len(options) == 4
    assert len(set(options)) == 4
    assert options.count("fear") == 1


@pytest.mark.asyncio
async def test_same_seed_gives_same_options():
    first = MovieQuiz(FakeCinemaApi(WORDS), rng=random.Random(3))
    second = MovieQuiz(FakeCinemaApi(WORDS), rng=random.Random(3))

    await first.start(1)
    await second.start(1)

    assert first.options() == second.options()


@pytest.mark.asyncio
async def test_full_run_scores_and_finishes(quiz: MovieQuiz):
    await quiz.start(348)

    assert quiz.answer("fear") is True
    assert quiz.answer("betrayal") is True  # second answer is ignored
    quiz.next()
    assert quiz.progress == pytest.approx(1 / 3)

    assert quiz.answer("fear") is False
    quiz.next()
    assert quiz.current_word.word == "Rache"

    quiz.answer("revenge")
    quiz.next()

    assert quiz.finished
    assert quiz.current_word is None
    assert quiz.score == 2
    assert quiz.percentage == pytest.approx(2 / 3)
    assert quiz.verdict.startswith("👍")


@pytest.mark.asyncio
async def test_next_requires_an_answer(quiz: MovieQuiz):
    await quiz.start(348)

    with pytest.raises(RuntimeError):
        quiz.next()


@pytest.mark.asyncio
async def test_single_word_movie_still_gets_four_options():
    quiz = MovieQuiz(FakeCinemaApi([MovieWord("Angst", "fear")]), rng=random.Random(1))

    await quiz.start(1)

    assert len(quiz.options()) == 4
    assert "fear" in quiz.options()


@pytest.mark.asyncio
async def test_failed_load_gives_empty_quiz():
    quiz = MovieQuiz(FakeCinemaApi(fail=True))

    assert await quiz.start(1) == []
    assert quiz.current_word is None
    assert quiz.options() == []
    assert quiz.progress == 0.0
    assert quiz.verdict.startswith("📚")
    with pytest.raises(RuntimeError):
        quiz.answer("fear")


@pytest.mark.asyncio
async def test_restart_resets_state(quiz: MovieQuiz):
    await quiz.start(348)
    quiz.answer("fear")

    await quiz.start(348)

    assert quiz.score == 0
    assert not quiz.answered
