"""Application service (use case) for the movie vocabulary quiz.

Each question shows a word from the movie's dialogue and four translations:
the correct one plus three distractors, in random order.
"""

import logging
import random

from aura_client.application.interfaces import CinemaApi
from aura_client.application.services.result import capture
from aura_client.domain.entities import MovieWord

logger = logging.getLogger(__name__)

OPTIONS_PER_QUESTION = 4

# Filler translations used when the movie has too few words of its own.
DISTRACTOR_POOL = (
    "haunted", "sinister", "betrayal", "redemption", "obsession",
    "revenge", "conspiracy", "deception", "resilience", "ambition",
    "corruption", "isolation", "manipulation", "sacrifice", "mysterious",
    "ruthless", "desperate", "cunning", "relentless", "inevitable",
)


class MovieQuiz:
    """Multiple-choice quiz over the words of one movie. Depends on the CinemaApi port (DI)."""

    def __init__(self, api: CinemaApi, rng: random.Random | None = None):
        self._api = api
        self._rng = rng or random.Random()
        self._reset([])

    def _reset(self, words: list[MovieWord]) -> None:
        self.words = words
        self.index = 0
        self.score = 0
        self.finished = False
        self.choice: str | None = None
        self._options: list[str] = []
        self._generate_options()

    async def start(self, tmdb_id: int) -> list[MovieWord]:
        """Load the movie's words and open the first question.

        A failed load leaves an empty quiz with no current word.
        """
        result = await capture(
            self._api.get_movie_words(tmdb_id), operation="Load quiz words"
        )
        self._reset(result.value_or([]))
        return self.words

    @property
    def total(self) -> int:
        return len(self.words)

    @property
    def current_word(self) -> MovieWord | None:
        if not self.words or self.finished:
            return None
        return self.words[self.index]

    @property
    def progress(self) -> float:
        if not self.words:
            return 0.0
        return self.index / len(self.words)

    @property
    def answered(self) -> bool:
        return self.choice is not None

    def options(self) -> list[str]:
        return list(self._options)

    def answer(self, choice: str) -> bool:
        """Record the answer to the current question; only the first answer counts."""
        word = self.current_word
        if word is None:
            raise RuntimeError("No question to answer")
        if self.choice is None:
            self.choice = choice
            if choice == word.translation:
                self.score += 1
        return self.choice == word.translation

    def next(self) -> None:
        """Move to the next question, or finish after the last one."""
        if self.current_word is None:
            return
        if not self.answered:
            raise RuntimeError("Answer the current question first")
        if self.index + 1 >= len(self.words):
            self.finished = True
            return
        self.index += 1
        self.choice = None
        self._generate_options()

    @property
    def percentage(self) -> float:
        return self.score / self.total if self.total else 0.0

    @property
    def verdict(self) -> str:
        if self.percentage >= 0.8:
            return "🏆 Excellent! You know this movie well"
        if self.percentage >= 0.6:
            return "👍 Not bad! Keep learning"
        return "📚 Room to grow! Review the words again"

    def _generate_options(self) -> None:
        word = self.current_word
        if word is None:
            self._options = []
            return
        candidates = [w.translation for w in self.words] + list(DISTRACTOR_POOL)
        distractors = list(dict.fromkeys(t for t in candidates if t != word.translation))
        self._rng.shuffle(distractors)
        options = [word.translation, *distractors[: OPTIONS_PER_QUESTION - 1]]
        self._rng.shuffle(options)
        self._options = options
