"""Application service (use case) for vocabulary practice and roleplay chat."""

import asyncio
import logging
from dataclasses import dataclass, field, replace

from aura_client.application.interfaces import LanguagesApi
from aura_client.application.services.result import Result, capture
from aura_client.domain.entities import LearningStreak, VocabWord

logger = logging.getLogger(__name__)

ROLEPLAY_FALLBACK_REPLY = (
    "Interessant! Können Sie das genauer erklären? "
    "(Interesting! Can you explain that in more detail?)"
)

# Opening line of the tutor, per scenario title.
_GREETINGS = {
    "At the Doctor": (
        "Guten Tag! Ich bin Dr. Müller. Was kann ich für Sie tun? "
        "(How can I help you today?)"
    ),
    "Movie Discussion": (
        "Hey! Hast du den neuen Film gesehen? Was hast du gedacht? "
        "(Did you see the new film? What did you think?)"
    ),
    "At the Restaurant": (
        "Willkommen! Haben Sie eine Reservierung? "
        "(Welcome! Do you have a reservation?)"
    ),
    "At the Airport": (
        "Guten Morgen! Ihren Reisepass und Ihre Bordkarte bitte. "
        "(Good morning! Your passport and boarding pass please.)"
    ),
}
_DEFAULT_GREETING = (
    "Hallo! Schön, Sie kennenzulernen. Wie kann ich Ihnen helfen? "
    "(Hello! Nice to meet you. How can I help you?)"
)


def scenario_greeting(scenario: str) -> str:
    return _GREETINGS.get(scenario, _DEFAULT_GREETING)


@dataclass
class RoleplayTurn:
    text: str
    is_user: bool

    def render(self) -> str:
        return f"{'User' if self.is_user else 'AI'}: {self.text}"


@dataclass
class RoleplayConversation:
    """Transcript of one roleplay chat, opened by the tutor's greeting."""

    scenario: str
    turns: list[RoleplayTurn] = field(default_factory=list)

    @classmethod
    def start(cls, scenario: str) -> "RoleplayConversation":
        return cls(scenario, [RoleplayTurn(scenario_greeting(scenario), is_user=False)])

    def history(self) -> list[str]:
        return [turn.render() for turn in self.turns]


@dataclass
class LanguagesState:
    vocabulary: list[VocabWord] = field(default_factory=list)
    streak: LearningStreak | None = None


class LanguagesService:
    """Vocabulary list, streak and roleplay. Depends on the LanguagesApi port (DI)."""

    def __init__(self, api: LanguagesApi, *, rollback_failed_mutations: bool = True):
        self._api = api
        self._rollback = rollback_failed_mutations
        self.state = LanguagesState()

    async def load(self) -> LanguagesState:
        vocabulary, streak = await asyncio.gather(
            capture(self._api.get_vocabulary(), operation="Load vocabulary"),
            capture(self._api.get_learning_streak(), operation="Load learning streak"),
        )
        self.state.vocabulary = vocabulary.value_or([])
        self.state.streak = streak.value
        return self.state

    def filter(self, query: str) -> list[VocabWord]:
        """Words whose text contains ``query``, ignoring case."""
        if not query:
            return list(self.state.vocabulary)
        needle = query.lower()
        return [w for w in self.state.vocabulary if needle in w.word.lower()]

    @property
    def learned_count(self) -> int:
        return sum(1 for w in self.state.vocabulary if w.learned)

    @property
    def in_progress_count(self) -> int:
        return sum(1 for w in self.state.vocabulary if not w.learned)

    async def mark_learned(self, word_id: int) -> Result[None]:
        index = next(
            (i for i, w in enumerate(self.state.vocabulary) if w.id == word_id), None
        )
        previous = self.state.vocabulary[index] if index is not None else None
        if previous is not None:
            self.state.vocabulary[index] = replace(previous, learned=True)

        result = await capture(
            self._api.mark_word_learned(word_id), operation="Mark word learned"
        )
        if not result.ok and self._rollback and previous is not None:
            for i, word in enumerate(self.state.vocabulary):
                if word.id == word_id:
                    self.state.vocabulary[i] = previous
                    break
        return result

    async def roleplay_reply(self, conversation: RoleplayConversation, message: str) -> str:
        """Send the user's message and append both turns to the conversation.

        The history sent to the backend already includes the new message.
        A failed call answers with a canned tutor line instead of an error.
        """
        conversation.turns.append(RoleplayTurn(message, is_user=True))
        result = await capture(
            self._api.roleplay(conversation.scenario, message, conversation.history()),
            operation="Roleplay reply",
        )
        reply = result.value.as_text() if result.ok and result.value else ROLEPLAY_FALLBACK_REPLY
        conversation.turns.append(RoleplayTurn(reply, is_user=False))
        return reply
