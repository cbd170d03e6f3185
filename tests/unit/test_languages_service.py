"""Unit tests for the LanguagesService."""

import pytest

from aura_client.application.interfaces import LanguagesApi
from aura_client.application.services import LanguagesService, RoleplayConversation
from aura_client.domain.entities import LearningStreak, RoleplayReply, VocabWord
from aura_client.domain.exceptions import NetworkError, ServerError


class FakeLanguagesApi(LanguagesApi):
    def __init__(self):
        self.vocabulary = [
            VocabWord(1, "Haus", "house", learned=True),
            VocabWord(2, "Hausaufgabe", "homework"),
            VocabWord(3, "Katze", "cat"),
        ]
        self.failures: dict[str, Exception] = {}
        self.roleplay_calls: list[tuple[str, str, list[str]]] = []

    async def get_vocabulary(self) -> list[VocabWord]:
        if "get_vocabulary" in self.failures:
            raise self.failures["get_vocabulary"]
        return list(self.vocabulary)

    async def mark_word_learned(self, word_id: int) -> None:
        if "mark_word_learned" in self.failures:
            raise self.failures["mark_word_learned"]

    async def get_learning_streak(self) -> LearningStreak:
        if "get_learning_streak" in self.failures:
            raise self.failures["get_learning_streak"]
        return LearningStreak(streak_days=4, learned_words=1)

    async def roleplay(
        self, scenario: str, message: str, history: list[str] | None = None
    ) -> RoleplayReply:
        self.roleplay_calls.append((scenario, message, list(history or [])))
        if "roleplay" in self.failures:
            raise self.failures["roleplay"]
        return RoleplayReply("Sehr gut!", tip="Say 'Ich habe'")


@pytest.fixture
def api() -> FakeLanguagesApi:
    return FakeLanguagesApi()


@pytest.fixture
def service(api: FakeLanguagesApi) -> LanguagesService:
    return LanguagesService(api)


@pytest.mark.asyncio
async def test_load_and_counts(service: LanguagesService):
    state = await service.load()

    assert state.streak.streak_days == 4
    assert service.learned_count == 1
    assert service.in_progress_count == 2


@pytest.mark.asyncio
async def test_load_failure_degrades(service: LanguagesService, api: FakeLanguagesApi):
    api.failures["get_vocabulary"] = NetworkError()

    state = await service.load()

    assert state.vocabulary == []
    assert state.streak is not None


@pytest.mark.asyncio
async def test_filter_is_case_insensitive_substring(service: LanguagesService):
    await service.load()

    assert [w.word for w in service.filter("HAUS")] == ["Haus", "Hausaufgabe"]
    assert len(service.filter("")) == 3
    assert service.filter("xyz") == []


@pytest.mark.asyncio
async def test_mark_learned_is_optimistic(service: LanguagesService):
    await service.load()

    result = await service.mark_learned(3)

    assert result.ok
    assert service.learned_count == 2


@pytest.mark.asyncio
async def test_mark_learned_rolls_back_on_failure(service: LanguagesService, api: FakeLanguagesApi):
    await service.load()
    api.failures["mark_word_learned"] = ServerError("nope")

    result = await service.mark_learned(3)

    assert not result.ok
    assert service.learned_count == 1


@pytest.mark.asyncio
async def test_roleplay_history_includes_greeting_and_new_message(
    service: LanguagesService, api: FakeLanguagesApi
):
    conversation = RoleplayConversation.start("At the Restaurant")

    reply = await service.roleplay_reply(conversation, "Ja, für zwei")

    scenario, message, history = api.roleplay_calls[0]
    assert scenario == "At the Restaurant"
    assert message == "Ja, für zwei"
    assert history[0].startswith("AI: Willkommen!")
    assert history[1] == "User: Ja, für zwei"
    assert reply == "Sehr gut!\n💡 Say 'Ich habe'"
    assert [t.is_user for t in conversation.turns] == [False, True, False]


@pytest.mark.asyncio
async def test_roleplay_failure_uses_canned_reply(service: LanguagesService, api: FakeLanguagesApi):
    api.failures["roleplay"] = NetworkError()
    conversation = RoleplayConversation.start("Small talk")

    reply = await service.roleplay_reply(conversation, "Hallo")

    assert reply.startswith("Interessant! Können Sie das genauer erklären?")
    assert conversation.turns[0].text.startswith("Hallo! Schön, Sie kennenzulernen.")
