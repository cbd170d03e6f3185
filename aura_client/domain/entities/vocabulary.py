"""Domain entities for language learning."""

from dataclasses import dataclass


@dataclass
class VocabWord:
    id: int
    word: str
    translation: str
    example: str | None = None
    language: str | None = None
    learned: bool = False


@dataclass
class LearningStreak:
    streak_days: int = 0
    total_words: int | None = None
    learned_words: int | None = None
    progress_percent: int | None = None


@dataclass
class RoleplayReply:
    """The tutor's answer in a roleplay conversation."""

    reply: str
    correction: str | None = None
    tip: str | None = None

    def as_text(self) -> str:
        """Render reply, correction and tip as one chat bubble."""
        text = self.reply
        if self.correction:
            text += f"\n\n✏️ {self.correction}"
        if self.tip:
            text += f"\n💡 {self.tip}"
        return text
