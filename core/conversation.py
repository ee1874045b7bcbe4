"""ContextualConversation — an append-only transcript that renders to prompt text."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel, Field

from core.message import Message, SpeakerId


class ContextualConversation(BaseModel):
    """Ordered messages between any number of speakers.

    Messages keep the order they were added in. Speaker ids are opaque; for
    rendering they are normalized to the index of their first appearance, so
    ``Person 0`` is whoever spoke first.
    """

    messages: list[Message] = Field(default_factory=list)

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[SpeakerId, str]]) -> ContextualConversation:
        """Build a conversation from ``(speaker_id, text)`` pairs."""
        conversation = cls()
        for speaker_id, text in pairs:
            conversation.add_message(speaker_id, text)
        return conversation

    def add_message(self, speaker_id: SpeakerId, text: str) -> ContextualConversation:
        """Append a message and return self for chaining."""
        self.messages.append(Message(speaker_id=speaker_id, text=text))
        return self

    def speaker_labels(self) -> dict[SpeakerId, int]:
        """Map each distinct speaker id to its first-appearance index."""
        labels: dict[SpeakerId, int] = {}
        for message in self.messages:
            labels.setdefault(message.speaker_id, len(labels))
        return labels

    def render(self) -> str:
        """Render one ``Person <n>: <text>`` line per message."""
        labels = self.speaker_labels()
        return "".join(
            f"Person {labels[message.speaker_id]}: {message.text}\n"
            for message in self.messages
        )

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> ContextualConversation:
        return cls.model_validate(data)
