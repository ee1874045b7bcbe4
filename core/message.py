from typing import Union

from pydantic import BaseModel

SpeakerId = Union[int, str]


class Message(BaseModel):
    """A single utterance in a conversation, immutable after creation."""

    model_config = {"frozen": True}

    speaker_id: SpeakerId
    text: str

    def to_dict(self) -> dict:
        return self.model_dump(mode="json")

    @classmethod
    def from_dict(cls, data: dict) -> "Message":
        return cls.model_validate(data)
