from core.conversation import ContextualConversation
from core.message import Message, SpeakerId

__all__ = [
    "ContextualConversation",
    "Message",
    "SpeakerId",
]
