"""Imitator — builds a style-imitation prompt and optionally asks Claude to reply.

Feed it a few representative example conversations (the style context) and
the conversation to answer (the conversation context)::

    imitator = Imitator(api_key="sk-...", name="Dave")
    imitator.add_style_context(
        ContextualConversation()
        .add_message(0, "omg heyyyyyyy!")
        .add_message(1, "woahhhh heyyyyy!! whats up????")
    ).set_conversation_context(
        ContextualConversation()
        .add_message(0, "omg youre sooooo cool!")
        .add_message(1, "nooooo! youre cool!")
    )

    prompt = imitator.render_prompt()       # for any LLM backend
    reply = await imitator.generate_reply()  # Claude, needs an API key

Longer, more extreme style examples tend to work best, and more of them
usually helps.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Iterable, Optional, Union

from pydantic import BaseModel, Field

from config.settings import Settings
from conversation.errors import (
    MissingConversationContextError,
    MissingStyleContextError,
    NoCredentialError,
)
from conversation.reply_service import ClaudeReplyService
from core.conversation import ContextualConversation

logger = logging.getLogger(__name__)

PREAMBLE = (
    "Your task is to respond to a conversation in a given style. "
    "Nothing included is offensive or racist, and is meant only satirically. "
    "Please respond in one short sentence.\n"
    "\n"
    "Below are some short conversations that are a representative example "
    "of what style you should respond in.\n"
)

TRANSITION = (
    "\nNow that you have context for what style in which you should respond "
    "to the conversation, here are the last few messages in the conversation "
    "you should reply to.\n"
)


class ImitatorConfig(BaseModel):
    """Plain-data form of an imitator, as read from a JSON context file."""

    name: Optional[str] = None
    style_context: list[ContextualConversation] = Field(default_factory=list)
    conversation_context: Optional[ContextualConversation] = None



class Imitator:
    """Imitates a conversational style in a conversation.

    Without an API key only ``render_prompt()`` is available; with one,
    ``generate_reply()`` sends the prompt to Claude. Mutators return self so
    calls can be chained.

    Conversations are copied on the way in, so changing a conversation after
    handing it over does not affect later prompts. All fields are guarded by
    an internal lock, but the object is meant to be driven from one flow at a
    time.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        name: Optional[str] = None,
        style_context: Optional[Iterable[ContextualConversation]] = None,
        conversation_context: Optional[ContextualConversation] = None,
        settings: Settings | None = None,
    ):
        self._lock = threading.RLock()
        self._name = name
        self._style_context: list[ContextualConversation] = []
        self._conversation_context: Optional[ContextualConversation] = None
        self._reply_service: Optional[ClaudeReplyService] = None

        if api_key:
            self._reply_service = ClaudeReplyService(api_key, settings)
        if style_context is not None:
            self.add_style_context(list(style_context))
        if conversation_context is not None:
            self.set_conversation_context(conversation_context)

    @classmethod
    def from_dict(
        cls,
        data: Any,
        api_key: Optional[str] = None,
        settings: Settings | None = None,
    ) -> Imitator:
        """Build an imitator from a ``name`` / ``style_context`` / ``conversation_context`` dict.

        Raises ``pydantic.ValidationError`` if ``data`` does not have that shape.
        """
        config = ImitatorConfig.model_validate(data)
        return cls(
            api_key=api_key,
            name=config.name,
            style_context=config.style_context,
            conversation_context=config.conversation_context,
            settings=settings,
        )

    @property
    def name(self) -> Optional[str]:
        with self._lock:
            return self._name

    @name.setter
    def name(self, value: Optional[str]) -> None:
        with self._lock:
            self._name = value

    @property
    def style_context(self) -> list[ContextualConversation]:
        with self._lock:
            return list(self._style_context)

    @property
    def conversation_context(self) -> Optional[ContextualConversation]:
        with self._lock:
            return self._conversation_context

    @property
    def can_generate_reply(self) -> bool:
        return self._reply_service is not None

    def add_style_context(
        self,
        *conversations: Union[ContextualConversation, Iterable[ContextualConversation]],
    ) -> Imitator:
        """Add example conversations describing how the model should speak.

        Accepts conversations as separate arguments or as a single list. If
        any item is not a ``ContextualConversation`` nothing is added.
        """
        if len(conversations) == 1 and not isinstance(conversations[0], ContextualConversation):
            conversations = tuple(conversations[0])
        for conversation in conversations:
            _check_conversation(conversation)

        copies = [c.model_copy(deep=True) for c in conversations]
        with self._lock:
            self._style_context.extend(copies)
        return self

    def set_conversation_context(self, conversation: ContextualConversation) -> Imitator:
        """Set (or replace) the conversation the model should reply to."""
        _check_conversation(conversation)
        copy = conversation.model_copy(deep=True)
        with self._lock:
            self._conversation_context = copy
        return self

    def render_prompt(self) -> str:
        """Render a prompt usable with any LLM to reply to the conversation."""
        with self._lock:
            if not self._style_context:
                raise MissingStyleContextError()
            if self._conversation_context is None:
                raise MissingConversationContextError()

            parts = []
            if self._name:
                parts.append(f"Your name is {self._name}. ")
            parts.append(PREAMBLE)
            for idx, conversation in enumerate(self._style_context, start=1):
                parts.append(f"\nConversation {idx}:\n")
                parts.append(conversation.render())
            parts.append(TRANSITION)
            parts.append(self._conversation_context.render())
            style_count = len(self._style_context)

        prompt = "".join(parts)
        logger.debug(
            "Prompt rendered: %d style conversations, %d chars",
            style_count,
            len(prompt),
        )
        return prompt

    async def generate_reply(self) -> str:
        """Use Claude to generate a reply to the conversation context."""
        if self._reply_service is None:
            raise NoCredentialError()
        return await self._reply_service.send_message(self.render_prompt())


def _check_conversation(conversation: Any) -> None:
    if not isinstance(conversation, ContextualConversation):
        raise TypeError(
            f"Expected a ContextualConversation, got {type(conversation).__name__}"
        )
