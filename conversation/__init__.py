"""Prompt building and reply generation for style imitation."""

from conversation.errors import (
    EmptyReplyError,
    ImitatorError,
    MissingConversationContextError,
    MissingStyleContextError,
    NoCredentialError,
)
from conversation.imitator import Imitator, ImitatorConfig
from conversation.reply_service import ClaudeReplyService

__all__ = [
    "ClaudeReplyService",
    "EmptyReplyError",
    "Imitator",
    "ImitatorConfig",
    "ImitatorError",
    "MissingConversationContextError",
    "MissingStyleContextError",
    "NoCredentialError",
]
