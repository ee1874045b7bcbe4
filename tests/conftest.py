# tests/conftest.py
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from core.conversation import ContextualConversation


@pytest.fixture
def style_conversation():
    return (
        ContextualConversation()
        .add_message(0, "omg heyyyyyyy!")
        .add_message(1, "woahhhh heyyyyy!! whats up????")
    )


@pytest.fixture
def target_conversation():
    return (
        ContextualConversation()
        .add_message(0, "omg youre sooooo cool!")
        .add_message(1, "nooooo! youre cool!")
    )


def claude_response(*texts: str, stop_reason: str = "end_turn"):
    """Build a stand-in for an anthropic Message response."""
    return SimpleNamespace(
        content=[SimpleNamespace(type="text", text=t) for t in texts],
        stop_reason=stop_reason,
    )


def mock_client(service, *, return_value=None, side_effect=None) -> AsyncMock:
    """Swap the service's Anthropic client for a mock and return messages.create."""
    create = AsyncMock(return_value=return_value, side_effect=side_effect)
    service.client = MagicMock()
    service.client.messages.create = create
    return create
