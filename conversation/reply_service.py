"""ClaudeReplyService — sends a rendered prompt to Claude and returns the text reply.

Transport, retries and timeouts are left to the Anthropic client; failures
reach the caller unchanged.
"""

from __future__ import annotations

import logging

import anthropic

from config.settings import Settings
from conversation.errors import EmptyReplyError

logger = logging.getLogger(__name__)


class ClaudeReplyService:
    """Single-shot Claude Messages API caller."""

    def __init__(self, api_key: str, settings: Settings | None = None):
        self.settings = settings or Settings()
        self.client = anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=self.settings.REQUEST_TIMEOUT,
            max_retries=self.settings.MAX_RETRIES,
        )

    async def send_message(self, text: str) -> str:
        """Send ``text`` as a single user message and return Claude's reply."""
        logger.debug(
            "Claude API call: model=%s, prompt %d chars, max_tokens=%d",
            self.settings.MODEL_NAME,
            len(text),
            self.settings.MAX_TOKENS,
        )
        response = await self.client.messages.create(
            model=self.settings.MODEL_NAME,
            max_tokens=self.settings.MAX_TOKENS,
            messages=[{"role": "user", "content": text}],
        )

        reply = self._extract_text(response)
        if not reply:
            raise EmptyReplyError(
                f"Claude returned no text content (stop_reason={response.stop_reason})"
            )
        logger.debug("Claude API response: %d chars", len(reply))
        return reply

    @staticmethod
    def _extract_text(response) -> str:
        """Extract text content from a Claude response, ignoring non-text blocks."""
        parts = [b.text for b in response.content if b.type == "text"]
        return " ".join(parts)
