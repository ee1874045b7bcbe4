"""Exceptions raised by the imitator and its reply service."""


class ImitatorError(Exception):
    """Base class for ImitatorAI errors."""


class MissingStyleContextError(ImitatorError):
    """No style-example conversation was added before rendering."""

    def __init__(self) -> None:
        super().__init__(
            "Style context was never added. The model needs example "
            "conversations in order to know how to respond."
        )


class MissingConversationContextError(ImitatorError):
    """No target conversation was set before rendering."""

    def __init__(self) -> None:
        super().__init__(
            "Conversation context was never set. The model needs a "
            "conversation to reply to."
        )


class NoCredentialError(ImitatorError):
    """A reply was requested from an imitator built without an API key."""

    def __init__(self) -> None:
        super().__init__(
            "No API key was provided, so only render_prompt() is available."
        )


class EmptyReplyError(ImitatorError):
    """The model answered without any text content."""
