"""
Error Types

Every error carries the message shown to the player in the error slot.
"""

from ..config.game_settings import (
    MALFORMED_RESPONSE_MESSAGE, SERVICE_UNAVAILABLE_MESSAGE, WORD_REJECTED_MESSAGE
)


class JordleError(Exception):
    """Base class for errors surfaced to the player."""
    default_message = WORD_REJECTED_MESSAGE

    def __init__(self, message=None, user_message=None):
        super().__init__(message or self.default_message)
        self.user_message = user_message or self.default_message


class ValidationError(JordleError):
    """The service rejected the submitted word."""

    def __init__(self, message=None):
        # The service's own wording is what the player sees
        super().__init__(message, user_message=message)


class ServiceUnavailable(JordleError):
    """Transport failure while talking to the game service."""
    default_message = SERVICE_UNAVAILABLE_MESSAGE


class MalformedResponse(JordleError):
    """The service answered with a body the client cannot interpret."""
    default_message = MALFORMED_RESPONSE_MESSAGE


class InvalidMaskCode(MalformedResponse):
    """A mask code outside {0, 1, 2} or a mask of the wrong length."""
