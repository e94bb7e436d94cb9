"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import InvalidMaskCode, JordleError, MalformedResponse, ServiceUnavailable, ValidationError
from .game import Attempt, DictionaryEntry, GameSession, GuessResult, LetterStatus, Solution, VerdictCode

__all__ = [
    'Attempt', 'DictionaryEntry', 'GameSession', 'GuessResult', 'LetterStatus', 'Solution', 'VerdictCode',
    'InvalidMaskCode', 'JordleError', 'MalformedResponse', 'ServiceUnavailable', 'ValidationError'
]
