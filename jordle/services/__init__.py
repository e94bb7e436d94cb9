"""
Services Package

Contains the client-side game engine, the service client and the
development game service.
"""

from .api_client import JordleApiClient
from .feedback import KeyboardState, classify, is_solved, new_keyboard, upgrade
from .game_service import GameService, get_game_service, initialize_game_service
from .session_service import GameSessionService, PendingGuess, initialize_session_service

__all__ = [
    'JordleApiClient',
    'KeyboardState', 'classify', 'is_solved', 'new_keyboard', 'upgrade',
    'GameService', 'get_game_service', 'initialize_game_service',
    'GameSessionService', 'PendingGuess', 'initialize_session_service'
]
