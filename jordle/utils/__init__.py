"""
Utilities Package

Contains logging helpers shared by the client and the development service.
"""

from .game_logger import GameLogger, game_logger

__all__ = ['GameLogger', 'game_logger']
