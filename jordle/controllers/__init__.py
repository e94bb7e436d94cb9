"""
Controllers Package

HTTP endpoints of the development game service.
"""

from .game_controller import game_bp

__all__ = ['game_bp']
