"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: environment-based settings (service URL, logging, server)
- game_settings.py: game rules, keyboard layout and the bundled dictionary
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config, get_config
from .game_settings import (
    ALPHABET, BACKSPACE_KEY, DICTIONARY, ENTER_KEY, KEYBOARD_ROWS, MAX_ATTEMPTS,
    WORD_LENGTH, validate_dictionary_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config', 'get_config',
    # Game rules
    'ALPHABET', 'BACKSPACE_KEY', 'DICTIONARY', 'ENTER_KEY', 'KEYBOARD_ROWS', 'MAX_ATTEMPTS',
    'WORD_LENGTH', 'validate_dictionary_integrity'
]
