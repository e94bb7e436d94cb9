"""
Configuration Management Module

Centralized configuration for the JORDLE client and the development game
service. All configuration is loaded from environment variables with
sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(Path(__file__).with_name('config.env'))


def _optional_float(name: str):
    value = os.getenv(name)
    if value in (None, ''):
        return None
    return float(value)


class Config:
    """Base configuration class with all settings."""

    # Flask Settings (development service)
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Development service settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 3001))

    # Client Settings
    API_URL = os.getenv('JORDLE_API_URL', 'http://localhost:3001')
    # No timeout unless configured; a hung request stays pending
    REQUEST_TIMEOUT = _optional_float('JORDLE_REQUEST_TIMEOUT')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False
    API_URL = os.getenv('JORDLE_API_URL', 'https://jordlewebservice.onrender.com')


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}


def get_config(name=None):
    """Return the configuration class selected by name or ``JORDLE_ENV``."""
    name = name or os.getenv('JORDLE_ENV', 'default')
    return config.get(name, config['default'])
