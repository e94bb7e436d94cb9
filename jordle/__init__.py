"""
JORDLE Game Package

Client-side engine for the JORDLE slang word game (turn control, feedback
aggregation, session orchestration) plus a development game service that
implements the same HTTP contract as the production one.
"""

from flask import Flask
from flask_cors import CORS
from .config import Config


def create_app(config_class=Config):
    """
    Application factory for the development game service.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with the game endpoints registered
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Browser clients are served from another origin
    CORS(app)

    from .services.game_service import get_game_service, initialize_game_service
    if get_game_service() is None:
        initialize_game_service()

    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    return app
