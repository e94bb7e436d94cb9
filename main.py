"""
JORDLE - Main Entry Point

`python main.py serve` starts the development game service.
`python main.py play` plays in the terminal against JORDLE_API_URL.
"""

import argparse
from jordle import create_app
from jordle.config import get_config
from jordle.services.api_client import JordleApiClient
from jordle.services.game_service import initialize_game_service
from jordle.services.session_service import initialize_session_service
from jordle.utils.game_logger import game_logger


def serve(config_class):
    """Initialize the game service and start the Flask development server."""
    try:
        print("Initializing services...")
        game_service = initialize_game_service()
        print(f"✓ Game service initialized with {len(game_service.entries)} words")

        app = create_app(config_class)
        print("✓ Flask application created successfully")

        game_logger.logger.info("JORDLE development service starting")
        print(f"\nStarting JORDLE service on {config_class.HOST}:{config_class.PORT}")
        print(f"Debug mode: {config_class.DEBUG}")
        print("=" * 50)

        app.run(host=config_class.HOST, port=config_class.PORT, debug=config_class.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("JORDLE service shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


def play(config_class, api_url=None):
    """Run the terminal client."""
    from jordle.cli import run

    client = JordleApiClient(api_url or config_class.API_URL, config_class.REQUEST_TIMEOUT)
    service = initialize_session_service(client)
    try:
        run(service)
    except KeyboardInterrupt:
        print()


def main():
    parser = argparse.ArgumentParser(description="JORDLE: guess the slang word in six attempts")
    parser.add_argument("--env", default=None, help="configuration name (development, production, testing)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("serve", help="run the development game service")
    play_parser = subparsers.add_parser("play", help="play in the terminal")
    play_parser.add_argument("--api-url", default=None, help="game service base URL")

    args = parser.parse_args()
    config_class = get_config(args.env)

    if args.command == "serve":
        serve(config_class)
    else:
        play(config_class, args.api_url)


if __name__ == '__main__':
    main()
