"""
Game Logger Module for JORDLE

Structured logging for player actions, game service calls and game events.
Shared by the client session and the development game service.
"""

import logging
import json
from datetime import datetime
from typing import Dict, Any, Optional
from pathlib import Path

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for JORDLE.

    Features:
    - Player action tracking (key presses, submissions, resets)
    - Game service request/response logging
    - Game event logging (wins, losses, discarded responses)
    - JSON structured logs for easy parsing
    """

    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)

        # Setup main game logger
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """Setup the main game logger with file and console handlers."""
        logger = logging.getLogger('jordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        # Create log file with date
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"

        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)

        file_formatter = logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_formatter = logging.Formatter(
            '%(levelname)s: %(message)s'
        )

        file_handler.setFormatter(file_formatter)
        console_handler.setFormatter(console_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        return logger

    def _get_user_identity(self, request=None) -> Dict[str, Optional[str]]:
        """Identify the caller: remote address on the service, 'local' in the client."""
        if request is None:
            return {'user_ip': 'local', 'endpoint': None}

        return {
            'user_ip': request.remote_addr or 'unknown',
            'endpoint': request.endpoint
        }

    def _create_log_entry(self,
                          event_type: str,
                          action: str,
                          user_info: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        """Create a structured log entry."""
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def log_user_action(self, action: str, request=None, **kwargs):
        """
        Log player or API-caller actions.

        Args:
            action: Type of action (e.g., 'new_game', 'submit_guess', 'key_press')
            request: Flask request object when logging on the service side
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)
        details = dict(kwargs)
        if request is not None:
            details.update({'method': request.method, 'url': request.url})

        log_message = self._create_log_entry('USER_ACTION', action, user_info, details)
        self.logger.info(log_message)

    def log_server_response(self,
                            action: str,
                            success: bool,
                            response_data: Any,
                            request=None,
                            **kwargs):
        """
        Log a game service response, on either side of the wire.

        Args:
            action: Action that was performed
            success: Whether the action succeeded
            response_data: Data returned by (or received from) the service
            request: Flask request object when logging on the service side
            **kwargs: Additional details to log
        """
        user_info = self._get_user_identity(request)

        details = {
            'success': success,
            'response_size': len(str(response_data)),
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, user_info, details)

        if success:
            self.logger.info(log_message)
        else:
            self.logger.warning(log_message)

    def log_game_event(self, event: str, session_token: Optional[int] = None, **kwargs):
        """
        Log game-specific events (wins, losses, stale responses, etc.).

        Args:
            event: Type of game event (e.g., 'game_won', 'game_lost')
            session_token: Token of the client session the event belongs to
            **kwargs: Additional game details
        """
        details = {'session_token': session_token, **kwargs}
        log_message = self._create_log_entry('GAME_EVENT', event, self._get_user_identity(), details)
        self.logger.info(log_message)

    def log_error(self, error: Exception, action: str, request=None, **kwargs):
        """
        Log errors with full context.

        Args:
            error: Exception that occurred
            action: Action that was being performed
            request: Flask request object when logging on the service side
        """
        details = {
            'error_type': type(error).__name__,
            'error_message': str(error),
            **kwargs
        }

        log_message = self._create_log_entry('ERROR', action, self._get_user_identity(request), details)
        self.logger.error(log_message)

    def _sanitize_response_data(self, data: Any) -> Any:
        """Keep log lines short: dictionaries are logged as a count."""
        if isinstance(data, list):
            return {'data_type': 'list', 'length': len(data)}
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        # Create a copy to avoid modifying original
        sanitized = data.copy()
        if isinstance(sanitized.get('dictionary'), list):
            sanitized['dictionary'] = {'entries': len(sanitized['dictionary'])}
        return sanitized


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
