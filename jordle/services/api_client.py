"""
Game Service Client

HTTP client for the remote JORDLE game service (/dictionary, /new-game,
/check-word). Transport problems become ServiceUnavailable, rejected guesses
become ValidationError, and bodies that cannot be read become
MalformedResponse.
"""

import http.client
import json
import socket
import urllib.error
import urllib.request
from typing import Any, List, Optional

from ..config.app_config import Config
from ..config.game_settings import WORD_LENGTH
from ..models.errors import MalformedResponse, ServiceUnavailable, ValidationError
from ..models.game import DictionaryEntry, GuessResult
from ..utils.game_logger import game_logger


class JordleApiClient:
    """Blocking client for the game service endpoints."""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or Config.API_URL).rstrip('/')
        self.timeout = timeout if timeout is not None else Config.REQUEST_TIMEOUT

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def _open(self, req: urllib.request.Request):
        if self.timeout is None:
            return urllib.request.urlopen(req)
        return urllib.request.urlopen(req, timeout=self.timeout)

    def _request(self, method: str, path: str, payload: Optional[dict] = None) -> bytes:
        data = None
        headers = {'Accept': 'application/json'}
        if payload is not None:
            data = json.dumps(payload, ensure_ascii=False).encode('utf-8')
            headers['Content-Type'] = 'application/json'

        req = urllib.request.Request(self._url(path), data=data, headers=headers, method=method)
        try:
            with self._open(req) as response:
                return response.read()
        except urllib.error.HTTPError:
            # HTTPError is a URLError subclass; callers decide what a
            # non-200 answer means
            raise
        except (urllib.error.URLError, http.client.HTTPException, socket.timeout, ConnectionError, OSError) as e:
            game_logger.log_error(e, f"{method} {path}", url=self._url(path))
            raise ServiceUnavailable(f"{method} {path} failed: {e}") from e

    @staticmethod
    def _decode(body: bytes) -> Any:
        try:
            return json.loads(body.decode('utf-8'))
        except (UnicodeDecodeError, ValueError) as e:
            raise MalformedResponse(f"Response is not valid JSON: {e}") from e

    def fetch_dictionary(self) -> List[DictionaryEntry]:
        """GET /dictionary as an ordered list of entries."""
        try:
            body = self._request('GET', '/dictionary')
        except urllib.error.HTTPError as e:
            raise ServiceUnavailable(f"GET /dictionary returned {e.code}") from e

        data = self._decode(body)
        if not isinstance(data, list):
            raise MalformedResponse("Dictionary response must be an array")
        game_logger.log_server_response('fetch_dictionary', True, data)
        return [DictionaryEntry.from_dict(entry) for entry in data]

    def start_new_game(self) -> None:
        """GET /new-game; only the acknowledgement matters."""
        try:
            self._request('GET', '/new-game')
        except urllib.error.HTTPError as e:
            game_logger.log_error(e, 'start_new_game', status=e.code)
            raise ServiceUnavailable(f"GET /new-game returned {e.code}") from e
        game_logger.log_server_response('start_new_game', True, {})

    def submit_guess(self, word: str, attempt_index: int) -> GuessResult:
        """
        POST /check-word.

        Args:
            word: The five-letter guess
            attempt_index: Number of attempts already recorded (0-based)

        Returns:
            GuessResult: Parsed mask, win flag and optional solution

        Raises:
            ValidationError: The service answered with a non-200 status
            ServiceUnavailable: The request never completed
            MalformedResponse: The success body could not be interpreted
        """
        payload = {'guess': word, 'attemptNumber': attempt_index}
        try:
            body = self._request('POST', '/check-word', payload)
        except urllib.error.HTTPError as e:
            message = self._error_message(e)
            game_logger.log_server_response('submit_guess', False, {'error': message},
                                            status=e.code, guess=word)
            raise ValidationError(message) from e

        data = self._decode(body)
        game_logger.log_server_response('submit_guess', True, data, guess=word,
                                        attempt_index=attempt_index)
        return GuessResult.from_dict(data, WORD_LENGTH)

    @staticmethod
    def _error_message(error: urllib.error.HTTPError) -> Optional[str]:
        try:
            data = json.loads(error.read().decode('utf-8'))
        except (OSError, UnicodeDecodeError, ValueError, AttributeError):
            return None
        if isinstance(data, dict) and isinstance(data.get('error'), str):
            return data['error']
        return None
