"""
Game Session Service

Owns the client-side state of a JORDLE game (session, keyboard, error slot,
dictionary view) and drives it through the game service.
"""

from dataclasses import dataclass, replace
from typing import List, Optional

from ..config.game_settings import BACKSPACE_KEY, ENTER_KEY, MAX_ATTEMPTS
from ..models.errors import JordleError, ServiceUnavailable
from ..models.game import Attempt, DictionaryEntry, GameSession, GuessResult
from ..utils.game_logger import game_logger
from . import turn_controller
from .feedback import KeyboardState, is_solved, new_keyboard, upgrade


@dataclass(frozen=True)
class PendingGuess:
    """A guess sent to the service and not yet answered."""
    word: str
    attempt_index: int
    session_token: int


class GameSessionService:
    """
    State machine over Active and Over for one player.

    This class handles:
    - Buffer edits and key presses, gated by the turn controller
    - Guess submission and atomic application of the service's verdict
    - Keyboard status aggregation across attempts
    - Resets, guarded by a session token so late answers are discarded
    - The dictionary view and the single user-facing error slot
    """

    def __init__(self, client, logger=game_logger):
        self.client = client
        self.logger = logger

        self.session = GameSession()
        self.keyboard: KeyboardState = new_keyboard()
        self.error_message: Optional[str] = None
        self.session_token = 0
        self.pending: Optional[PendingGuess] = None

        self.dictionary: List[DictionaryEntry] = []
        self.is_dictionary_open = False

    @property
    def is_over(self) -> bool:
        return self.session.is_over

    @property
    def current_guess(self) -> str:
        return self.session.current_guess

    def _gates(self) -> dict:
        return {'dictionary_open': self.is_dictionary_open, 'pending': self.pending is not None}

    # Startup

    def mount(self) -> None:
        """Load the dictionary and ask the service for a fresh word."""
        self.load_dictionary()
        self.start_new_game(initial=True)

    def load_dictionary(self) -> List[DictionaryEntry]:
        """Fetch the dictionary; on failure the list stays as it was."""
        try:
            self.dictionary = self.client.fetch_dictionary()
        except JordleError as e:
            self.logger.log_error(e, 'load_dictionary')
        return self.dictionary

    def open_dictionary(self) -> None:
        self.is_dictionary_open = True

    def close_dictionary(self) -> None:
        self.is_dictionary_open = False

    # Input

    def press_key(self, key: str) -> None:
        """
        Handle an on-screen key: a letter, ENTER or BACKSPACE.

        Any accepted key press hides the previous error.
        """
        if not turn_controller.accepts_input(self.session, **self._gates()):
            return

        self.error_message = None

        if key == ENTER_KEY:
            if turn_controller.can_submit(self.session, **self._gates()):
                self.submit_guess()
        elif key == BACKSPACE_KEY:
            self.delete_letter()
        else:
            self.append_letter(key)

    def handle_key_event(self, raw_key: str) -> None:
        """Handle a physical keyboard key name (e.g. 'Enter', 'а', 'e')."""
        key = turn_controller.translate_key(raw_key, len(self.session.current_guess))
        if key is not None:
            self.press_key(key)

    def append_letter(self, letter: str) -> None:
        session = turn_controller.append_letter(self.session, letter, **self._gates())
        if session is not self.session:
            self.error_message = None
            self.session = session

    def delete_letter(self) -> None:
        self.session = turn_controller.delete_letter(self.session, **self._gates())

    # Guess submission

    def begin_guess(self) -> Optional[PendingGuess]:
        """
        Mark the current buffer as sent.

        Returns:
            PendingGuess describing the request, or None when the turn
            controller does not allow a submission right now
        """
        if not turn_controller.can_submit(self.session, **self._gates()):
            return None

        self.pending = PendingGuess(
            word=self.session.current_guess,
            attempt_index=self.session.attempt_count,
            session_token=self.session_token
        )
        self.logger.log_user_action('submit_guess', guess=self.pending.word,
                                    attempt_index=self.pending.attempt_index,
                                    session_token=self.session_token)
        return self.pending

    def _is_current(self, pending: PendingGuess) -> bool:
        if pending is self.pending and pending.session_token == self.session_token:
            return True
        self.logger.log_game_event('stale_response_discarded', pending.session_token,
                                   current_token=self.session_token, guess=pending.word)
        return False

    def complete_guess(self, pending: PendingGuess, result: GuessResult) -> bool:
        """
        Apply a successful service answer.

        The keyboard upgrade, the new attempt and the end-of-game check are
        computed first and stored together; a malformed mask leaves
        everything as it was.

        Returns:
            bool: True if the answer was applied
        """
        if not self._is_current(pending):
            return False
        self.pending = None

        try:
            keyboard = upgrade(self.keyboard, pending.word, result.mask)
        except JordleError as e:
            self.logger.log_error(e, 'complete_guess', guess=pending.word)
            self.error_message = e.user_message
            return False

        attempts = self.session.attempts + (Attempt(word=pending.word, mask=tuple(result.mask)),)
        won = is_solved(result.mask)
        is_over = won or len(attempts) >= MAX_ATTEMPTS

        if result.is_win != won:
            self.logger.logger.warning(
                f"Service win flag {result.is_win} disagrees with mask {list(result.mask)}"
            )
        if is_over and result.solution is None:
            self.logger.logger.warning("Game over but the service sent no solution")

        self.session = replace(
            self.session,
            attempts=attempts,
            current_guess='',
            is_over=is_over,
            solution=result.solution if is_over else None
        )
        self.keyboard = keyboard
        self.error_message = None

        if is_over:
            self.logger.log_game_event('game_won' if won else 'game_lost', self.session_token,
                                       attempts=len(attempts),
                                       solution=result.solution.word if result.solution else None)
        return True

    def fail_guess(self, pending: PendingGuess, error: JordleError) -> bool:
        """
        Record a failed submission; the buffer is kept so the player can retry.

        Returns:
            bool: True if the failure belonged to the current session
        """
        if not self._is_current(pending):
            return False
        self.pending = None
        self.error_message = error.user_message
        self.logger.log_error(error, 'submit_guess', guess=pending.word)
        return True

    def submit_guess(self) -> bool:
        """
        Send the buffer to the service and apply the answer.

        Returns:
            bool: True if an attempt was recorded
        """
        pending = self.begin_guess()
        if pending is None:
            return False

        try:
            result = self.client.submit_guess(pending.word, pending.attempt_index)
        except JordleError as e:
            self.fail_guess(pending, e)
            return False
        except Exception as e:
            # Unexpected client failures still release the pending guess
            self.fail_guess(pending, ServiceUnavailable(f"submit_guess failed: {e!r}"))
            return False
        return self.complete_guess(pending, result)

    # Reset

    def reset(self) -> None:
        """Replace all local state with a fresh session."""
        self.session_token += 1
        self.pending = None
        self.session = GameSession()
        self.keyboard = new_keyboard()
        self.error_message = None

    def start_new_game(self, initial: bool = False) -> bool:
        """
        Ask the service for a new word, then reset.

        If the service cannot be reached the current game stays on screen
        and the error slot explains why. On the first load the failure is
        only logged.

        Returns:
            bool: True if the reset happened
        """
        self.logger.log_user_action('new_game', session_token=self.session_token)
        try:
            self.client.start_new_game()
        except JordleError as e:
            self.logger.log_error(e, 'new_game', initial=initial)
            if not initial:
                self.error_message = e.user_message
            return False

        self.reset()
        self.logger.log_game_event('game_started', self.session_token)
        return True


_session_service = None


def initialize_session_service(client) -> GameSessionService:
    """Initialize the global session service instance."""
    global _session_service
    _session_service = GameSessionService(client)
    return _session_service
