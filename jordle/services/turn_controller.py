"""
Turn Controller

Pure reducers gating every change to the guess buffer. Each function takes
the current GameSession and returns the next one (or the same object when
the event is rejected); GameSessionService is the only caller that stores
the result.
"""

from dataclasses import replace
from typing import Optional

from ..config.game_settings import ALPHABET, BACKSPACE_KEY, ENTER_KEY, WORD_LENGTH
from ..models.game import GameSession


def accepts_input(session: GameSession, dictionary_open: bool = False, pending: bool = False) -> bool:
    """Whether key presses are processed at all."""
    return not (session.is_over or dictionary_open or pending)


def append_letter(session: GameSession, letter: str,
                  dictionary_open: bool = False, pending: bool = False) -> GameSession:
    if not accepts_input(session, dictionary_open, pending):
        return session
    if len(session.current_guess) >= WORD_LENGTH:
        return session
    if not isinstance(letter, str) or len(letter) != 1 or letter.upper() not in ALPHABET:
        return session
    return replace(session, current_guess=session.current_guess + letter.upper())


def delete_letter(session: GameSession,
                  dictionary_open: bool = False, pending: bool = False) -> GameSession:
    if not accepts_input(session, dictionary_open, pending):
        return session
    return replace(session, current_guess=session.current_guess[:-1])


def can_submit(session: GameSession, dictionary_open: bool = False, pending: bool = False) -> bool:
    """A guess goes to the service only with a full buffer in an open game."""
    return accepts_input(session, dictionary_open, pending) and len(session.current_guess) == WORD_LENGTH


def translate_key(raw_key: str, guess_length: int) -> Optional[str]:
    """
    Translate a physical key name into an on-screen key.

    Returns the alphabet letter, ENTER or BACKSPACE, or None for keys the
    game ignores. The Latin ``E`` becomes ``Ё`` while the buffer has room;
    no other transliteration is done.
    """
    if not raw_key:
        return None
    key = raw_key.upper()

    if key == 'E' and guess_length < WORD_LENGTH and 'E' not in ALPHABET:
        key = 'Ё'

    if key in (ENTER_KEY, BACKSPACE_KEY):
        return key
    if len(key) == 1 and key in ALPHABET:
        return key
    return None
