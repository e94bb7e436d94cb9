"""
Game Service

Reference implementation of the remote JORDLE game service used for local
play and integration tests. It keeps the secret word on the server side and
only reveals it when the game ends.
"""

import random
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import (
    ALPHABET, DICTIONARY, MAX_ATTEMPTS, WORD_LENGTH, WORD_NOT_IN_DICTIONARY_MESSAGE,
    WRONG_LENGTH_MESSAGE, validate_dictionary_integrity
)
from ..models.game import VerdictCode


class GameService:
    """
    Single-game word service.

    This class handles:
    - Secret word selection from the dictionary
    - Guess validation (length, keyboard letters, dictionary membership)
    - Mask computation with duplicate-letter accounting
    - Revealing the solution on a win or on the last attempt
    """

    def __init__(self, entries: Optional[List[Dict[str, str]]] = None, rng: Optional[random.Random] = None):
        self.entries = [dict(entry) for entry in (entries if entries is not None else DICTIONARY)]
        validate_dictionary_integrity(self.entries)
        self.words = {entry['word']: entry for entry in self.entries}
        self.rng = rng or random.Random()
        self.target_word = self.rng.choice(self.entries)['word']

    def get_dictionary(self) -> List[Dict[str, str]]:
        """Dictionary entries in their stored order."""
        return [dict(entry) for entry in self.entries]

    def start_new_game(self) -> str:
        """
        Pick a new secret word.

        Returns:
            str: The new target word (kept server side)
        """
        self.target_word = self.rng.choice(self.entries)['word']
        return self.target_word

    def is_valid_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not guess or not isinstance(guess, str):
            return False, WRONG_LENGTH_MESSAGE

        normalized_guess = guess.strip().upper()
        if len(normalized_guess) != WORD_LENGTH:
            return False, WRONG_LENGTH_MESSAGE

        if any(char not in ALPHABET for char in normalized_guess):
            return False, WORD_NOT_IN_DICTIONARY_MESSAGE

        if normalized_guess not in self.words:
            return False, WORD_NOT_IN_DICTIONARY_MESSAGE

        return True, ""

    def check_word(self, guess: str, attempt_number: int) -> Dict:
        """
        Scores a guess against the secret word.

        Args:
            guess: The five-letter guess
            attempt_number: Attempts already made by the client (0-based)

        Returns:
            Dict with ``mask``, ``isWin`` and, when the game ends, ``solution``

        Raises:
            ValueError: If the guess is not a dictionary word
        """
        is_valid, error = self.is_valid_guess(guess)
        if not is_valid:
            raise ValueError(error)

        normalized_guess = guess.strip().upper()
        mask = self.evaluate_guess(normalized_guess, self.target_word)
        is_win = normalized_guess == self.target_word

        response = {'mask': mask, 'isWin': is_win}
        if is_win or attempt_number >= MAX_ATTEMPTS - 1:
            response['solution'] = dict(self.words[self.target_word])
        return response

    @staticmethod
    def evaluate_guess(guess: str, target: str) -> List[int]:
        """
        Wordle letter evaluation as mask codes.

        Exact matches are marked first; remaining letters are PRESENT only
        while unmatched copies of that letter remain in the target.
        """
        mask: List[Optional[int]] = []

        # Working copy to track letter consumption
        target_chars: List[Optional[str]] = list(target)

        # First pass: exact position matches
        for i, letter in enumerate(guess):
            if letter == target_chars[i]:
                mask.append(int(VerdictCode.CORRECT))
                target_chars[i] = None
            else:
                mask.append(None)

        # Second pass: present letters and misses
        for i, letter in enumerate(guess):
            if mask[i] is not None:
                continue
            if letter in target_chars:
                mask[i] = int(VerdictCode.PRESENT)
                # Remove first occurrence to prevent double-counting
                target_chars[target_chars.index(letter)] = None
            else:
                mask[i] = int(VerdictCode.ABSENT)

        return [code for code in mask if code is not None]


_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(entries: Optional[List[Dict[str, str]]] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(entries)
    return _game_service
