"""
Feedback Aggregation

Turns service masks into letter statuses and folds them into the keyboard.
"""

from typing import Dict, Iterable, Mapping, Sequence

from ..config.game_settings import ALPHABET
from ..models.errors import InvalidMaskCode
from ..models.game import LetterStatus, VerdictCode

KeyboardState = Dict[str, LetterStatus]

_VERDICT_STATUS = {
    VerdictCode.CORRECT: LetterStatus.GREEN,
    VerdictCode.PRESENT: LetterStatus.YELLOW,
    VerdictCode.ABSENT: LetterStatus.RED,
}


def classify(code) -> LetterStatus:
    """
    Map a single mask code to a letter status.

    Raises:
        InvalidMaskCode: If the code is not 0, 1 or 2
    """
    if not isinstance(code, int) or isinstance(code, bool) or code not in _VERDICT_STATUS:
        raise InvalidMaskCode(f"Unknown mask code: {code!r}")
    return _VERDICT_STATUS[code]


def new_keyboard(alphabet: Iterable[str] = ALPHABET) -> KeyboardState:
    """Keyboard with every letter in the default status."""
    return {letter: LetterStatus.DEFAULT for letter in alphabet}


def is_solved(mask: Sequence[int]) -> bool:
    return len(mask) > 0 and all(code == VerdictCode.CORRECT for code in mask)


def upgrade(state: Mapping[str, LetterStatus], guess_word: str, mask: Sequence[int]) -> KeyboardState:
    """
    Fold one scored guess into the keyboard.

    Mask position i describes letter i of the guess. A letter only moves to
    a status of equal or higher priority, so a green key never goes back.
    Letters missing from ``state`` are not tracked.

    Args:
        state: Current keyboard; left untouched
        guess_word: The guessed word
        mask: Service mask for the guess

    Returns:
        KeyboardState: A new keyboard mapping

    Raises:
        InvalidMaskCode: If the mask is malformed; nothing is applied
    """
    if len(mask) != len(guess_word):
        raise InvalidMaskCode(f"Mask has {len(mask)} codes for a {len(guess_word)}-letter guess")

    # Classify everything first so a bad code leaves no partial update
    statuses = [classify(code) for code in mask]

    updated = dict(state)
    for letter, new_status in zip(guess_word.upper(), statuses):
        current_status = updated.get(letter)
        if current_status is None:
            continue
        if new_status.priority >= current_status.priority:
            updated[letter] = new_status
    return updated
