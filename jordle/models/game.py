"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidMaskCode, MalformedResponse


class VerdictCode(IntEnum):
    """Per-letter correctness code produced by the game service."""
    ABSENT = 0
    PRESENT = 1
    CORRECT = 2


class LetterStatus(Enum):
    """Best-known status of a keyboard letter."""
    DEFAULT = "default"
    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"

    @property
    def priority(self) -> int:
        return _PRIORITY[self]


# Shared by every read and write of keyboard statuses
_PRIORITY = {
    LetterStatus.DEFAULT: 0,
    LetterStatus.RED: 1,
    LetterStatus.YELLOW: 2,
    LetterStatus.GREEN: 3,
}


@dataclass(frozen=True)
class DictionaryEntry:
    """A dictionary word with its description (also used for the solution)."""
    word: str
    description: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DictionaryEntry":
        if not isinstance(data, dict) or not isinstance(data.get('word'), str):
            raise MalformedResponse(f"Invalid dictionary entry: {data!r}")
        return cls(word=data['word'], description=data.get('desc') or "")


Solution = DictionaryEntry


@dataclass(frozen=True)
class Attempt:
    """One scored guess; rows of the grid in chronological order."""
    word: str
    mask: Tuple[int, ...]


@dataclass(frozen=True)
class GuessResult:
    """Successful /check-word response."""
    mask: Tuple[int, ...]
    is_win: bool
    solution: Optional[DictionaryEntry] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any], word_length: int = 5) -> "GuessResult":
        """
        Parse a service response body.

        Raises:
            MalformedResponse: If the body is not an object with a mask list
            InvalidMaskCode: If the mask has the wrong length or unknown codes
        """
        if not isinstance(data, dict) or not isinstance(data.get('mask'), list):
            raise MalformedResponse(f"Response has no mask: {data!r}")

        mask = data['mask']
        if len(mask) != word_length:
            raise InvalidMaskCode(f"Mask must have {word_length} codes, got {len(mask)}")
        for code in mask:
            # bool is an int subclass but never a valid code
            if isinstance(code, bool) or code not in tuple(VerdictCode):
                raise InvalidMaskCode(f"Unknown mask code: {code!r}")

        solution = data.get('solution')
        return cls(
            mask=tuple(int(code) for code in mask),
            is_win=bool(data.get('isWin', False)),
            solution=DictionaryEntry.from_dict(solution) if solution else None
        )


@dataclass(frozen=True)
class GameSession:
    """
    Client-side state of one game.

    Replaced wholesale by every transition; ``solution`` is only set once
    ``is_over`` becomes true.
    """
    attempts: Tuple[Attempt, ...] = field(default_factory=tuple)
    current_guess: str = ""
    is_over: bool = False
    solution: Optional[DictionaryEntry] = None

    @property
    def attempt_count(self) -> int:
        return len(self.attempts)

    @property
    def won(self) -> bool:
        return bool(self.attempts) and all(
            code == VerdictCode.CORRECT for code in self.attempts[-1].mask
        )
