"""
Game Rules Module

Defines the fixed rules of a JORDLE round (word length, attempt limit,
keyboard alphabet) and loads the bundled slang dictionary used by the
development game service.
"""

import json
import os
from typing import Dict, List, Final

WORD_LENGTH: Final[int] = 5
"""Number of letters in every guess and in the secret word."""

MAX_ATTEMPTS: Final[int] = 6
"""
Maximum number of scored attempts per game.
Type: Final[int] - Immutable to prevent accidental modification
"""

# Russian layout, three rows; ENTER and BACKSPACE are the special keys
KEYBOARD_ROWS: Final[List[List[str]]] = [
    ['Й', 'Ц', 'У', 'К', 'Е', 'Н', 'Г', 'Ш', 'Щ', 'З', 'Х', 'Ъ'],
    ['Ф', 'Ы', 'В', 'А', 'П', 'Р', 'О', 'Л', 'Д', 'Ж', 'Э'],
    ['ENTER', 'Я', 'Ч', 'С', 'М', 'И', 'Т', 'Ь', 'Б', 'Ю', 'Ё', 'BACKSPACE']
]

ALPHABET: Final[str] = "ЙЦУКЕНГШЩЗХЪФЫВАПРОЛДЖЭЯЧСМИТЬБЮЁ"

ENTER_KEY: Final[str] = 'ENTER'
BACKSPACE_KEY: Final[str] = 'BACKSPACE'

# User-facing messages
SERVICE_UNAVAILABLE_MESSAGE: Final[str] = 'ОШИБКА: Сервер не отвечает.'
MALFORMED_RESPONSE_MESSAGE: Final[str] = 'ОШИБКА: Некорректный ответ сервера.'
WORD_REJECTED_MESSAGE: Final[str] = 'Слово не принято.'
WORD_NOT_IN_DICTIONARY_MESSAGE: Final[str] = 'Такого слова нет в словаре.'
WRONG_LENGTH_MESSAGE: Final[str] = f'Слово должно состоять из {WORD_LENGTH} букв.'


def _load_dictionary() -> List[Dict[str, str]]:
    """
    Load the slang dictionary from dictionary.json.

    Returns:
        List[Dict[str, str]]: Entries with uppercase ``word`` and ``desc``

    Raises:
        FileNotFoundError: If dictionary.json is not found
        ValueError: If the file is malformed or an entry is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'dictionary.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            entries = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Dictionary file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in dictionary.json: {e}") from e

    if not isinstance(entries, list):
        raise ValueError("JSON file must contain an array of entries")

    return [
        {'word': entry['word'].upper(), 'desc': entry.get('desc', '')}
        for entry in entries
    ]


# Bundled dictionary loaded from JSON file
DICTIONARY: Final[List[Dict[str, str]]] = _load_dictionary()


def validate_dictionary_integrity(entries: List[Dict[str, str]] = DICTIONARY) -> bool:
    """
    Validates a dictionary before it is served.

    Checks that the dictionary is non-empty, every word has exactly
    WORD_LENGTH letters, uses only keyboard letters, and appears once.

    Returns:
        bool: True if the dictionary passes all checks

    Raises:
        ValueError: If any check fails
    """
    if not entries:
        raise ValueError("Dictionary cannot be empty")

    words = [entry['word'] for entry in entries]
    for index, word in enumerate(words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if any(char not in ALPHABET for char in word):
            raise ValueError(f"Word at index {index} '{word}' contains letters outside the keyboard")

    if len(words) != len(set(words)):
        duplicates = sorted({word for word in words if words.count(word) > 1})
        raise ValueError(f"Duplicate words found in dictionary: {duplicates}")

    return True
