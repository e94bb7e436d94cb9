"""
Terminal Client

Plays JORDLE against a game service from the terminal. Typed characters go
through the same key translation as a physical keyboard.
"""

from typing import Callable, List

from .config.game_settings import KEYBOARD_ROWS, MAX_ATTEMPTS, WORD_LENGTH, WRONG_LENGTH_MESSAGE
from .models.game import LetterStatus, VerdictCode
from .services.session_service import GameSessionService

# [Х] correct, (Х) elsewhere, ·х· absent
_CELL = {
    VerdictCode.CORRECT: '[{}]',
    VerdictCode.PRESENT: '({})',
    VerdictCode.ABSENT: '·{}·',
}
_KEY = {
    LetterStatus.GREEN: '[{}]',
    LetterStatus.YELLOW: '({})',
    LetterStatus.RED: '·{}·',
    LetterStatus.DEFAULT: ' {} ',
}

HELP = "Введите слово и нажмите Enter. Команды: :new — новая игра, :dict — словарь, :quit — выход."


def render(service: GameSessionService) -> str:
    lines: List[str] = []
    session = service.session

    for row in range(MAX_ATTEMPTS):
        if row < session.attempt_count:
            attempt = session.attempts[row]
            cells = [_CELL[VerdictCode(code)].format(letter.lower() if code == VerdictCode.ABSENT else letter)
                     for letter, code in zip(attempt.word, attempt.mask)]
        elif row == session.attempt_count and not session.is_over:
            guess = session.current_guess.ljust(WORD_LENGTH, '_')
            cells = [f' {letter} ' for letter in guess]
        else:
            cells = [' _ '] * WORD_LENGTH
        lines.append(''.join(cells))

    lines.append('')
    for keys in KEYBOARD_ROWS:
        lines.append(''.join(_KEY[service.keyboard[key]].format(key) for key in keys if key in service.keyboard))

    if service.error_message:
        lines.append('')
        lines.append(service.error_message)

    if session.is_over:
        lines.append('')
        lines.append('Победа!' if session.won else 'Попытки закончились.')
        if session.solution:
            lines.append(f"{session.solution.word} — {session.solution.description}")
        lines.append('Сыграть ещё: :new')

    return '\n'.join(lines)


def render_dictionary(service: GameSessionService) -> str:
    lines = [f"Словарь JORDLE ({len(service.dictionary)})"]
    lines.extend(f"{entry.word} — {entry.description}" for entry in service.dictionary)
    return '\n'.join(lines)


def run(service: GameSessionService,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print) -> None:
    """Interactive loop; returns on ':quit' or end of input."""
    service.mount()
    write(HELP)
    write(render(service))

    while True:
        try:
            line = read('> ').strip()
        except EOFError:
            break

        if line == ':quit':
            break
        if line == ':new':
            service.start_new_game()
        elif line == ':dict':
            service.open_dictionary()
            write(render_dictionary(service))
            service.close_dictionary()
            continue
        elif line:
            # Each line is a whole guess; drop what is left of the previous one
            for _ in range(len(service.current_guess)):
                service.handle_key_event("Backspace")
            for char in line:
                service.handle_key_event(char)
            if len(line) > WORD_LENGTH:
                write(WRONG_LENGTH_MESSAGE)
            else:
                service.handle_key_event("Enter")

        write(render(service))
