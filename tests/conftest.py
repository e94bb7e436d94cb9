import pytest

from jordle.models.errors import ServiceUnavailable
from jordle.models.game import DictionaryEntry, GuessResult
from jordle.services.session_service import GameSessionService


class FakeGameClient:
    """Stands in for JordleApiClient; answers are queued per call."""

    def __init__(self):
        self.results = []
        self.calls = []
        self.new_game_error = None
        self.dictionary_error = None
        self.dictionary = [
            DictionaryEntry('ШКОЛА', 'Школота'),
            DictionaryEntry('КРИНЖ', 'Испанский стыд'),
        ]

    def queue(self, mask, is_win=None, solution=None):
        if is_win is None:
            is_win = all(code == 2 for code in mask)
        self.results.append(GuessResult(mask=tuple(mask), is_win=is_win, solution=solution))

    def queue_error(self, error):
        self.results.append(error)

    def submit_guess(self, word, attempt_index):
        self.calls.append((word, attempt_index))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    def start_new_game(self):
        self.calls.append('new-game')
        if self.new_game_error:
            raise self.new_game_error

    def fetch_dictionary(self):
        if self.dictionary_error:
            raise self.dictionary_error
        return list(self.dictionary)


@pytest.fixture
def client():
    return FakeGameClient()


@pytest.fixture
def service(client):
    svc = GameSessionService(client)
    svc.mount()
    return svc


@pytest.fixture
def unreachable():
    return ServiceUnavailable("connection refused")


def type_word(service, word):
    for letter in word:
        service.press_key(letter)
