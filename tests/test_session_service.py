import http.client

import pytest

from jordle.models.errors import InvalidMaskCode, ValidationError
from jordle.models.game import Attempt, DictionaryEntry, GameSession, GuessResult, LetterStatus
from jordle.services.feedback import new_keyboard
from jordle.services.session_service import GameSessionService

from .conftest import type_word

SOLUTION = DictionaryEntry('КРИНЖ', 'Испанский стыд')


def test_mount_loads_dictionary_and_starts_game(service, client):
    assert [entry.word for entry in service.dictionary] == ['ШКОЛА', 'КРИНЖ']
    assert client.calls == ['new-game']
    assert service.session == GameSession()
    assert service.keyboard == new_keyboard()


def test_dictionary_failure_keeps_empty_list(client, unreachable):
    client.dictionary_error = unreachable
    service = GameSessionService(client)
    service.mount()

    assert service.dictionary == []
    assert service.error_message is None
    assert service.session == GameSession()


def test_typing_is_capped_at_five_letters(service):
    type_word(service, 'ШАРАГА')
    assert service.current_guess == 'ШАРАГ'


def test_backspace_removes_last_letter(service):
    type_word(service, 'ШКО')
    service.press_key('BACKSPACE')
    assert service.current_guess == 'ШК'


def test_accepted_guess_records_attempt_and_keyboard(service, client):
    client.queue([0, 2, 1, 0, 2])
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')

    assert client.calls[-1] == ('ШКОЛА', 0)
    assert service.session.attempts == (Attempt('ШКОЛА', (0, 2, 1, 0, 2)),)
    assert service.current_guess == ''
    assert not service.is_over
    assert service.keyboard['Ш'] is LetterStatus.RED
    assert service.keyboard['К'] is LetterStatus.GREEN
    assert service.keyboard['О'] is LetterStatus.YELLOW
    assert service.keyboard['Л'] is LetterStatus.RED
    assert service.keyboard['А'] is LetterStatus.GREEN


def test_later_yellow_does_not_downgrade_green(service, client):
    client.queue([0, 2, 1, 0, 2])
    client.queue([1, 0, 0, 0, 0])
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')
    type_word(service, 'КРИНЖ')
    service.press_key('ENTER')

    assert client.calls[-1] == ('КРИНЖ', 1)
    assert service.keyboard['К'] is LetterStatus.GREEN


@pytest.mark.parametrize("word", ['', 'Ш', 'ШКОЛ'])
def test_enter_with_short_buffer_is_noop(service, client, word):
    type_word(service, word)
    service.press_key('ENTER')

    assert service.session.attempts == ()
    assert service.current_guess == word
    assert client.calls == ['new-game']


def test_submit_guess_is_noop_when_not_ready(service, client):
    type_word(service, 'ШКО')
    assert service.submit_guess() is False
    assert client.calls == ['new-game']


def test_win_ends_the_game(service, client):
    client.queue([2, 2, 2, 2, 2], solution=SOLUTION)
    type_word(service, 'КРИНЖ')
    service.press_key('ENTER')

    assert service.is_over
    assert service.session.won
    assert service.session.solution == SOLUTION


def test_six_misses_end_the_game_with_sixth_solution(service, client):
    words = ['ШКОЛА', 'ТАЧКА', 'БАЗАР', 'ХАВКА', 'ПОНТЫ', 'ЧУВАК']
    for index in range(6):
        client.queue([0, 0, 0, 0, 0], solution=SOLUTION if index == 5 else None)

    for index, word in enumerate(words):
        assert not service.is_over
        type_word(service, word)
        service.press_key('ENTER')
        assert service.session.attempt_count == index + 1

    assert service.is_over
    assert not service.session.won
    assert service.session.solution == SOLUTION
    assert [call[1] for call in client.calls[1:]] == [0, 1, 2, 3, 4, 5]


def test_solution_is_ignored_before_the_game_ends(service, client):
    client.queue([0, 0, 0, 0, 0], solution=SOLUTION)
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')

    assert not service.is_over
    assert service.session.solution is None


def test_over_is_decided_by_the_mask(service, client):
    client.queue([2, 2, 2, 2, 1], is_win=True)
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')
    assert not service.is_over


def test_input_rejected_when_over(service, client):
    client.queue([2, 2, 2, 2, 2], solution=SOLUTION)
    type_word(service, 'КРИНЖ')
    service.press_key('ENTER')

    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')
    assert service.current_guess == ''
    assert service.session.attempt_count == 1
    assert service.submit_guess() is False


def test_validation_error_keeps_buffer_and_attempts(service, client):
    client.queue_error(ValidationError('Такого слова нет в словаре.'))
    type_word(service, 'ЙЙЙЙЙ')
    service.press_key('ENTER')

    assert service.error_message == 'Такого слова нет в словаре.'
    assert service.current_guess == 'ЙЙЙЙЙ'
    assert service.session.attempts == ()
    assert service.keyboard == new_keyboard()
    assert service.pending is None


def test_next_key_press_clears_error(service, client):
    client.queue_error(ValidationError('Такого слова нет в словаре.'))
    type_word(service, 'ЙЙЙЙЙ')
    service.press_key('ENTER')
    service.press_key('BACKSPACE')

    assert service.error_message is None
    assert service.current_guess == 'ЙЙЙЙ'


def test_service_unavailable_keeps_buffer_for_retry(service, client, unreachable):
    client.queue_error(unreachable)
    client.queue([0, 2, 1, 0, 2])
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')

    assert service.error_message == 'ОШИБКА: Сервер не отвечает.'
    assert service.current_guess == 'ШКОЛА'

    service.press_key('ENTER')
    assert service.error_message is None
    assert service.session.attempt_count == 1
    assert client.calls[1:] == [('ШКОЛА', 0), ('ШКОЛА', 0)]


def test_invalid_mask_aborts_whole_update(service, client):
    client.results.append(GuessResult(mask=(0, 2, 9, 0, 2), is_win=False))
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')

    assert service.session.attempts == ()
    assert service.keyboard == new_keyboard()
    assert service.error_message == InvalidMaskCode().user_message
    assert service.pending is None


def test_dictionary_view_blocks_input(service, client):
    type_word(service, 'ШКОЛА')
    service.open_dictionary()
    service.press_key('BACKSPACE')
    service.press_key('ENTER')
    assert service.current_guess == 'ШКОЛА'
    assert client.calls == ['new-game']

    service.close_dictionary()
    service.press_key('BACKSPACE')
    assert service.current_guess == 'ШКОЛ'


def test_physical_keys_follow_same_path(service, client):
    client.queue([0, 0, 0, 0, 0])
    for key in ['ш', 'к', 'о', 'л', 'а', 'Shift', 'Enter']:
        service.handle_key_event(key)

    assert service.session.attempts[0].word == 'ШКОЛА'


def test_physical_latin_e_types_yo(service):
    type_word(service, 'СТР')
    service.handle_key_event('e')
    assert service.current_guess == 'СТРЁ'


def test_pending_guess_blocks_second_submission(service, client):
    type_word(service, 'ШКОЛА')
    pending = service.begin_guess()

    assert pending is not None
    assert service.begin_guess() is None
    service.press_key('BACKSPACE')
    assert service.current_guess == 'ШКОЛА'

    assert service.complete_guess(pending, GuessResult(mask=(0, 0, 0, 0, 0), is_win=False))
    assert service.session.attempt_count == 1
    assert service.current_guess == ''


def test_stale_answer_after_reset_is_discarded(service, client):
    type_word(service, 'ШКОЛА')
    pending = service.begin_guess()
    assert service.start_new_game()

    applied = service.complete_guess(pending, GuessResult(mask=(2, 2, 2, 2, 2), is_win=True, solution=SOLUTION))

    assert applied is False
    assert service.session == GameSession()
    assert service.keyboard == new_keyboard()


def test_stale_failure_after_reset_is_discarded(service, unreachable):
    type_word(service, 'ШКОЛА')
    pending = service.begin_guess()
    service.start_new_game()

    assert service.fail_guess(pending, unreachable) is False
    assert service.error_message is None


def test_reset_restores_initial_state(service, client):
    client.queue([2, 2, 2, 2, 2], solution=SOLUTION)
    type_word(service, 'КРИНЖ')
    service.press_key('ENTER')
    token = service.session_token

    assert service.start_new_game()

    assert service.session == GameSession()
    assert service.keyboard == new_keyboard()
    assert service.error_message is None
    assert service.pending is None
    assert service.session_token == token + 1


def test_reset_failure_keeps_game_and_reports(service, client, unreachable):
    client.queue([2, 2, 2, 2, 2], solution=SOLUTION)
    type_word(service, 'КРИНЖ')
    service.press_key('ENTER')
    client.new_game_error = unreachable

    assert service.start_new_game() is False
    assert service.is_over
    assert service.error_message == 'ОШИБКА: Сервер не отвечает.'


def test_multi_letter_key_is_ignored(service):
    service.press_key('ШАРАГА')
    assert service.current_guess == ''

    type_word(service, 'ШАРАГА')
    assert len(service.current_guess) == 5


def test_unexpected_client_failure_releases_pending_guess(service, client):
    client.queue_error(http.client.IncompleteRead(b'{"ma'))
    client.queue([0, 0, 0, 0, 0])
    type_word(service, 'ШКОЛА')
    service.press_key('ENTER')

    assert service.pending is None
    assert service.current_guess == 'ШКОЛА'
    assert service.session.attempts == ()
    assert service.error_message == 'ОШИБКА: Сервер не отвечает.'

    service.press_key('ENTER')
    assert service.session.attempt_count == 1


def test_first_load_failure_is_only_logged(client, unreachable):
    client.new_game_error = unreachable
    service = GameSessionService(client)
    service.mount()

    assert service.error_message is None
    assert service.session == GameSession()
