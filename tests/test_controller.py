"""Tests for turn sequencing."""

from unbeatable_ttt.controller import GameController, PlayConfig
from unbeatable_ttt.game import O, X, empty_cell_indices
from unbeatable_ttt.session import Result


def first_empty(board, computer_mark, human_mark):
    return empty_cell_indices(board)[0]


def test_play_config_defaults():
    config = PlayConfig()
    assert config.human_goes_first
    assert config.computer_move_delay == 0.5


def test_human_first_then_engine_replies():
    c = GameController(human_goes_first=True)
    assert c.status_text() == "Your Turn (X)"
    assert c.submit_human_move(4)
    assert c.session.board[4] == X
    assert c.is_computer_turn
    assert c.status_text() == "Computer is thinking..."

    index = c.play_computer_move()
    assert index in range(9) and index != 4
    assert c.session.board[index] == O
    assert c.is_human_turn


def test_human_move_rejected_on_computer_turn():
    c = GameController(human_goes_first=False, engine=first_empty)
    before = c.session
    assert not c.submit_human_move(4)
    assert c.session is before

    assert c.play_computer_move() == 0
    assert c.session.board[0] == X
    assert c.submit_human_move(4)
    assert c.session.board[4] == O


def test_computer_move_refused_on_human_turn():
    c = GameController(human_goes_first=True, engine=first_empty)
    before = c.session
    assert c.play_computer_move() is None
    assert c.session is before


def test_invalid_human_move_leaves_session():
    c = GameController(human_goes_first=True, engine=first_empty)
    c.submit_human_move(4)
    c.play_computer_move()
    before = c.session
    assert not c.submit_human_move(4)
    assert not c.submit_human_move(9)
    assert c.session is before


def test_reset_keeps_history_and_flips_roles():
    c = GameController(human_goes_first=True, engine=first_empty)
    # Human takes the middle column; the stub engine fills the top row from the left
    for index in (1, 4, 7):
        if c.session.is_game_over:
            break
        assert c.submit_human_move(index)
        c.play_computer_move()

    assert c.session.is_game_over
    assert c.status_text() == "Game Over"
    assert c.session.result is Result.WIN
    history = c.session.history

    s = c.reset(human_goes_first=False)
    assert s is c.session
    assert s.human_player == O
    assert s.computer_player == X
    assert s.current_player == X
    assert not s.is_game_over
    assert s.history == history
