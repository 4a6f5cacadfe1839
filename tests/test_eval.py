"""Whole-game properties of the engine."""

import random

import pytest

from unbeatable_ttt.eval import (
    EvalConfig,
    cache_size,
    clear_cache,
    eval_all_human_strategies,
    eval_best_move_all_states,
    eval_perfect_play,
    eval_vs_random,
    play_game,
    random_policy,
)
from unbeatable_ttt.session import Result


@pytest.mark.parametrize("human_goes_first", [True, False])
def test_human_never_wins_any_strategy(human_goes_first):
    res = eval_all_human_strategies(human_goes_first)
    assert res["games"] > 0
    assert res["win"] == 0
    assert res["games"] == res["lose"] + res["tie"]
    assert res["lose"] > 0


def test_perfect_play_always_ties():
    res = eval_perfect_play()
    assert res["human_first"] == "tie"
    assert res["computer_first"] == "tie"
    assert res["all_tie"]


def test_random_human_never_wins():
    res = eval_vs_random(games=20, seed=0)
    assert res["games"] == 20
    assert res["human_w"] == 0
    assert res["human_d"] + res["human_l"] == pytest.approx(1.0)
    assert 5 <= res["len_mean"] <= 9


def test_play_game_records_history():
    session = play_game(random_policy(random.Random(3)), human_goes_first=True)
    assert session.is_game_over
    assert session.result in (Result.LOSE, Result.TIE)
    assert len(session.history) == 1
    assert session.history[0].result is session.result
    assert cache_size() > 0


def test_play_game_rejects_illegal_policy():
    with pytest.raises(ValueError):
        play_game(lambda board, mark: 9, human_goes_first=True)


def test_best_move_legal_on_late_states():
    res = eval_best_move_all_states(min_marks=5)
    assert res["n_states"] > 0
    assert res["illegal_moves"] == 0


def test_eval_config_defaults():
    config = EvalConfig()
    assert config.games == 100
    assert not config.exhaustive_states
    assert config.save_dir is None


def test_clear_cache_empties_move_cache():
    play_game(random_policy(random.Random(1)), human_goes_first=True)
    assert cache_size() > 0

    clear_cache()
    assert cache_size() == 0

    play_game(random_policy(random.Random(1)), human_goes_first=True)
    assert cache_size() > 0
