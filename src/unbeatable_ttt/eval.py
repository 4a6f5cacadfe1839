"""
Evaluation functions.

Plays the engine against random and optimal opponents, walks every human
strategy exhaustively, and checks the engine's move on all legal states.
"""

import random
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

import numpy as np
from tqdm.auto import tqdm, trange

from .controller import Engine, GameController
from .game import Board, empty_cell_indices, other_mark
from .minimax import best_move, iter_all_legal_nonterminal_states
from .session import Result, Session, apply_move, new_session

HumanPolicy = Callable[[Board, str], int]

# Cache: (board, computer_mark, human_mark) -> chosen index.
# Lives in the harness only; the engine itself never caches.
_MOVE_CACHE: Dict[Tuple[Board, str, str], int] = {}


@dataclass
class EvalConfig:
    """Evaluation configuration."""

    # Random seed
    seed: int = 0

    # Games against the random opponent
    games: int = 100

    # Also check best_move on every legal state (slow)
    exhaustive_states: bool = False
    min_marks: int = 0

    # Paths
    save_dir: Optional[str] = None


def cached_best_move(board: Board, computer_mark: str, human_mark: str) -> int:
    """best_move, memoised per position for repeated harness games."""
    key = (board, computer_mark, human_mark)
    if key not in _MOVE_CACHE:
        _MOVE_CACHE[key] = best_move(board, computer_mark, human_mark)
    return _MOVE_CACHE[key]


def clear_cache():
    """Clear the harness move cache."""
    _MOVE_CACHE.clear()


def cache_size() -> int:
    return len(_MOVE_CACHE)


def random_policy(rng: random.Random) -> HumanPolicy:
    """Human that picks uniformly among empty cells."""
    def policy(board: Board, mark: str) -> int:
        return rng.choice(empty_cell_indices(board))
    return policy


def optimal_policy(board: Board, mark: str) -> int:
    """Human that plays the engine's own move for its mark."""
    return cached_best_move(board, mark, other_mark(mark))


def play_game(
    human_policy: HumanPolicy,
    human_goes_first: bool,
    engine: Engine = cached_best_move,
) -> Session:
    """
    Play one full game through a GameController.

    Returns:
        The finished Session.
    """
    controller = GameController(human_goes_first, engine=engine)

    while not controller.session.is_game_over:
        if controller.is_computer_turn:
            controller.play_computer_move()
        else:
            s = controller.session
            index = human_policy(s.board, s.human_player)
            if not controller.submit_human_move(index):
                raise ValueError(f"Human policy chose illegal move {index!r}")

    return controller.session


def eval_vs_random(games: int = 100, seed: int = 0) -> Dict[str, float]:
    """
    Evaluate engine vs random human, alternating who goes first.

    Returns:
        Dict with 'games', human win/tie/loss rates and game length stats
    """
    rng = random.Random(seed)
    policy = random_policy(rng)
    counts = {r.value: 0 for r in Result}
    lengths: List[int] = []

    for g in trange(games, desc="vs random", leave=False):
        session = play_game(policy, human_goes_first=(g % 2 == 0))
        counts[session.result.value] += 1
        lengths.append(9 - len(empty_cell_indices(session.board)))

    lengths_arr = np.asarray(lengths, dtype=np.float64)
    return {
        "games": games,
        "human_w": counts[Result.WIN.value] / games,
        "human_d": counts[Result.TIE.value] / games,
        "human_l": counts[Result.LOSE.value] / games,
        "len_mean": float(lengths_arr.mean()),
        "len_std": float(lengths_arr.std()),
    }


def eval_perfect_play() -> Dict[str, object]:
    """
    Both sides play best_move, in both turn orders.

    Returns:
        Dict with the result of each order and 'all_tie'
    """
    human_first = play_game(optimal_policy, human_goes_first=True)
    computer_first = play_game(optimal_policy, human_goes_first=False)
    return {
        "human_first": human_first.result.value,
        "computer_first": computer_first.result.value,
        "all_tie": human_first.result == computer_first.result == Result.TIE,
    }


def _advance_computer(session: Session) -> Session:
    while session.is_computer_turn:
        index = cached_best_move(session.board, session.computer_player, session.human_player)
        session = apply_move(session, index)
    return session


def eval_all_human_strategies(human_goes_first: bool) -> Dict[str, int]:
    """
    Play every possible human move sequence against the engine.

    This is exhaustive over the human's choices; the engine's replies are
    deterministic.

    Returns:
        Dict with 'games' and a count per result
    """
    counts = {r.value: 0 for r in Result}

    def explore(session: Session):
        session = _advance_computer(session)
        if session.is_game_over:
            counts[session.result.value] += 1
            return
        for index in empty_cell_indices(session.board):
            explore(apply_move(session, index))

    root = _advance_computer(new_session(human_goes_first))
    desc = "strategies (human first)" if human_goes_first else "strategies (computer first)"
    for index in tqdm(empty_cell_indices(root.board), desc=desc, leave=False):
        explore(apply_move(root, index))

    return {"games": sum(counts.values()), **counts}


def eval_best_move_all_states(min_marks: int = 0) -> Dict[str, int]:
    """
    Check best_move returns an empty cell on all legal non-terminal states.

    Args:
        min_marks: Skip states with fewer marks (early states are the
            most expensive to search)

    Returns:
        Dict with 'n_states' and 'illegal_moves'
    """
    states = [
        (board, mark) for board, mark in iter_all_legal_nonterminal_states()
        if 9 - len(empty_cell_indices(board)) >= min_marks
    ]

    illegal = 0
    for board, mark in tqdm(states, desc="all states", leave=False):
        index = best_move(board, mark, other_mark(mark))
        if index not in empty_cell_indices(board):
            illegal += 1
            tqdm.write(f"Illegal move {index} for {mark} on {board}")

    return {"n_states": len(states), "illegal_moves": illegal}
