"""
Unbeatable TicTacToe - a human vs. computer game core.

This package implements the board rules, an exhaustive minimax engine
(no pruning) and an immutable game session state machine.
"""

from .game import (
    X,
    O,
    MARKS,
    WIN_LINES,
    create_empty_board,
    is_valid_move,
    apply_move,
    detect_winner,
    winning_line,
    is_board_full,
    empty_cell_indices,
    other_mark,
    format_board,
)
from .minimax import minimax, best_move, move_scores, iter_all_legal_nonterminal_states
from .session import (
    Result,
    SessionState,
    HistoryEntry,
    Session,
    new_session,
    history_summary,
)
from .session import apply_move as apply_session_move
from .controller import PlayConfig, GameController
from .eval import (
    EvalConfig,
    play_game,
    eval_vs_random,
    eval_perfect_play,
    eval_all_human_strategies,
    eval_best_move_all_states,
    clear_cache,
    cache_size,
)

__version__ = "0.1.0"
__all__ = [
    "X",
    "O",
    "MARKS",
    "WIN_LINES",
    "create_empty_board",
    "is_valid_move",
    "apply_move",
    "detect_winner",
    "winning_line",
    "is_board_full",
    "empty_cell_indices",
    "other_mark",
    "format_board",
    "minimax",
    "best_move",
    "move_scores",
    "iter_all_legal_nonterminal_states",
    "Result",
    "SessionState",
    "HistoryEntry",
    "Session",
    "new_session",
    "apply_session_move",
    "history_summary",
    "PlayConfig",
    "GameController",
    "EvalConfig",
    "play_game",
    "eval_vs_random",
    "eval_perfect_play",
    "eval_all_human_strategies",
    "eval_best_move_all_states",
    "clear_cache",
    "cache_size",
]
