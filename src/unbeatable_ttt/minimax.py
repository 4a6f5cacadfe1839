"""
Exact minimax search for the computer's move.

Brute force over the full game tree: no pruning and no caching. Scores are
from the computer's point of view:
  - computer wins: 10 - depth (prefer faster wins)
  - human wins:    depth - 10 (prefer slower losses)
  - draw:          0
"""

from typing import Dict, Iterator, Optional, Tuple

from .game import (
    MARKS,
    O,
    X,
    Board,
    apply_move,
    detect_winner,
    empty_cell_indices,
    is_board_full,
    is_legal_board,
    side_to_move,
)

WIN_SCORE = 10


def minimax(
    board: Board,
    depth: int,
    maximizing: bool,
    computer_mark: str,
    human_mark: str,
) -> Tuple[int, Optional[int]]:
    """
    Score a position by exhaustive search.

    Args:
        board: Current board state
        depth: Plies searched so far from the root
        maximizing: True if the computer moves next
        computer_mark: Mark the search maximizes for
        human_mark: Mark the search minimizes for

    Returns:
        (score, index) where index is the chosen move, or None at a
        terminal position
    """
    winner = detect_winner(board)

    # Terminal states; order matters
    if winner == computer_mark:
        return WIN_SCORE - depth, None
    if winner == human_mark:
        return depth - WIN_SCORE, None
    if is_board_full(board):
        return 0, None

    moves = empty_cell_indices(board)
    mark = computer_mark if maximizing else human_mark

    best_index = moves[0]
    # Outside the reachable score range, so the first move always replaces it
    best_score = -(WIN_SCORE + 1) if maximizing else WIN_SCORE + 1

    for index in moves:
        next_board = apply_move(board, index, mark)
        score, _ = minimax(next_board, depth + 1, not maximizing, computer_mark, human_mark)

        # Strict comparison: the first of equally scored moves is kept
        if maximizing and score > best_score:
            best_score, best_index = score, index
        elif not maximizing and score < best_score:
            best_score, best_index = score, index

    return best_score, best_index


def _check_marks(computer_mark: str, human_mark: str):
    if computer_mark not in MARKS or human_mark not in MARKS:
        raise ValueError(f"Marks must be X or O, got {computer_mark!r} and {human_mark!r}")
    if computer_mark == human_mark:
        raise ValueError(f"Computer and human share mark {computer_mark!r}")


def best_move(board: Board, computer_mark: str, human_mark: str) -> int:
    """
    Return the optimal cell index for the computer.

    Raises:
        ValueError: if the game is already decided or the board is full.
    """
    _check_marks(computer_mark, human_mark)
    if detect_winner(board) is not None or is_board_full(board):
        raise ValueError("best_move called on a finished board")

    _, index = minimax(board, 0, True, computer_mark, human_mark)
    return index


def move_scores(board: Board, computer_mark: str, human_mark: str) -> Dict[int, int]:
    """
    Root score of every empty cell, in ascending index order.

    best_move picks the first index holding the maximum of these values.
    """
    _check_marks(computer_mark, human_mark)
    if detect_winner(board) is not None or is_board_full(board):
        raise ValueError("move_scores called on a finished board")

    scores = {}
    for index in empty_cell_indices(board):
        next_board = apply_move(board, index, computer_mark)
        scores[index], _ = minimax(next_board, 1, False, computer_mark, human_mark)
    return scores


def iter_all_legal_nonterminal_states() -> Iterator[Tuple[Board, str]]:
    """
    Iterate over all legal non-terminal board states.

    Yields:
        (board, mark_to_move) tuples for exhaustive evaluation.
    """
    symbols = (None, X, O)
    for n in range(3**9):
        # Decode base-3 representation
        x = n
        cells = []
        for _ in range(9):
            cells.append(symbols[x % 3])
            x //= 3
        board = tuple(cells)

        # Turn order and single-winner checks
        if not is_legal_board(board):
            continue

        # Skip terminal
        if detect_winner(board) is not None or is_board_full(board):
            continue

        yield board, side_to_move(board)
