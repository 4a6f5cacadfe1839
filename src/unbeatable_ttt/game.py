"""
TicTacToe board rules.

Board representation: tuple of length 9, row-major (index = row * 3 + col)
  - None: empty
  - "X" / "O": mark

Boards are never mutated; every move returns a new tuple.
"""

from typing import List, Optional, Tuple

X = "X"
O = "O"
MARKS = (X, O)

Cell = Optional[str]
Board = Tuple[Cell, ...]

# Winning lines (rows, columns, diagonals)
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


def create_empty_board() -> Board:
    """Return a board with all 9 cells empty."""
    return (None,) * 9


def other_mark(mark: str) -> str:
    """Return the opposing mark."""
    if mark == X:
        return O
    if mark == O:
        return X
    raise ValueError(f"Not a mark: {mark!r}")


def is_valid_move(board: Board, index: int) -> bool:
    """True iff index is on the board and the cell is empty."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < 9 and board[index] is None


def apply_move(board: Board, index: int, mark: str) -> Board:
    """
    Place mark at index.

    Returns the same board object when the move is invalid, otherwise a
    new board. The input board is never modified.
    """
    if not is_valid_move(board, index):
        return board
    return board[:index] + (mark,) + board[index + 1:]


def winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    """Return the first satisfied winning line, or None."""
    for line in WIN_LINES:
        a, b, c = line
        if board[a] is not None and board[a] == board[b] == board[c]:
            return line
    return None


def winners_set(board: Board) -> set:
    """Return set of marks owning a line (both only on illegal boards)."""
    return {board[a] for a, b, c in WIN_LINES
            if board[a] is not None and board[a] == board[b] == board[c]}


def detect_winner(board: Board) -> Optional[str]:
    """Return the mark owning the first completed line, or None."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def is_board_full(board: Board) -> bool:
    return all(cell is not None for cell in board)


def empty_cell_indices(board: Board) -> List[int]:
    """Return indices of empty cells in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def side_to_move(board: Board) -> str:
    """Infer side to move from board state (X plays first)."""
    x_cnt = sum(1 for cell in board if cell == X)
    o_cnt = sum(1 for cell in board if cell == O)
    return X if x_cnt == o_cnt else O


def is_legal_board(board: Board) -> bool:
    """Check if board is reachable under the rules."""
    if len(board) != 9 or any(cell not in (None, X, O) for cell in board):
        return False

    x_cnt = sum(1 for cell in board if cell == X)
    o_cnt = sum(1 for cell in board if cell == O)

    # X goes first, so x_cnt == o_cnt or x_cnt == o_cnt + 1
    if not (x_cnt == o_cnt or x_cnt == o_cnt + 1):
        return False

    # Can't have both winners
    return len(winners_set(board)) < 2


def format_board(board: Board, show_indices: bool = False) -> str:
    """Render board as three text rows."""
    rows = []
    for r in range(3):
        cells = []
        for c in range(3):
            i = r * 3 + c
            if board[i] is not None:
                cells.append(board[i])
            else:
                cells.append(str(i) if show_indices else " ")
        rows.append("|".join(cells))
    return "\n-+-+-\n".join(rows)
