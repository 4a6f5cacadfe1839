"""
Game session state machine.

A Session is an immutable snapshot: every accepted move produces a new
Session, rejected moves return the input object unchanged.
"""

import time
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Dict, Iterable, Optional, Tuple

from .game import (
    O,
    X,
    Board,
    apply_move as place_mark,
    create_empty_board,
    detect_winner,
    is_board_full,
    is_valid_move,
    other_mark,
)


class Result(Enum):
    """Outcome of a finished game, from the human's point of view."""
    WIN = "win"
    LOSE = "lose"
    TIE = "tie"


class SessionState(Enum):
    AWAITING_MOVE = "awaiting_move"
    FINISHED = "finished"


@dataclass(frozen=True)
class HistoryEntry:
    """One completed game."""
    timestamp: float            # Seconds since the epoch
    result: Result
    winner: Optional[str]       # None for a tie


@dataclass(frozen=True)
class Session:
    """
    The complete state of one game, plus the history of earlier games.

    X always moves first, whichever side the human plays.
    """
    board: Board
    current_player: str
    human_player: str
    computer_player: str
    is_game_over: bool = False
    result: Optional[Result] = None
    winner: Optional[str] = None
    history: Tuple[HistoryEntry, ...] = ()

    @property
    def state(self) -> SessionState:
        return SessionState.FINISHED if self.is_game_over else SessionState.AWAITING_MOVE

    @property
    def is_human_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.human_player

    @property
    def is_computer_turn(self) -> bool:
        return not self.is_game_over and self.current_player == self.computer_player


def new_session(human_goes_first: bool = True, history: Iterable[HistoryEntry] = ()) -> Session:
    """
    Start a fresh game.

    Args:
        human_goes_first: Human plays X if True, O otherwise.
        history: Completed games to carry forward unchanged.
    """
    human = X if human_goes_first else O
    return Session(
        board=create_empty_board(),
        current_player=X,
        human_player=human,
        computer_player=other_mark(human),
        history=tuple(history),
    )


def _result_for(session: Session, winner: Optional[str], board_full: bool) -> Optional[Result]:
    if winner == session.human_player:
        return Result.WIN
    if winner == session.computer_player:
        return Result.LOSE
    if board_full:
        return Result.TIE
    return None


def apply_move(
    session: Session,
    index: int,
    clock: Callable[[], float] = time.time,
) -> Session:
    """
    Play the current mover's mark at index.

    Returns the same Session object if the game is over or the move is
    invalid. Otherwise returns a new Session; when the move ends the game
    a HistoryEntry stamped with clock() is appended.
    """
    if session.is_game_over or not is_valid_move(session.board, index):
        return session

    board = place_mark(session.board, index, session.current_player)
    winner = detect_winner(board)
    result = _result_for(session, winner, is_board_full(board))
    # The mover flips on every accepted move, including the last one
    next_player = other_mark(session.current_player)

    if result is None:
        return replace(session, board=board, current_player=next_player)

    entry = HistoryEntry(timestamp=clock(), result=result, winner=winner)
    return replace(
        session,
        board=board,
        current_player=next_player,
        is_game_over=True,
        result=result,
        winner=winner,
        history=session.history + (entry,),
    )


def history_summary(history: Iterable[HistoryEntry]) -> Dict[str, int]:
    """Count wins, losses and ties (human perspective)."""
    counts = {r.value: 0 for r in Result}
    for entry in history:
        counts[entry.result.value] += 1
    return counts
