"""
Turn sequencing between a human front end and the minimax engine.

The controller owns the current Session and enforces whose turn it is.
It does not wait: callers that want "thinking time" sleep for
PlayConfig.computer_move_delay before calling play_computer_move().
"""

from dataclasses import dataclass
from typing import Callable, Optional

from .game import Board
from .minimax import best_move
from .session import Session, apply_move, new_session

Engine = Callable[[Board, str, str], int]


@dataclass
class PlayConfig:
    """Interactive play configuration."""

    human_goes_first: bool = True

    # Pause before the computer moves, in seconds
    computer_move_delay: float = 0.5


class GameController:
    """
    Holds the active Session and routes move requests to it.

    Game flow:
    1. Human submits a move on their turn
    2. If the computer is to move, the caller asks for its move
    3. Repeat until the session is finished, then reset()
    """

    def __init__(self, human_goes_first: bool = True, engine: Engine = best_move):
        self.engine = engine
        self.session = new_session(human_goes_first)

    @property
    def is_human_turn(self) -> bool:
        return self.session.is_human_turn

    @property
    def is_computer_turn(self) -> bool:
        return self.session.is_computer_turn

    def submit_human_move(self, index: int) -> bool:
        """
        Apply a human move.

        Returns:
            True if the move was accepted.
        """
        if not self.is_human_turn:
            return False

        before = self.session
        self.session = apply_move(before, index)
        return self.session is not before

    def play_computer_move(self) -> Optional[int]:
        """
        Ask the engine for a move and apply it.

        Returns:
            The chosen index, or None when it is not the computer's turn.
        """
        if not self.is_computer_turn:
            return None

        s = self.session
        index = self.engine(s.board, s.computer_player, s.human_player)
        self.session = apply_move(s, index)
        return index

    def reset(self, human_goes_first: bool) -> Session:
        """Start a new game, keeping the history of finished ones."""
        self.session = new_session(human_goes_first, self.session.history)
        return self.session

    def status_text(self) -> str:
        if self.session.is_game_over:
            return "Game Over"
        if self.is_human_turn:
            return f"Your Turn ({self.session.human_player})"
        return "Computer is thinking..."
