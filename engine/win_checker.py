"""
Win checker for TicTacToe against the computer.
Checks if a mark has completed a line or if the game is a draw.
"""

from enum import Enum
from typing import Optional, Sequence, Tuple
from dataclasses import dataclass
from .game_state import Mark


# All possible winning lines, as board indices.
# Order matters: the first complete line decides the result.
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class Outcome(Enum):
    """What evaluating a board can tell us."""
    NONE = "none"
    WIN = "win"
    DRAW = "draw"


@dataclass(frozen=True)
class BoardResult:
    """Result of evaluating a board."""
    outcome: Outcome
    winner: Optional[Mark] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome != Outcome.NONE


NO_RESULT = BoardResult(Outcome.NONE)
DRAW_RESULT = BoardResult(Outcome.DRAW)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 identical marks in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Sequence[Mark]) -> BoardResult:
        """
        Evaluate a board.

        Args:
            board: The 9 board cells.

        Returns:
            A win for the first complete line, a draw for a full board
            with no complete line, otherwise no result.
        """
        for line in self.WINNING_LINES:
            winner = self._check_line(board, line)
            if winner is not None:
                return BoardResult(Outcome.WIN, winner=winner, winning_line=line)

        if all(cell != Mark.EMPTY for cell in board):
            return DRAW_RESULT

        return NO_RESULT

    def check_winner(self, board: Sequence[Mark]) -> Optional[Mark]:
        """
        Check if there's a winner.

        Returns:
            The winning Mark, or None if no winner yet.
        """
        return self.evaluate(board).winner

    def check_draw(self, board: Sequence[Mark]) -> bool:
        """A draw is a full board with no complete line."""
        return self.evaluate(board).outcome == Outcome.DRAW

    def get_winning_line(self, board: Sequence[Mark]) -> Optional[Tuple[int, int, int]]:
        """The line that won, or None."""
        return self.evaluate(board).winning_line

    def _check_line(
        self,
        board: Sequence[Mark],
        line: Tuple[int, int, int]
    ) -> Optional[Mark]:
        """
        Check if a single line has a winner.

        Returns:
            The mark if all 3 cells hold it, None otherwise.
        """
        a, b, c = line
        if board[a] != Mark.EMPTY and board[a] == board[b] == board[c]:
            return board[a]
        return None


_default_checker = WinChecker()


def evaluate_board(board: Sequence[Mark]) -> BoardResult:
    """Evaluate a board with the standard winning lines."""
    return _default_checker.evaluate(board)
