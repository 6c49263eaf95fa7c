"""
Move validator for TicTacToe against the computer.
Decides whether a move may be applied. Never raises: a rejected move
is simply not applied.
"""

from typing import Optional, List
from dataclasses import dataclass
from .game_state import GameState, GameStatus, Mark, CELL_COUNT


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. The player cannot move while the AI is thinking
    3. Index must be on the board (0-8)
    4. Can only place on empty cells
    """

    def validate_player_move(self, game_state: GameState, index) -> ValidationResult:
        """
        Validate a move by the human player.

        Args:
            game_state: Current game state.
            index: Board index to place X on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game_state.status != GameStatus.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over ({game_state.status.value})"
            )

        if game_state.ai_thinking:
            return ValidationResult(
                is_valid=False,
                error_message="AI is still thinking"
            )

        return self._validate_cell(game_state, index)

    def validate_ai_move(self, game_state: GameState, index) -> ValidationResult:
        """Validate a move by the computer opponent."""
        if game_state.status != GameStatus.PLAYING:
            return ValidationResult(
                is_valid=False,
                error_message=f"Game is already over ({game_state.status.value})"
            )

        if not game_state.ai_thinking:
            return ValidationResult(
                is_valid=False,
                error_message="No AI move is owed"
            )

        return self._validate_cell(game_state, index)

    def _validate_cell(self, game_state: GameState, index) -> ValidationResult:
        # bool is an int subclass, but True is not a board index
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid index {index!r}. Must be an integer."
            )

        if not 0 <= index < CELL_COUNT:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid index {index}. Must be 0-{CELL_COUNT - 1}."
            )

        if game_state.board[index] != Mark.EMPTY:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {game_state.board[index].value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all cells the next mark could go on.

        Returns:
            List of board indices, empty if the game is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()
