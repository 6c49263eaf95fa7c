"""
Game engine for TicTacToe against the computer.

Every operation takes a GameState and returns the next one. The input is
never modified. A move that is not allowed returns the very same state
object, so callers can tell "nothing happened" with an identity check.
"""

import logging
from typing import Optional
from .game_state import (
    GameState,
    GameStatus,
    Difficulty,
    Mark,
    PLAYER_MARK,
    AI_MARK,
    empty_board,
)
from .move_validator import MoveValidator
from .win_checker import WinChecker, BoardResult, Outcome
from .ai_player import AIPlayer

logger = logging.getLogger(__name__)


class GameEngine:
    """
    The rules of the game as state transitions.

    Game flow:
    1. Player (X) picks an empty cell
    2. If that did not end the game, the AI owes a move (ai_thinking)
    3. AI (O) picks a random empty cell
    4. Repeat until someone wins or the board is full
    """

    def __init__(
        self,
        ai: Optional[AIPlayer] = None,
        validator: Optional[MoveValidator] = None,
        win_checker: Optional[WinChecker] = None
    ):
        self.ai = ai or AIPlayer(AI_MARK)
        self.validator = validator or MoveValidator()
        self.win_checker = win_checker or WinChecker()

    def new_game(self, difficulty: Difficulty = Difficulty.EASY) -> GameState:
        """Fresh session state: empty board, X to move, scores at zero."""
        return GameState(difficulty=difficulty)

    def evaluate_board(self, board) -> BoardResult:
        return self.win_checker.evaluate(board)

    def apply_player_move(self, state: GameState, index: int) -> GameState:
        """
        Place X at index.

        Args:
            state: Current game state.
            index: Board index (0-8).

        Returns:
            The next state, or `state` itself if the move is not allowed.
        """
        result = self.validator.validate_player_move(state, index)
        if not result.is_valid:
            logger.debug("Player move at %r ignored: %s", index, result.error_message)
            return state

        new_state = state.copy()
        new_state.board[index] = PLAYER_MARK

        outcome = self.evaluate_board(new_state.board)

        if outcome.winner == PLAYER_MARK:
            new_state.status = GameStatus.PLAYER_WIN
            new_state.winning_line = outcome.winning_line
            new_state.scores.player_wins += 1
            logger.info("Player wins with line %s", outcome.winning_line)
            return new_state

        if outcome.outcome == Outcome.DRAW:
            new_state.status = GameStatus.DRAW
            new_state.scores.draws += 1
            logger.info("Game ends in a draw")
            return new_state

        # The AI now owes a move
        new_state.current_player = AI_MARK
        new_state.ai_thinking = True
        return new_state

    def apply_opponent_move(self, state: GameState, index: Optional[int] = None) -> GameState:
        """
        Place O for the AI.

        Args:
            state: Current game state. Must have ai_thinking set.
            index: Cell to play. When None the AI player picks one.

        Returns:
            The next state, or `state` itself if no AI move is possible.
        """
        if index is None:
            if not state.ai_thinking or state.is_game_over:
                logger.debug("AI move ignored: no move is owed")
                return state
            index = self.ai.choose_move(state)
            if index is None:
                return state

        result = self.validator.validate_ai_move(state, index)
        if not result.is_valid:
            logger.debug("AI move at %r ignored: %s", index, result.error_message)
            return state

        new_state = state.copy()
        new_state.board[index] = AI_MARK
        new_state.current_player = PLAYER_MARK
        new_state.ai_thinking = False

        outcome = self.evaluate_board(new_state.board)

        if outcome.winner == AI_MARK:
            new_state.status = GameStatus.AI_WIN
            new_state.winning_line = outcome.winning_line
            new_state.scores.ai_wins += 1
            logger.info("AI wins with line %s", outcome.winning_line)
        elif outcome.outcome == Outcome.DRAW:
            new_state.status = GameStatus.DRAW
            new_state.scores.draws += 1
            logger.info("Game ends in a draw")

        return new_state

    def reset_game(self, state: GameState) -> GameState:
        """
        Start a new game. Scores and difficulty carry over.

        The generation goes up so a pending AI move from the old game
        can be recognised as stale.
        """
        new_state = state.copy()
        new_state.board = empty_board()
        new_state.current_player = Mark.X
        new_state.status = GameStatus.PLAYING
        new_state.ai_thinking = False
        new_state.winning_line = None
        new_state.generation = state.generation + 1
        return new_state

    def set_difficulty(self, state: GameState, level) -> GameState:
        """
        Store a difficulty level.

        Args:
            level: A Difficulty, or its name or value ("hard", "HARD").

        Returns:
            The next state, or `state` itself for an unknown level.
        """
        difficulty = Difficulty.parse(level)
        if difficulty is None:
            logger.debug("Unknown difficulty %r ignored", level)
            return state

        new_state = state.copy()
        new_state.difficulty = difficulty
        return new_state
