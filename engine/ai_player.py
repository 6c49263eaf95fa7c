"""
AI player for TicTacToe against the computer.
Picks a uniformly random empty cell.
"""

import logging
import random
from typing import Optional
from .game_state import GameState, Mark, AI_MARK

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    The computer opponent.

    Every empty cell is equally likely. The game's difficulty setting is
    stored on the state but does not change how moves are picked.
    """

    def __init__(self, mark: Mark = AI_MARK, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            mark: Which mark the AI plays (default: O)
            rng: Random source. Pass a seeded random.Random for repeatable games.
        """
        self.mark = mark
        self.rng = rng or random.Random()

    def choose_move(self, game_state: GameState) -> Optional[int]:
        """
        Pick the cell for the next AI move.

        Args:
            game_state: Current game state.

        Returns:
            Board index (0-8), or None if the board has no empty cell.
        """
        empty_cells = game_state.get_empty_cells()

        if not empty_cells:
            logger.debug("AI has no empty cell to play")
            return None

        move = self.rng.choice(empty_cells)
        logger.debug("AI picked cell %d out of %d empty", move, len(empty_cells))
        return move
