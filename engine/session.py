"""
Game session for TicTacToe against the computer.

A session owns exactly one GameState and is the only thing that replaces it.
Front ends send it cell selections, resets and difficulty changes, and read
`session.state` (or register a listener) to draw the game.
"""

import logging
from typing import Any, Callable, List, Optional
from .config import GameConfig
from .game_engine import GameEngine
from .game_state import GameState
from .scheduler import Scheduler, ManualScheduler

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameSession:
    """
    One player's session against the computer.

    The AI move is deferred: after the player's move the session schedules
    it on the scheduler and returns right away. The scheduled move carries
    the game's generation and is dropped if the game was reset meanwhile.
    """

    def __init__(
        self,
        scheduler: Optional[Scheduler] = None,
        engine: Optional[GameEngine] = None,
        config: Optional[GameConfig] = None
    ):
        """
        Initialize the session.

        Args:
            scheduler: Where the deferred AI move runs. Defaults to a
                ManualScheduler that only fires when advanced.
            engine: Game rules. Uses defaults if not provided.
            config: Game configuration. Uses defaults if not provided.
        """
        self.config = config or GameConfig()
        self.scheduler = scheduler or ManualScheduler()
        self.engine = engine or GameEngine()

        self._state = self.engine.new_game(self.config.DEFAULT_DIFFICULTY)
        self._pending_handle: Any = None
        self._listeners: List[Listener] = []

    @property
    def state(self) -> GameState:
        return self._state

    def add_listener(self, listener: Listener):
        """Call listener with the new state after every change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _commit(self, new_state: GameState) -> bool:
        if new_state is self._state:
            return False
        self._state = new_state
        for listener in list(self._listeners):
            listener(new_state)
        return True

    def select_cell(self, index: int) -> bool:
        """
        Handle the player picking a cell.

        Returns:
            True if the move was applied, False if it was ignored.
        """
        if not self._commit(self.engine.apply_player_move(self._state, index)):
            return False

        if self._state.ai_thinking:
            self.schedule_opponent_move()
        return True

    def schedule_opponent_move(self) -> bool:
        """
        Schedule the AI's move after the configured delay.

        Returns:
            True if a move was scheduled.
        """
        if not self._state.ai_thinking or self._state.is_game_over:
            return False
        if self._pending_handle is not None:
            # A move for this game is already on its way
            return False

        generation = self._state.generation

        def run():
            # The pending handle always belongs to the current generation
            if generation == self._state.generation:
                self._pending_handle = None
            self._run_opponent_move(generation)

        self._pending_handle = self.scheduler.schedule(self.config.AI_DELAY_MS, run)
        logger.debug("AI move scheduled in %d ms (generation %d)",
                     self.config.AI_DELAY_MS, generation)
        return True

    def _run_opponent_move(self, generation: int):
        if generation != self._state.generation:
            logger.debug("Stale AI move for generation %d dropped (now %d)",
                         generation, self._state.generation)
            return
        self._commit(self.engine.apply_opponent_move(self._state))

    def reset(self):
        """Start a new game, keeping scores and difficulty."""
        if self._pending_handle is not None:
            self.scheduler.cancel(self._pending_handle)
            self._pending_handle = None
        self._commit(self.engine.reset_game(self._state))

    def set_difficulty(self, level) -> bool:
        """Store a difficulty level. Returns False for an unknown level."""
        return self._commit(self.engine.set_difficulty(self._state, level))
