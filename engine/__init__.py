"""
Engine for TicTacToe against the computer.
Handles game state, rules, the AI opponent and its delayed move.
"""

from .game_state import GameState, GameStatus, Mark, Difficulty, Scores
from .win_checker import WinChecker, BoardResult, Outcome, WINNING_LINES, evaluate_board
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer
from .game_engine import GameEngine
from .scheduler import Scheduler, TkScheduler, SchedScheduler, ManualScheduler
from .session import GameSession
from .config import GameConfig

__version__ = "1.0.0"
