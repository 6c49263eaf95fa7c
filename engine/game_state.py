"""
Game state for TicTacToe against the computer.
Tracks the board, whose turn it is, the game status and the score tally.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass, field


class Mark(Enum):
    """What a board cell can hold."""
    X = "X"
    O = "O"
    EMPTY = ""


class GameStatus(Enum):
    """Where the current game stands."""
    PLAYING = "playing"
    PLAYER_WIN = "playerWin"
    AI_WIN = "aiWin"
    DRAW = "draw"


class Difficulty(Enum):
    """AI difficulty levels (stored only, the opponent always picks at random)."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, level) -> Optional["Difficulty"]:
        """
        Turn a Difficulty, a name ("HARD") or a value ("hard") into a Difficulty.

        Returns:
            The matching level, or None if the input is not a known level.
        """
        if isinstance(level, cls):
            return level
        if not isinstance(level, str):
            return None

        text = level.strip()
        for member in cls:
            if text.lower() == member.value or text.upper() == member.name:
                return member
        return None


# The human always plays X and moves first
PLAYER_MARK = Mark.X
AI_MARK = Mark.O

BOARD_SIZE = 3
CELL_COUNT = BOARD_SIZE * BOARD_SIZE


def empty_board() -> List[Mark]:
    """A fresh board with all 9 cells empty."""
    return [Mark.EMPTY] * CELL_COUNT


@dataclass
class Scores:
    """Running tally across games in one session."""
    player_wins: int = 0
    ai_wins: int = 0
    draws: int = 0

    @property
    def games_played(self) -> int:
        return self.player_wins + self.ai_wins + self.draws


@dataclass
class GameState:
    """
    The complete state of a game against the computer.

    Tracks:
    - The board (9 cells, row-major: index = row * 3 + col)
    - Whose turn is next
    - Game status (playing, player win, AI win, draw)
    - Whether the AI is "thinking" (player input blocked)
    - Scores (kept across resets)
    - Difficulty (kept across resets)
    - Generation (bumped on every reset, tags the pending AI move)
    """

    board: List[Mark] = field(default_factory=empty_board)

    # Meaningful only while status is PLAYING
    current_player: Mark = Mark.X

    status: GameStatus = GameStatus.PLAYING
    ai_thinking: bool = False

    scores: Scores = field(default_factory=Scores)
    difficulty: Difficulty = Difficulty.EASY

    generation: int = 0

    # The line that ended the game, if someone won
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != GameStatus.PLAYING

    def get_cell(self, row: int, col: int) -> Mark:
        """Get the mark at (row, col)."""
        return self.board[row * BOARD_SIZE + col]

    def get_empty_cells(self) -> List[int]:
        """
        Get all empty cells on the board.

        Returns:
            List of board indices (0-8).
        """
        return [i for i, cell in enumerate(self.board) if cell == Mark.EMPTY]

    def count(self, mark: Mark) -> int:
        """How many cells hold the given mark."""
        return sum(1 for cell in self.board if cell == mark)

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            current_player=self.current_player,
            status=self.status,
            ai_thinking=self.ai_thinking,
            scores=Scores(
                player_wins=self.scores.player_wins,
                ai_wins=self.scores.ai_wins,
                draws=self.scores.draws,
            ),
            difficulty=self.difficulty,
            generation=self.generation,
            winning_line=self.winning_line,
        )

    def to_dict(self) -> dict:
        """Plain snapshot of the state for a presentation layer."""
        return {
            "board": [cell.value for cell in self.board],
            "currentPlayer": self.current_player.value,
            "status": self.status.value,
            "aiThinking": self.ai_thinking,
            "scores": {
                "player": self.scores.player_wins,
                "ai": self.scores.ai_wins,
                "draws": self.scores.draws,
            },
            "difficulty": self.difficulty.value,
            "winningLine": list(self.winning_line) if self.winning_line else None,
        }

    def format_board(self) -> str:
        """Render the board as text, empty cells show their index."""
        lines = []
        for row in range(BOARD_SIZE):
            cells = []
            for col in range(BOARD_SIZE):
                mark = self.get_cell(row, col)
                cells.append(mark.value if mark != Mark.EMPTY else str(row * BOARD_SIZE + col))
            lines.append(" " + " | ".join(cells))
            if row < BOARD_SIZE - 1:
                lines.append("---+---+---")
        return "\n".join(lines)
