"""
Configuration for TicTacToe against the computer.
Timing, links and look of the game.
"""

from .game_state import Difficulty


class GameConfig:
    """
    Configuration class for game settings.
    Override attributes on an instance to change them for one session.
    """

    # ==================== AI SETTINGS ====================
    # How long the AI "thinks" before its move shows up (milliseconds)
    AI_DELAY_MS = 800

    # Starting difficulty (stored only, the AI always plays randomly)
    DEFAULT_DIFFICULTY = Difficulty.EASY

    # Seed for the AI's random source, None for a fresh seed every run
    AI_SEED = None

    # ==================== WIN SCREEN ====================
    # Shown instead of the board when the player wins
    WIN_LINK = "https://parwics.com/"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "TicTacToe"
    WINDOW_SIZE = "420x560"

    BG_COLOR = '#f8fafc'        # slate-50
    CELL_BG = '#ffffff'
    CELL_HOVER_BG = '#eff6ff'   # blue-50
    CELL_BORDER = '#cbd5e1'     # slate-300
    X_COLOR = '#2563eb'         # blue-600
    O_COLOR = '#dc2626'         # red-600
    LINK_COLOR = '#000000'

    CELL_FONT = ('Segoe UI', 36, 'bold')
    LABEL_FONT = ('Segoe UI', 11)
    BUTTON_FONT = ('Segoe UI', 10, 'bold')

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
