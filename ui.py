"""
TicTacToe UI
A graphical interface for playing TicTacToe against the computer, using Tkinter.

Shows:
- The 3x3 board (click a cell to place X)
- Game status and scores
- Difficulty level selection
- A link instead of the board when the player wins
"""

import random
import tkinter as tk
import webbrowser
from tkinter import ttk
from typing import Optional

from engine.ai_player import AIPlayer
from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import GameState, GameStatus, Mark, Difficulty
from engine.scheduler import TkScheduler
from engine.session import GameSession


STATUS_TEXT = {
    GameStatus.PLAYING: "Your turn (X)",
    GameStatus.PLAYER_WIN: "You win!",
    GameStatus.AI_WIN: "Computer wins!",
    GameStatus.DRAW: "It's a draw!",
}


class TicTacToeUI:
    """
    Main UI class for TicTacToe against the computer.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """Initialize the UI."""
        self.config = config or GameConfig()

        # Create UI first: the session schedules AI moves on the Tk loop
        self._create_ui()

        rng = random.Random(self.config.AI_SEED)
        self.session = GameSession(
            scheduler=TkScheduler(self.root),
            engine=GameEngine(ai=AIPlayer(rng=rng)),
            config=self.config,
        )
        self.session.add_listener(self._render)
        self._render(self.session.state)

    def _create_ui(self):
        """Create the Tkinter UI."""
        cfg = self.config

        self.root = tk.Tk()
        self.root.title(cfg.WINDOW_TITLE)
        self.root.configure(bg=cfg.BG_COLOR)
        self.root.geometry(cfg.WINDOW_SIZE)
        self.root.minsize(360, 480)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=cfg.BG_COLOR)
        style.configure('TLabel', background=cfg.BG_COLOR, foreground='#0f172a', font=cfg.LABEL_FONT)
        style.configure('Status.TLabel', font=('Segoe UI', 13, 'bold'))

        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Board
        self.board_frame = ttk.Frame(self.main_frame)
        self.board_frame.pack(pady=10)

        self.board_cells = []
        for index in range(9):
            row, col = divmod(index, 3)
            cell = tk.Label(
                self.board_frame,
                text="",
                font=cfg.CELL_FONT,
                width=3,
                height=1,
                bg=cfg.CELL_BG,
                relief='solid',
                borderwidth=2,
                highlightbackground=cfg.CELL_BORDER,
            )
            cell.grid(row=row, column=col, padx=4, pady=4)
            cell.bind("<Button-1>", lambda _e, i=index: self._on_cell_click(i))
            cell.bind("<Enter>", lambda _e, i=index: self._on_cell_hover(i, True))
            cell.bind("<Leave>", lambda _e, i=index: self._on_cell_hover(i, False))
            self.board_cells.append(cell)

        # Win screen (hidden until the player wins)
        self.win_frame = ttk.Frame(self.main_frame)
        self.win_link = tk.Label(
            self.win_frame,
            text=cfg.WIN_LINK,
            font=('Segoe UI', 12, 'underline'),
            fg=cfg.LINK_COLOR,
            bg=cfg.BG_COLOR,
            cursor='hand2',
        )
        self.win_link.pack(pady=60)
        self.win_link.bind("<Button-1>", lambda _e: webbrowser.open_new_tab(cfg.WIN_LINK))

        # Status and scores
        self.status_label = ttk.Label(self.main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(10, 2))

        self.score_label = ttk.Label(self.main_frame, text="")
        self.score_label.pack()

        # Difficulty
        ttk.Separator(self.main_frame, orient='horizontal').pack(fill=tk.X, pady=10)

        diff_frame = ttk.Frame(self.main_frame)
        diff_frame.pack(pady=5)

        self.diff_buttons = {}
        diff_buttons = [
            ("Easy", Difficulty.EASY, "#4ade80"),
            ("Medium", Difficulty.MEDIUM, "#fbbf24"),
            ("Hard", Difficulty.HARD, "#f87171")
        ]

        for text, level, color in diff_buttons:
            btn = tk.Button(
                diff_frame,
                text=text,
                font=cfg.BUTTON_FONT,
                width=8,
                activebackground=color,
                command=lambda lv=level: self._set_difficulty(lv)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[level] = (btn, color)

        # Controls
        control_frame = ttk.Frame(self.main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 New Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self._reset_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11, 'bold'),
            bg='#ef4444',
            fg='white',
            width=12,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _can_play(self, index: int) -> bool:
        state = self.session.state
        return (
            state.status == GameStatus.PLAYING
            and not state.ai_thinking
            and state.board[index] == Mark.EMPTY
        )

    def _on_cell_click(self, index: int):
        self.session.select_cell(index)

    def _on_cell_hover(self, index: int, entering: bool):
        """Preview an X on empty cells the player could take."""
        cell = self.board_cells[index]
        if entering and self._can_play(index):
            cell.configure(text="X", fg='#93c5fd', bg=self.config.CELL_HOVER_BG, cursor='hand2')
        else:
            self._draw_cell(index, self.session.state)

    def _set_difficulty(self, level: Difficulty):
        """Set the AI difficulty level."""
        if self.session.set_difficulty(level):
            print(f"Difficulty set to: {level.value}")

    def _draw_cell(self, index: int, state: GameState):
        cfg = self.config
        mark = state.board[index]
        cell = self.board_cells[index]

        color = cfg.X_COLOR if mark == Mark.X else cfg.O_COLOR
        cursor = 'hand2' if self._can_play(index) else 'X_cursor'
        cell.configure(text=mark.value, fg=color, bg=cfg.CELL_BG, cursor=cursor)

    def _render(self, state: GameState):
        """Redraw everything from the game state."""
        # Win screen replaces the board
        if state.status == GameStatus.PLAYER_WIN:
            self.board_frame.pack_forget()
            self.win_frame.pack(before=self.status_label, pady=10)
        else:
            self.win_frame.pack_forget()
            self.board_frame.pack(before=self.status_label, pady=10)

        for index in range(9):
            self._draw_cell(index, state)

        if state.status == GameStatus.PLAYING and state.ai_thinking:
            self.status_label.configure(text="Computer is thinking...")
        else:
            self.status_label.configure(text=STATUS_TEXT[state.status])

        scores = state.scores
        self.score_label.configure(
            text=f"You: {scores.player_wins}   Computer: {scores.ai_wins}   Draws: {scores.draws}"
        )

        for level, (btn, color) in self.diff_buttons.items():
            if level == state.difficulty:
                btn.configure(bg=color, fg='black')
            else:
                btn.configure(bg='#2d3748', fg='white')

    def _reset_game(self):
        """Reset the game."""
        print("Resetting game...")
        self.session.reset()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=GameConfig.AI_DELAY_MS,
        help="How long the computer thinks before moving"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.AI_DELAY_MS = args.delay_ms

    print("\n" + "="*60)
    print("   TicTacToe UI")
    print("="*60 + "\n")

    ui = TicTacToeUI(config=config)
    ui.run()


if __name__ == "__main__":
    main()
