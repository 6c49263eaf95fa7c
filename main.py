"""
Main entry point for TicTacToe against the computer.

Launches the Tkinter window by default. With --no-ui the game is played
in the terminal instead.

Run this script to play TicTacToe against the computer!
"""

import logging
import random
from typing import Callable, Optional

from engine.ai_player import AIPlayer
from engine.config import GameConfig
from engine.game_engine import GameEngine
from engine.game_state import GameState, GameStatus, Difficulty
from engine.scheduler import SchedScheduler
from engine.session import GameSession


class ConsoleGame:
    """
    TicTacToe in the terminal.

    Game flow:
    1. Human (X) types a cell number
    2. Computer (O) thinks for a moment, then moves
    3. Repeat until someone wins or it's a draw
    4. 'r' starts a new game, scores carry over
    """

    HELP = "Commands: 0-8 = place X, r = new game, d <easy|medium|hard> = difficulty, q = quit"

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print
    ):
        """
        Initialize the console game.

        Args:
            config: Game configuration. Uses defaults if not provided.
            input_func: Reads one line of input (for tests).
            output_func: Writes one line of output (for tests).
        """
        self.config = config or GameConfig()
        self.input = input_func
        self.output = output_func

        self.scheduler = SchedScheduler()
        rng = random.Random(self.config.AI_SEED)
        self.session = GameSession(
            scheduler=self.scheduler,
            engine=GameEngine(ai=AIPlayer(rng=rng)),
            config=self.config,
        )
        self.is_running = False

    def start(self):
        """Start the game loop."""
        self.output("\n" + "="*60)
        self.output("   TicTacToe - You (X) vs Computer (O)")
        self.output("="*60)
        self.output(self.HELP)

        self.is_running = True
        self._show_board()

        while self.is_running:
            try:
                line = self.input("\nYour move: ")
            except EOFError:
                self.is_running = False
                break
            self.handle_command(line)

        self._show_scores()

    def handle_command(self, line: str):
        """Process one line of user input."""
        parts = line.strip().split()
        if not parts:
            return

        command = parts[0].lower()

        if command in ("q", "quit", "exit"):
            self.is_running = False
        elif command in ("r", "reset"):
            self.session.reset()
            self.output("\nNew game!")
            self._show_board()
        elif command in ("d", "difficulty"):
            level = parts[1] if len(parts) > 1 else ""
            if self.session.set_difficulty(level):
                self.output(f"Difficulty set to: {self.session.state.difficulty.value}")
            else:
                self.output(f"Unknown difficulty '{level}'. Choose easy, medium or hard.")
        elif command in ("h", "help", "?"):
            self.output(self.HELP)
        elif command.isdigit():
            self._play(int(command))
        else:
            self.output(f"Not a command: '{line.strip()}'")
            self.output(self.HELP)

    def _play(self, index: int):
        state = self.session.state
        if state.is_game_over:
            self.output("Game is over. Type 'r' for a new game.")
            return

        if not self.session.select_cell(index):
            self.output(f"Can't play cell {index}. Pick an empty cell 0-8.")
            return

        if self.session.state.ai_thinking:
            self._show_board()
            self.output("\n>>> Computer is thinking...")
            self.scheduler.run_pending(blocking=True)

        self._show_board()
        self._show_result(self.session.state)

    def _show_board(self):
        self.output("")
        self.output(self.session.state.format_board())

    def _show_result(self, state: GameState):
        if state.status == GameStatus.PLAYER_WIN:
            self.output("\n🎉 Congratulations! You won!")
            self.output(f"   {self.config.WIN_LINK}")
        elif state.status == GameStatus.AI_WIN:
            self.output("\n🤖 Computer wins! Better luck next time!")
        elif state.status == GameStatus.DRAW:
            self.output("\n🤝 It's a draw! Good game!")
        else:
            return
        self.output("Type 'r' for a new game.")

    def _show_scores(self):
        scores = self.session.state.scores
        self.output("\n" + "="*60)
        self.output(f"   You: {scores.player_wins}  Computer: {scores.ai_wins}  Draws: {scores.draws}")
        self.output("="*60)


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe against the computer")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Play in the terminal instead of a window"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=GameConfig.AI_DELAY_MS,
        help="How long the computer thinks before moving"
    )
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY.value,
        help="Starting difficulty (the computer plays randomly at every level)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the computer's moves for a repeatable game"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log engine decisions"
    )

    args = parser.parse_args()

    config = GameConfig()
    config.AI_DELAY_MS = args.delay_ms
    config.DEFAULT_DIFFICULTY = Difficulty.parse(args.difficulty)
    config.AI_SEED = args.seed
    config.DEBUG_MODE = args.debug

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s"
    )

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(config=config)
        ui.run()
        return

    game = ConsoleGame(config=config)
    try:
        game.start()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
