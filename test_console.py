"""
Tests for the console front end.

Run: pytest test_console.py -v
"""


from engine.config import GameConfig
from engine.game_state import GameStatus, Mark, Difficulty
from main import ConsoleGame


def make_game(lines):
    config = GameConfig()
    config.AI_DELAY_MS = 0
    config.AI_SEED = 5

    inputs = iter(lines)
    output = []

    def fake_input(prompt):
        try:
            return next(inputs)
        except StopIteration:
            raise EOFError

    game = ConsoleGame(config=config, input_func=fake_input, output_func=output.append)
    return game, output


class TestConsoleGame:

    def test_move_then_ai_reply(self):
        game, output = make_game([])
        game.handle_command("4")

        state = game.session.state
        assert state.board[4] == Mark.X
        assert state.count(Mark.O) == 1
        assert not state.ai_thinking
        assert any("thinking" in line for line in output)

    def test_occupied_cell_message(self):
        game, output = make_game([])
        game.handle_command("4")
        game.handle_command("4")
        assert any("Can't play cell 4" in line for line in output)

    def test_out_of_range_message(self):
        game, output = make_game([])
        game.handle_command("12")
        assert game.session.state.count(Mark.X) == 0
        assert any("Can't play cell 12" in line for line in output)

    def test_difficulty_command(self):
        game, output = make_game([])
        game.handle_command("d hard")
        assert game.session.state.difficulty == Difficulty.HARD

        game.handle_command("d silly")
        assert game.session.state.difficulty == Difficulty.HARD
        assert any("Unknown difficulty" in line for line in output)

    def test_unknown_command(self):
        game, output = make_game([])
        game.handle_command("hello")
        assert any("Not a command" in line for line in output)

    def test_reset_command(self):
        game, _ = make_game([])
        game.handle_command("0")
        game.handle_command("r")
        assert game.session.state.board == [Mark.EMPTY] * 9
        assert game.session.state.status == GameStatus.PLAYING

    def test_full_game_until_quit(self):
        # Keep picking cells in order; non-empty ones are just refused
        lines = [str(i) for i in range(9)] * 2 + ["q"]
        game, output = make_game(lines)
        game.start()

        assert not game.is_running
        assert game.session.state.is_game_over
        assert game.session.state.scores.games_played == 1
        assert any("You:" in line for line in output)

    def test_player_win_shows_link(self):
        game, output = make_game([])
        # Put the game one move from an X win in column 0
        game.session._state.board = [
            Mark.X, Mark.O, Mark.EMPTY,
            Mark.X, Mark.O, Mark.EMPTY,
            Mark.EMPTY, Mark.EMPTY, Mark.EMPTY,
        ]
        game.handle_command("6")

        assert game.session.state.status == GameStatus.PLAYER_WIN
        assert any(GameConfig.WIN_LINK in line for line in output)

    def test_eof_ends_the_game(self):
        game, _ = make_game([])
        game.start()
        assert not game.is_running
