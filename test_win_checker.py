"""
Tests for board evaluation.

Run: pytest test_win_checker.py -v
"""

import itertools

import pytest

from engine.game_state import Mark
from engine.win_checker import WinChecker, Outcome, WINNING_LINES, evaluate_board

X, O, E = Mark.X, Mark.O, Mark.EMPTY


def board_from(text: str):
    """'XO.X.....' -> list of marks ('.' is empty)."""
    lookup = {"X": X, "O": O, ".": E}
    return [lookup[ch] for ch in text]


class TestWinningLines:

    def test_eight_lines(self):
        assert len(WINNING_LINES) == 8
        assert len(set(WINNING_LINES)) == 8

    def test_lines_are_immutable(self):
        assert isinstance(WINNING_LINES, tuple)
        assert all(isinstance(line, tuple) for line in WINNING_LINES)

    def test_enumeration_order(self):
        assert WINNING_LINES[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
        assert WINNING_LINES[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
        assert WINNING_LINES[6:] == ((0, 4, 8), (2, 4, 6))


class TestEvaluateBoard:

    def test_empty_board(self):
        result = evaluate_board([E] * 9)
        assert result.outcome == Outcome.NONE
        assert result.winner is None
        assert not result.is_terminal

    @pytest.mark.parametrize("line", WINNING_LINES)
    @pytest.mark.parametrize("mark", [X, O])
    def test_every_line_wins(self, line, mark):
        board = [E] * 9
        for i in line:
            board[i] = mark
        result = evaluate_board(board)
        assert result.outcome == Outcome.WIN
        assert result.winner == mark
        assert result.winning_line == line

    def test_column_win_for_x(self):
        result = evaluate_board(board_from("XO.XO.X.."))
        assert result.winner == X
        assert result.winning_line == (0, 3, 6)

    def test_full_board_draw(self):
        result = evaluate_board(board_from("XOXXOOOXX"))
        assert result.outcome == Outcome.DRAW
        assert result.winner is None
        assert result.is_terminal

    def test_win_on_full_board_is_not_draw(self):
        result = evaluate_board(board_from("XXXOOXOXO"))
        assert result.outcome == Outcome.WIN
        assert result.winner == X

    def test_first_line_in_order_decides(self):
        # Not reachable in play, but the result must still be deterministic
        result = evaluate_board(board_from("XXXOOO..."))
        assert result.winner == X
        assert result.winning_line == (0, 1, 2)

    def test_two_in_a_row_is_not_a_win(self):
        assert evaluate_board(board_from("XX.OO....")).outcome == Outcome.NONE

    def test_matches_brute_force_over_all_boards(self):
        for cells in itertools.product((X, O, E), repeat=9):
            board = list(cells)
            result = evaluate_board(board)

            uniform = [
                line for line in WINNING_LINES
                if board[line[0]] != E and board[line[0]] == board[line[1]] == board[line[2]]
            ]
            if uniform:
                assert result.outcome == Outcome.WIN
                assert result.winning_line == uniform[0]
            elif E not in board:
                assert result.outcome == Outcome.DRAW
            else:
                assert result.outcome == Outcome.NONE


class TestWinChecker:

    def test_helpers(self):
        checker = WinChecker()
        board = board_from("OX.XO.XXO")
        assert checker.check_winner(board) == O
        assert checker.get_winning_line(board) == (0, 4, 8)
        assert not checker.check_draw(board)

    def test_check_draw(self):
        checker = WinChecker()
        assert checker.check_draw(board_from("XOXXOOOXX"))
        assert not checker.check_draw(board_from("XOXXOOOX."))
