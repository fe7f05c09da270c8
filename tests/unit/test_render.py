"""
Unit tests for text rendering.
"""
from minesweeper import Board, Game
from minesweeper.render import render_ansi, render_status


class TestRenderAnsi:
    """Test board rendering."""

    def test_hidden_board(self, center_mine_board: Board) -> None:
        assert render_ansi(center_mine_board) == ". . .\n. . .\n. . ."

    def test_cells_separated_by_single_spaces(self) -> None:
        board = Board(7, 4, 5)
        for line in render_ansi(board).splitlines():
            assert len(line) == 2 * board.width - 1
            assert line.split(" ") == ["."] * board.width

    def test_numbers_and_flags(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(0, 0)
        center_mine_board.toggle_flag(2, 2)
        assert render_ansi(center_mine_board) == "1 . .\n. . .\n. . F"

    def test_blank_cells_render_as_spaces(self) -> None:
        board = Board(3, 1, 0)
        board.reveal(0, 0)
        assert render_ansi(board) == "     "

    def test_revealed_mine(self, center_mine_board: Board) -> None:
        center_mine_board.reveal(1, 1)
        assert render_ansi(center_mine_board).splitlines()[1] == ". * ."

    def test_reveal_mines_shows_mines_and_wrong_flags(
        self, center_mine_board: Board
    ) -> None:
        center_mine_board.toggle_flag(0, 0)
        text = render_ansi(center_mine_board, reveal_mines=True)
        assert text == "X . .\n. * .\n. . ."

    def test_correct_flag_stays_flag(self, center_mine_board: Board) -> None:
        center_mine_board.toggle_flag(1, 1)
        text = render_ansi(center_mine_board, reveal_mines=True)
        assert text.splitlines()[1] == ". F ."

    def test_axes(self, center_mine_board: Board) -> None:
        text = render_ansi(center_mine_board, axes=True)
        assert text.splitlines() == [
            "  0 1 2",
            "0 . . .",
            "1 . . .",
            "2 . . .",
        ]

    def test_axes_pad_row_labels(self) -> None:
        lines = render_ansi(Board(2, 11, 0), axes=True).splitlines()
        assert lines[0] == "   0 1"
        assert lines[1] == " 0 . ."
        assert lines[11] == "10 . ."


class TestRenderStatus:
    """Test the status line."""

    def test_ready(self, center_mine_game: Game) -> None:
        assert render_status(center_mine_game) == "Ready | Mines left: 1 | Time: 0s"

    def test_playing_shows_whole_seconds(self, center_mine_game: Game, clock) -> None:
        center_mine_game.on_reveal(0, 0)
        clock.advance(3.7)
        assert render_status(center_mine_game) == "Playing | Mines left: 1 | Time: 3s"

    def test_lost(self, center_mine_game: Game) -> None:
        center_mine_game.on_toggle_flag(0, 0)
        center_mine_game.on_reveal(1, 1)
        assert render_status(center_mine_game).startswith("Boom! You lost. | Mines left: 0")
