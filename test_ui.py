"""
Tests for the console UI.
"""

import io

import pytest

from logic.board import Board
from logic.errors import OccupiedSpace
from logic.player import Player
from ui import ConsoleUI


def make_ui(lines=()):
    """ConsoleUI fed from `lines`, with prompts and output captured."""
    feed = iter(lines)
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        try:
            return next(feed)
        except StopIteration:
            raise EOFError

    out, err = io.StringIO(), io.StringIO()
    return ConsoleUI(input_func=fake_input, out=out, err=err), prompts, out, err


def test_format_empty_board():
    ui, _, _, _ = make_ui()
    assert ui.format_board(Board()) == (
        "1 | 2 | 3 \n"
        "---------\n"
        "4 | 5 | 6 \n"
        "---------\n"
        "7 | 8 | 9 \n"
    )


def test_format_board_with_moves():
    ui, _, _, _ = make_ui()
    text = ui.format_board(Board.from_string("X.O|.X.|..."))
    assert text.splitlines()[0] == "X | 2 | O "
    assert text.splitlines()[2] == "4 | X | 6 "


def test_render_writes_board():
    ui, _, out, _ = make_ui()
    ui.render(Board.from_string("X........"))
    assert "X | 2 | 3" in out.getvalue()


def test_request_move_parses_number():
    ui, prompts, _, _ = make_ui(["7"])
    assert ui.request_move(Player.O) == 7
    assert prompts == ["Player O select your space, enter the number: "]


def test_request_move_passes_out_of_range_numbers_through():
    ui, _, _, _ = make_ui([" 12 "])
    assert ui.request_move(Player.X) == 12


def test_request_move_reprompts_on_text():
    ui, prompts, _, err = make_ui(["", "abc", "4.5", "4"])
    assert ui.request_move(Player.X) == 4
    assert len(prompts) == 4
    assert err.getvalue().count("Selection must be an integer in range 1 - 9") == 2


def test_request_move_closed_input():
    ui, _, _, _ = make_ui([])
    with pytest.raises(EOFError):
        ui.request_move(Player.X)


def test_report_error():
    ui, _, out, err = make_ui()
    ui.report_error(OccupiedSpace(5))
    assert err.getvalue().strip() == "Can't update non-empty space, 5 is already occupied."
    assert out.getvalue() == ""


@pytest.mark.parametrize("result, expected", [
    (Player.X, "Player 1 wins!"),
    (Player.O, "Player 2 wins!"),
    (None, "Draw! Nobody wins"),
])
def test_report_outcome(result, expected):
    ui, _, out, _ = make_ui()
    ui.report_outcome(result)
    assert expected in out.getvalue()


def test_report_outcome_with_line():
    ui, _, out, _ = make_ui()
    ui.report_outcome(Player.O, [3, 5, 7])
    assert "O completed 3-5-7" in out.getvalue()


def test_show_intro():
    ui, _, out, _ = make_ui()
    ui.show_intro()
    assert "7 | 8 | 9" in out.getvalue()
