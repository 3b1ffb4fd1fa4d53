import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from scrabble_engine.board import CENTER, Board, Direction, Location
from scrabble_engine.words import cross_word, find_start_of_word, word_cells

H = Direction.HORIZONTAL
V = Direction.VERTICAL


def _board_with_horn() -> Board:
    board = Board.empty()
    board.place_word("horn", CENTER, H)
    return board


def test_find_start_backs_up_over_tiles():
    board = _board_with_horn()
    assert find_start_of_word(board, Location(7, 9), H) == CENTER
    assert find_start_of_word(board, Location(7, 11), H) == CENTER
    assert find_start_of_word(board, Location(8, 7), V) == CENTER


def test_find_start_on_empty_neighbourhood_is_the_location_itself():
    assert find_start_of_word(_board_with_horn(), Location(6, 7), V) == Location(6, 7)


def test_find_start_stops_at_board_edge():
    board = Board.empty()
    board.place_word("ab", Location(0, 0), H)
    assert find_start_of_word(board, Location(0, 2), H) == Location(0, 0)


def test_word_cells_include_the_new_square():
    cells = word_cells(_board_with_horn(), Location(6, 7), V)
    assert cells == [Location(6, 7), Location(7, 7)]


def test_cross_word_spells_run_with_new_tile():
    board = _board_with_horn()
    assert cross_word(board, Location(6, 7), V, 'a') == "ah"
    assert cross_word(board, Location(8, 7), V, 'a') == "ha"
    assert cross_word(board, Location(7, 11), H, 's') == "horns"


def test_lone_tile_and_existing_tile_form_no_cross_word():
    board = _board_with_horn()
    assert cross_word(board, Location(6, 5), V, 'p') is None
    assert cross_word(board, Location(6, 7), V, ' ') is None
