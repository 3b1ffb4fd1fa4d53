import os
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from scrabble_engine.board import CENTER, Board, Direction, Location
from scrabble_engine.scoring import score_cross_word, score_main_word, score_play

H = Direction.HORIZONTAL
V = Direction.VERTICAL


def _board_with_horn() -> Board:
    board = Board.empty()
    board.place_word("horn", CENTER, H)
    return board


def test_scores_single_initial_word():
    assert score_play(Board.empty(), "horn", CENTER, H) == 14


def test_scores_multiple_words():
    # an (1 + 2 on DL) + ah (5) + no (2 on DL + 1)
    assert score_play(_board_with_horn(), "an", Location(6, 7), H) == 5 + 3 + 3


def test_does_not_score_unmodified_cross_words():
    # The h already covers the center double word; it is not counted again
    assert score_play(_board_with_horn(), "a ", Location(6, 7), V) == 5


def test_scores_cross_word_that_starts_with_an_existing_tile():
    # ta (t on DL) + ha
    assert score_play(_board_with_horn(), "ta", Location(8, 6), H) == 3 + 5
    assert score_cross_word(_board_with_horn(), Location(8, 7), V, 'a') == 5


def test_lone_tile_has_no_cross_word():
    assert score_cross_word(_board_with_horn(), Location(3, 3), V, 'q') == 0


def test_scores_bingo():
    # f on DW, l on DL, blank L worth nothing, +50
    assert score_play(Board.empty(), "finalLy", CENTER, H) == 76


def test_does_not_score_bingo_for_seven_letter_word_using_tiles_on_board():
    assert score_play(_board_with_horn(), "Fi ally", Location(5, 10), V) == 18


def test_no_bingo_for_more_than_seven_tiles():
    # TW x DW, one a on DL
    assert score_play(Board.empty(), "aaaaaaaa", Location(7, 0), H) == 9 * 3 * 2


def test_double_word_squares_multiply():
    # DW at both ends, TL twice in between
    assert score_main_word(Board.empty(), "a" * 13, Location(1, 1), H) == 17 * 4


def test_played_blank_scores_zero_everywhere():
    assert score_play(Board.empty(), "QI", CENTER, H) == 0
    board = Board.empty()
    board.place_word("Qi", CENTER, H)
    assert score_play(board, " s", CENTER, V) == 1
