from typing import Mapping, Tuple

from .board import Board, Direction, Location
from .tiles import BINGO_BONUS, RACK_SIZE, TILE_VALUES, tile_value
from .words import word_cells


def _new_tile_score(board: Board, location: Location, ch: str, values: Mapping[str, int]) -> Tuple[int, int]:
    # Returns (letter score, word multiplier) for a tile newly placed at location
    letter_score = tile_value(ch, values)
    premium = board.premium_at(location)
    if premium == 'DL':
        return letter_score * 2, 1
    if premium == 'TL':
        return letter_score * 3, 1
    if premium == 'DW':
        return letter_score, 2
    if premium == 'TW':
        return letter_score, 3
    return letter_score, 1


def score_main_word(
    board: Board, word: str, location: Location, direction: Direction, values: Mapping[str, int] = TILE_VALUES
) -> int:
    total = 0
    word_mult = 1
    for ch in word:
        if ch == ' ':
            # existing letters count, no multipliers
            total += tile_value(board.grid[location.row][location.column] or ' ', values)
        else:
            letter_score, mult = _new_tile_score(board, location, ch, values)
            total += letter_score
            word_mult *= mult
        location = location.neighbor(direction)
    return total * word_mult


def score_cross_word(
    board: Board, location: Location, direction: Direction, ch: str, values: Mapping[str, int] = TILE_VALUES
) -> int:
    """Score the word formed in direction by the single new tile ch at location.

    A lone tile forms no cross word and scores 0. The premium under the new
    tile applies to the cross word as well as to the main word.
    """
    cells = word_cells(board, location, direction)
    if len(cells) == 1:
        return 0
    total = 0
    word_mult = 1
    for cell in cells:
        if cell == location:
            letter_score, word_mult = _new_tile_score(board, cell, ch, values)
            total += letter_score
        else:
            total += tile_value(board.grid[cell.row][cell.column] or ' ', values)
    return total * word_mult


def score_play(
    board: Board,
    word: str,
    location: Location,
    direction: Direction,
    values: Mapping[str, int] = TILE_VALUES,
    bingo_bonus: int = BINGO_BONUS,
    rack_size: int = RACK_SIZE,
) -> int:
    """Compute the total score for a play: main word + all cross-words + bingo.

    Rules implemented:
    - Letter/word premiums apply only for newly placed tiles; word premiums multiply.
    - Existing tiles contribute their face value (0 for played blanks) and do not re-trigger premiums.
    - Placing exactly rack_size new tiles earns the bingo bonus.
    Assumes the play is legal.
    """
    total = score_main_word(board, word, location, direction, values)
    cross = direction.opposite()
    tiles_played = 0
    for ch in word:
        if ch != ' ':
            total += score_cross_word(board, location, cross, ch, values)
            tiles_played += 1
        location = location.neighbor(direction)
    if tiles_played == rack_size:
        total += bingo_bonus
    return total
