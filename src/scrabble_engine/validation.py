"""Legality checks for a proposed play.

Every function here is pure: the board, rack and lexicon are only read.
A play is described by a move string (lowercase = new tile, uppercase = new
blank standing for that letter, space = tile already on the board), the
location of its first symbol and a direction.
"""
from enum import Enum
from typing import Iterable, List, Optional

from .board import CENTER, Board, Direction, Location
from .lexicon import Lexicon
from .tiles import BLANK
from .words import cross_word


class LegalityError(Enum):
    TOO_SHORT = "Word must be at least two letters long."
    INSUFFICIENT_TILES = "Hand does not contain sufficient tiles to play word."
    # Overlap, gap, edge of board and abutting tiles all share one kind
    BAD_PLACEMENT = "Board placement incorrect (gaps, overlapping tiles, edge of board)."
    NOT_CONNECTED = "Word is not connected to any tile on the board."
    INVALID_WORD = "Invalid word created."

    @property
    def message(self) -> str:
        return self.value


def can_be_drawn_from_rack(word: str, rack: Iterable[str]) -> bool:
    """True if every new tile in word can be matched to a distinct rack tile.

    Greedy left-to-right matching is enough: a rack tile is either a given
    letter or a blank, and an uppercase symbol can only take a blank. Any other
    symbol, the blank marker included, matches nothing.
    """
    tiles: List[str] = list(rack)
    used = [False] * len(tiles)
    for ch in word:
        if ch == ' ':
            continue
        if not ('a' <= ch <= 'z' or 'A' <= ch <= 'Z'):
            return False
        for i, tile in enumerate(tiles):
            if not used[i] and (ch == tile or ('A' <= ch <= 'Z' and tile == BLANK)):
                used[i] = True
                break
        else:
            return False
    return True


def can_be_placed_on_board(board: Board, word: str, location: Location, direction: Direction) -> bool:
    """True if word places at least one tile without overlapping tiles, leaving
    gaps, touching a tile at either end or running off the board."""
    before = location.antineighbor(direction)
    if before.is_on_board() and board.is_occupied(before):
        return False
    placed_any = False
    for ch in word:
        if not location.is_on_board():
            return False
        if (ch == ' ') != board.is_occupied(location):
            return False
        placed_any = placed_any or ch != ' '
        location = location.neighbor(direction)
    if location.is_on_board() and board.is_occupied(location):
        return False
    return placed_any


def would_be_connected(board: Board, word: str, location: Location, direction: Direction) -> bool:
    """True if word uses an existing tile, covers the center or sits beside a tile."""
    cross = direction.opposite()
    for ch in word:
        if ch == ' ' or location == CENTER:
            return True
        for side in (location.neighbor(cross), location.antineighbor(cross)):
            if side.is_on_board() and board.is_occupied(side):
                return True
        location = location.neighbor(direction)
    return False


def is_valid_word(board: Board, word: str, location: Location, direction: Direction, lexicon: Lexicon) -> bool:
    """True if the primary word, with board tiles filled in for spaces, is in the lexicon."""
    if len(word) < 2:
        return False
    letters: List[str] = []
    for ch in word:
        existing = board.grid[location.row][location.column]
        letters.append(existing if ch == ' ' and existing is not None else ch)
        location = location.neighbor(direction)
    return lexicon.contains("".join(letters))


def would_create_only_legal_words(
    board: Board, word: str, location: Location, direction: Direction, lexicon: Lexicon
) -> bool:
    if not is_valid_word(board, word, location, direction, lexicon):
        return False
    cross = direction.opposite()
    for ch in word:
        formed = cross_word(board, location, cross, ch)
        if formed is not None and not lexicon.contains(formed):
            return False
        location = location.neighbor(direction)
    return True


def verify_legality(
    board: Board,
    word: str,
    location: Location,
    direction: Direction,
    rack: Iterable[str],
    lexicon: Lexicon,
) -> Optional[LegalityError]:
    """Return the first reason the play is illegal, or None if it is legal."""
    if len(word) < 2:
        return LegalityError.TOO_SHORT
    if not can_be_drawn_from_rack(word, rack):
        return LegalityError.INSUFFICIENT_TILES
    if not can_be_placed_on_board(board, word, location, direction):
        return LegalityError.BAD_PLACEMENT
    if not would_be_connected(board, word, location, direction):
        return LegalityError.NOT_CONNECTED
    if not would_create_only_legal_words(board, word, location, direction, lexicon):
        return LegalityError.INVALID_WORD
    return None
