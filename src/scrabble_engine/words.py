from typing import List, Optional

from .board import Board, Direction, Location


def find_start_of_word(board: Board, location: Location, direction: Direction) -> Location:
    """Return the first square of the word through location running in direction.

    Backs up until leaving the board or reaching an unoccupied square, then
    steps forward once. The square at location itself is not inspected, so
    this also works for a square that is about to receive a tile.
    """
    location = location.antineighbor(direction)
    while location.is_on_board() and board.is_occupied(location):
        location = location.antineighbor(direction)
    return location.neighbor(direction)


def word_cells(board: Board, location: Location, direction: Direction) -> List[Location]:
    """Squares of the contiguous run through location, counting location as occupied."""
    cells: List[Location] = []
    current = find_start_of_word(board, location, direction)
    while current.is_on_board() and (current == location or board.is_occupied(current)):
        cells.append(current)
        current = current.neighbor(direction)
    return cells


def cross_word(board: Board, location: Location, direction: Direction, tile: str) -> Optional[str]:
    """Spell the word formed in direction by placing tile at location.

    Returns None when no new word is formed: tile is a space (already on
    the board) or the run is a lone tile.
    """
    if tile == ' ':
        return None
    cells = word_cells(board, location, direction)
    if len(cells) == 1:
        return None
    return "".join(tile if cell == location else board.grid[cell.row][cell.column] for cell in cells)
