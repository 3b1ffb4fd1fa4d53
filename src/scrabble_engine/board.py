from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

BOARD_SIZE = 15

# Standard Scrabble premium squares layout
# Codes: ".." normal, "TW" triple word, "DW" double word, "TL" triple letter, "DL" double letter
PREMIUMS: List[List[str]] = [
    ["TW","..","..","DL","..","..","..","TW","..","..","..","DL","..","..","TW"],
    ["..","DW","..","..","..","TL","..","..","..","TL","..","..","..","DW",".."],
    ["..","..","DW","..","..","..","DL","..","DL","..","..","..","DW","..",".."],
    ["DL","..","..","DW","..","..","..","DL","..","..","..","DW","..","..","DL"],
    ["..","..","..","..","DW","..","..","..","..","..","DW","..","..","..",".."],
    ["..","TL","..","..","..","TL","..","..","..","TL","..","..","..","TL",".."],
    ["..","..","DL","..","..","..","DL","..","DL","..","..","..","DL","..",".."],
    ["TW","..","..","DL","..","..","..","DW","..","..","..","DL","..","..","TW"],
    ["..","..","DL","..","..","..","DL","..","DL","..","..","..","DL","..",".."],
    ["..","TL","..","..","..","TL","..","..","..","TL","..","..","..","TL",".."],
    ["..","..","..","..","DW","..","..","..","..","..","DW","..","..","..",".."],
    ["DL","..","..","DW","..","..","..","DL","..","..","..","DW","..","..","DL"],
    ["..","..","DW","..","..","..","DL","..","DL","..","..","..","DW","..",".."],
    ["..","DW","..","..","..","TL","..","..","..","TL","..","..","..","DW",".."],
    ["TW","..","..","DL","..","..","..","TW","..","..","..","DL","..","..","TW"],
]

# One printable symbol per empty square, used by to_string/from_string
PREMIUM_SYMBOLS = {"..": ".", "DL": "-", "TL": "=", "DW": "+", "TW": "#"}


class Direction(Enum):
    HORIZONTAL = (0, 1)
    VERTICAL = (1, 0)

    @property
    def dr(self) -> int:
        return self.value[0]

    @property
    def dc(self) -> int:
        return self.value[1]

    def opposite(self) -> "Direction":
        """Return the perpendicular direction (HORIZONTAL <-> VERTICAL)."""
        return Direction.VERTICAL if self is Direction.HORIZONTAL else Direction.HORIZONTAL


@dataclass(frozen=True)
class Location:
    row: int
    column: int

    def neighbor(self, direction: Direction) -> "Location":
        return Location(self.row + direction.dr, self.column + direction.dc)

    def antineighbor(self, direction: Direction) -> "Location":
        return Location(self.row - direction.dr, self.column - direction.dc)

    def is_on_board(self) -> bool:
        return 0 <= self.row < BOARD_SIZE and 0 <= self.column < BOARD_SIZE


CENTER = Location(BOARD_SIZE // 2, BOARD_SIZE // 2)


@dataclass(frozen=True)
class Square:
    # Exactly one of tile and premium is set: an empty square shows its premium code,
    # an occupied one its tile ('a'-'z' regular, 'A'-'Z' played blank)
    tile: Optional[str]
    premium: Optional[str]

    @property
    def is_occupied(self) -> bool:
        return self.tile is not None

    @property
    def symbol(self) -> str:
        if self.tile is not None:
            return self.tile
        return PREMIUM_SYMBOLS[self.premium or ".."]


@dataclass
class Board:
    grid: List[List[Optional[str]]]
    premiums: Sequence[Sequence[str]] = tuple(tuple(row) for row in PREMIUMS)

    @staticmethod
    def empty(layout: Sequence[Sequence[str]] = PREMIUMS) -> "Board":
        if len(layout) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in layout):
            raise ValueError("Premium layout must be 15 rows of 15 codes")
        premiums = tuple(tuple(row) for row in layout)
        return Board([[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)], premiums)

    @staticmethod
    def from_string(multiline: str, layout: Sequence[Sequence[str]] = PREMIUMS) -> "Board":
        # 15 lines of 15 chars; '.', '-', '=', '+', '#' empty, 'a-z' tile, 'A-Z' played blank
        rows = [line.strip() for line in multiline.strip().splitlines() if line.strip()]
        if len(rows) != BOARD_SIZE or any(len(r) != BOARD_SIZE for r in rows):
            raise ValueError("Board string must be 15 lines of 15 characters")
        empty_symbols = set(PREMIUM_SYMBOLS.values())
        board = Board.empty(layout)
        for r, line in enumerate(rows):
            for c, ch in enumerate(line):
                if ch in empty_symbols:
                    continue
                if 'a' <= ch <= 'z' or 'A' <= ch <= 'Z':
                    board.grid[r][c] = ch
                else:
                    raise ValueError(f"Invalid board character: {ch}")
        return board

    def read(self, location: Location) -> Square:
        tile = self.grid[location.row][location.column]
        # A covered premium is hidden; scoring reads it through premium_at
        return Square(tile, None if tile is not None else self.premium_at(location))

    def write(self, tile: str, location: Location) -> None:
        self.grid[location.row][location.column] = tile

    def is_occupied(self, location: Location) -> bool:
        return self.grid[location.row][location.column] is not None

    def premium_at(self, location: Location) -> str:
        return self.premiums[location.row][location.column]

    def is_empty(self) -> bool:
        return all(cell is None for row in self.grid for cell in row)

    def occupied_count(self) -> int:
        return sum(cell is not None for row in self.grid for cell in row)

    def place_word(self, word: str, location: Location, direction: Direction) -> None:
        """Write the new tiles of word onto the board. Assumes the play is legal."""
        for ch in word:
            if ch != ' ':
                self.write(ch, location)
            location = location.neighbor(direction)

    def to_string(self) -> str:
        return "\n".join(
            "".join(self.read(Location(r, c)).symbol for c in range(BOARD_SIZE))
            for r in range(BOARD_SIZE)
        )

    def __str__(self) -> str:
        return self.to_string()
