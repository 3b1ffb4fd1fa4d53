from typing import List, Optional, Protocol

from .board import BOARD_SIZE, CENTER, Direction, Location
from .game import ExchangeTiles, Move, PlayWord
from .gatekeeper import GateKeeper
from .tiles import BLANK


def exchange_all(gatekeeper: GateKeeper) -> ExchangeTiles:
    """Exchange every tile currently on the rack."""
    return ExchangeTiles((True,) * len(gatekeeper.rack()))


class Strategy(Protocol):
    name: str

    def choose_move(self, gatekeeper: GateKeeper) -> Move:
        ...


def _as_letter(tile: str) -> str:
    # Blanks are always played as 'E'; trying every letter would do slightly better
    return 'E' if tile == BLANK else tile


class Incrementalist:
    """Picks the highest-scoring one-tile move; a two-tile move on the first turn.

    Exchanges its whole rack when nothing legal turns up.
    """

    name = "incrementalist"

    def choose_move(self, gatekeeper: GateKeeper) -> Move:
        if not gatekeeper.square(CENTER).is_occupied:
            move = self._find_two_tile_move(gatekeeper)
        else:
            move = self._find_one_tile_move(gatekeeper)
        return move if move is not None else exchange_all(gatekeeper)

    def _find_two_tile_move(self, gatekeeper: GateKeeper) -> Optional[PlayWord]:
        # One-letter words are not allowed, so the opening needs two tiles
        rack = gatekeeper.rack()
        best: Optional[PlayWord] = None
        best_score = -1
        for i, first in enumerate(rack):
            for j, second in enumerate(rack):
                if i == j:
                    continue
                word = _as_letter(first) + _as_letter(second)
                if gatekeeper.verify_legality(word, CENTER, Direction.HORIZONTAL) is not None:
                    continue
                score = gatekeeper.score(word, CENTER, Direction.HORIZONTAL)
                if score > best_score:
                    best_score = score
                    best = PlayWord(word, CENTER, Direction.HORIZONTAL)
        return best

    def _find_one_tile_move(self, gatekeeper: GateKeeper) -> Optional[PlayWord]:
        # Only finds two-letter words made with one new tile
        best: Optional[PlayWord] = None
        best_score = -1
        candidates: List[str] = []
        for tile in gatekeeper.rack():
            c = _as_letter(tile)
            candidates.extend((c + " ", " " + c))
        for word in candidates:
            for row in range(BOARD_SIZE):
                for col in range(BOARD_SIZE):
                    location = Location(row, col)
                    for direction in Direction:
                        if gatekeeper.verify_legality(word, location, direction) is not None:
                            continue
                        score = gatekeeper.score(word, location, direction)
                        if score > best_score:
                            best_score = score
                            best = PlayWord(word, location, direction)
        return best
