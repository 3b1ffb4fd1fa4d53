from typing import TYPE_CHECKING, List, Optional

from .board import Direction, Location, Square
from .validation import LegalityError

if TYPE_CHECKING:
    from .game import Game


class GateKeeper:
    """Read-only window onto a Game for one player's strategy.

    Gives the strategy what it needs to choose a move (the board, its own
    rack, legality and score queries) without access to the opponent's rack
    or to anything that changes the game. Build a fresh one for every move.
    """

    def __init__(self, game: "Game", player: int):
        self._game = game
        self.player = player

    def square(self, location: Location) -> Square:
        return self._game.current_square(location)

    def rack(self) -> List[str]:
        return self._game.rack_of(self.player)

    def verify_legality(self, word: str, location: Location, direction: Direction) -> Optional[LegalityError]:
        """Check word against this player's rack; None means the play is legal."""
        return self._game.verify_legality(word, location, direction, player=self.player)

    def score(self, word: str, location: Location, direction: Direction) -> int:
        """Points for word, assuming it has already been verified as legal."""
        return self._game.score_play(word, location, direction)

    def board_string(self) -> str:
        return self._game.to_string()

    def __str__(self) -> str:
        return self.board_string()
