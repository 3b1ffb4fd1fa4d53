"""Turn sequencing for a two-player game.

`Game` owns the board, bag, racks and scores. Moves come in as `PlayWord` or
`ExchangeTiles` values and are applied through `Game.apply`; an illegal play
is reported in the returned `MoveResult` and leaves every piece of state
untouched.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from .board import PREMIUMS, Board, Direction, Location, Square
from .gatekeeper import GateKeeper
from .lexicon import Lexicon
from .scoring import score_play
from .tiles import BINGO_BONUS, RACK_SIZE, TILE_VALUES, Rack, TileBag
from .validation import LegalityError, verify_legality

logger = logging.getLogger(__name__)


class GameOverError(RuntimeError):
    """Raised when a move is submitted after the game has ended."""


@dataclass
class GameConfig:
    seed: Optional[int] = None
    starting_player: int = 0
    rack_size: int = RACK_SIZE
    bingo_bonus: int = BINGO_BONUS
    layout: Sequence[Sequence[str]] = field(default_factory=lambda: PREMIUMS)
    tile_values: Mapping[str, int] = field(default_factory=lambda: dict(TILE_VALUES))


@dataclass
class GameState:
    scores: List[int] = field(default_factory=lambda: [0, 0])
    current_player: int = 0
    # Consecutive exchange turns; 2 ends the game
    passes: int = 0
    game_over: bool = False


@dataclass(frozen=True)
class PlayWord:
    word: str
    location: Location
    direction: Direction


@dataclass(frozen=True)
class ExchangeTiles:
    # One flag per rack tile; entries beyond the rack are ignored. No flags set = pass.
    selection: Tuple[bool, ...] = ()


Move = Union[PlayWord, ExchangeTiles]


@dataclass(frozen=True)
class MoveEffect:
    player: int
    points: int = 0
    tiles_placed: str = ""
    tiles_exchanged: str = ""
    game_over: bool = False


@dataclass(frozen=True)
class MoveResult:
    effect: Optional[MoveEffect] = None
    error: Optional[LegalityError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class Game:
    def __init__(self, lexicon: Lexicon, config: Optional[GameConfig] = None, bag: Optional[TileBag] = None):
        self.config = config or GameConfig()
        self.lexicon = lexicon
        self.board = Board.empty(self.config.layout)
        self.bag = bag if bag is not None else TileBag.standard(random.Random(self.config.seed))
        self.racks = (Rack(), Rack())
        for rack in self.racks:
            rack.fill_from(self.bag, self.config.rack_size)
        self.state = GameState(current_player=self.config.starting_player)

    # Queries

    @property
    def current_player(self) -> int:
        return self.state.current_player

    def current_square(self, location: Location) -> Square:
        return self.board.read(location)

    def rack_of(self, player: int) -> List[str]:
        return self.racks[player].copy()

    def score_of(self, player: int) -> int:
        return self.state.scores[player]

    def is_game_over(self) -> bool:
        return self.state.game_over

    def tile_count(self) -> int:
        return self.board.occupied_count() + sum(len(r) for r in self.racks) + len(self.bag)

    def verify_legality(
        self, word: str, location: Location, direction: Direction, player: Optional[int] = None
    ) -> Optional[LegalityError]:
        rack = self.racks[self.current_player if player is None else player]
        return verify_legality(self.board, word, location, direction, rack, self.lexicon)

    def score_play(self, word: str, location: Location, direction: Direction) -> int:
        return score_play(
            self.board,
            word,
            location,
            direction,
            values=self.config.tile_values,
            bingo_bonus=self.config.bingo_bonus,
            rack_size=self.config.rack_size,
        )

    def gatekeeper(self, player: int) -> GateKeeper:
        return GateKeeper(self, player)

    def to_string(self) -> str:
        return self.board.to_string()

    def __str__(self) -> str:
        return self.to_string()

    # Transitions

    def apply(self, move: Move) -> MoveResult:
        if isinstance(move, PlayWord):
            return self.apply_play(move.word, move.location, move.direction)
        if isinstance(move, ExchangeTiles):
            return self.apply_exchange(move.selection)
        raise TypeError(f"Unsupported move: {move!r}")

    def apply_play(self, word: str, location: Location, direction: Direction) -> MoveResult:
        self._check_not_over()
        player = self.current_player
        rack = self.racks[player]
        error = verify_legality(self.board, word, location, direction, rack, self.lexicon)
        if error is not None:
            logger.debug("player %d: rejected %r at %s %s: %s", player, word, location, direction.name, error.name)
            return MoveResult(error=error)

        points = self.score_play(word, location, direction)
        self.state.scores[player] += points
        self.board.place_word(word, location, direction)
        placed = rack.remove_tiles(word)
        rack.fill_from(self.bag, self.config.rack_size)
        self.state.passes = 0
        self._end_turn()
        logger.debug("player %d: played %r at %s %s for %d", player, word, location, direction.name, points)
        return MoveResult(MoveEffect(player, points=points, tiles_placed=placed, game_over=self.state.game_over))

    def apply_exchange(self, selection: Sequence[bool] = ()) -> MoveResult:
        self._check_not_over()
        player = self.current_player
        rack = self.racks[player]
        dumped = rack.remove_selected(selection)
        rack.fill_from(self.bag, self.config.rack_size)
        self.bag.return_tiles(dumped)
        # If there weren't enough tiles in the bag, some dumped tiles may come back
        rack.fill_from(self.bag, self.config.rack_size)
        self.state.passes += 1
        self._end_turn()
        logger.debug("player %d: exchanged %r", player, dumped)
        return MoveResult(MoveEffect(player, tiles_exchanged=dumped, game_over=self.state.game_over))

    def _check_not_over(self) -> None:
        if self.state.game_over:
            raise GameOverError("The game is over")

    def _end_turn(self) -> None:
        self.state.current_player = 1 - self.state.current_player
        if self.state.passes >= 2 or any(len(r) == 0 for r in self.racks):
            self._score_unplayed_tiles()
            self.state.game_over = True
            logger.debug("game over: scores %s", self.state.scores)

    def _score_unplayed_tiles(self) -> None:
        values = [rack.value(self.config.tile_values) for rack in self.racks]
        for i, rack in enumerate(self.racks):
            # Lose value of own tiles
            self.state.scores[i] -= values[i]
            if len(rack) == 0:
                # Gain value of opponent's tiles
                self.state.scores[i] += values[1 - i]
