"""Round-robin play between strategies."""
import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from .game import ExchangeTiles, Game, GameConfig
from .lexicon import Lexicon
from .strategies import Strategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameRecord:
    scores: Tuple[int, int]
    board: str
    turns: int

    @property
    def result(self) -> Tuple[float, float]:
        """Tournament credit: 1 for a win, 0.5 each for a tie."""
        s0, s1 = self.scores
        if s0 > s1:
            return 1.0, 0.0
        if s0 < s1:
            return 0.0, 1.0
        return 0.5, 0.5


def play_game(first: Strategy, second: Strategy, lexicon: Lexicon, config: Optional[GameConfig] = None) -> GameRecord:
    """Play a game between first (player 0) and second to completion."""
    game = Game(lexicon, config)
    players = (first, second)
    turns = 0
    while not game.is_game_over():
        player = game.current_player
        move = players[player].choose_move(game.gatekeeper(player))
        result = game.apply(move)
        if not result.ok:
            logger.warning(
                "%s made an illegal move %r (%s); counting it as a pass", players[player].name, move, result.error.message
            )
            game.apply(ExchangeTiles())
        turns += 1
    record = GameRecord((game.score_of(0), game.score_of(1)), game.to_string(), turns)
    logger.info("%s vs %s: %d-%d after %d turns", first.name, second.name, record.scores[0], record.scores[1], turns)
    return record


def run_tournament(players: Sequence[Strategy], lexicon: Lexicon, seed: Optional[int] = None) -> np.ndarray:
    """Play two games for each ordered pair of contestants, one with each going first.

    Returns the number of wins for each contestant (ties count 0.5).
    """
    standings = np.zeros(len(players), dtype=float)
    game_index = 0
    for i in range(len(players)):
        for j in range(len(players)):
            if i == j:
                continue
            for a, b in ((i, j), (j, i)):
                game_seed = None if seed is None else seed + game_index
                game_index += 1
                record = play_game(players[a], players[b], lexicon, GameConfig(seed=game_seed))
                standings[[a, b]] += record.result
    return standings
