import argparse
import logging
from typing import Callable, Dict, List, Optional

from .game import GameConfig
from .lexicon import Lexicon, load_lexicon
from .move_generator import WordSearch
from .strategies import Incrementalist, Strategy
from .tournament import play_game, run_tournament

STRATEGIES: Dict[str, Callable[[Lexicon], Strategy]] = {
    Incrementalist.name: lambda lexicon: Incrementalist(),
    WordSearch.name: WordSearch,
}


def _make_strategy(name: str, lexicon: Lexicon) -> Strategy:
    try:
        factory = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"Unknown strategy: {name}") from None
    return factory(lexicon)


def _play_one(args: argparse.Namespace, lexicon: Lexicon) -> int:
    first = _make_strategy(args.first, lexicon)
    second = _make_strategy(args.second, lexicon)
    record = play_game(first, second, lexicon, GameConfig(seed=args.seed))
    print(record.board)
    print(f"Final score: {first.name} {record.scores[0]}, {second.name} {record.scores[1]} ({record.turns} turns)")
    return 0


def _tournament(args: argparse.Namespace, lexicon: Lexicon) -> int:
    players = [_make_strategy(name, lexicon) for name in args.players]
    standings = run_tournament(players, lexicon, seed=args.seed)
    for player, wins in zip(players, standings):
        print(f"{player.name}: {wins:g}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Two-player Scrabble rules engine: self-play games and tournaments")
    p.add_argument("--dict", required=True, type=str, dest="dict_path", help="Path to dictionary file (one word per line)")
    p.add_argument("--seed", type=int, help="Seed for bag shuffling (reproducible games)")
    p.add_argument("--verbose", action="store_true", help="Log every move")
    sub = p.add_subparsers(dest="command", required=True)

    g = sub.add_parser("game", help="Play one game between two strategies")
    g.add_argument("--first", default=WordSearch.name, choices=sorted(STRATEGIES), help="Strategy moving first")
    g.add_argument("--second", default=Incrementalist.name, choices=sorted(STRATEGIES), help="Strategy moving second")

    t = sub.add_parser("tournament", help="Round-robin between strategies")
    t.add_argument(
        "--players",
        nargs="+",
        default=[Incrementalist.name, WordSearch.name],
        choices=sorted(STRATEGIES),
        help="Contestants (names may repeat)",
    )

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    lexicon = load_lexicon(args.dict_path)
    if args.command == "game":
        return _play_one(args, lexicon)
    return _tournament(args, lexicon)


if __name__ == "__main__":
    raise SystemExit(main())
