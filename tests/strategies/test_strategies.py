import os
import random
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", ".."))
SRC = os.path.join(ROOT, "src")
if SRC not in sys.path:
    sys.path.insert(0, SRC)

from scrabble_engine.board import CENTER, Direction
from scrabble_engine.game import ExchangeTiles, Game, GameConfig, PlayWord
from scrabble_engine.lexicon import Lexicon, load_lexicon
from scrabble_engine.move_generator import WordSearch
from scrabble_engine.strategies import Incrementalist
from scrabble_engine.tiles import TileBag

H = Direction.HORIZONTAL


def _bag(rack0: str, rack1: str, rest: str = "") -> TileBag:
    return TileBag(list(rest) + list(reversed(rack1)) + list(reversed(rack0)), random.Random(0))


def test_incrementalist_opens_with_best_two_tile_word():
    lexicon = Lexicon.from_words(["oh", "on", "no"])
    game = Game(lexicon, bag=_bag("hornxyz", "abcdefg"))
    move = Incrementalist().choose_move(game.gatekeeper(0))
    assert move == PlayWord("oh", CENTER, H)


def test_incrementalist_plays_a_single_tile_next_to_the_board():
    lexicon = Lexicon.from_words(["horn", "ah", "ha"])
    game = Game(lexicon, bag=_bag("hornvvv", "azzzzzz", "qqqq"))
    assert game.apply_play("horn", CENTER, H).ok
    move = Incrementalist().choose_move(game.gatekeeper(1))
    assert isinstance(move, PlayWord)
    result = game.apply(move)
    assert result.ok
    assert result.effect.points == 5


def test_incrementalist_exchanges_everything_when_stuck():
    lexicon = Lexicon.from_words(["horn"])
    game = Game(lexicon, bag=_bag("zzzzzzz", "abcdefg"))
    assert Incrementalist().choose_move(game.gatekeeper(0)) == ExchangeTiles((True,) * 7)


def test_exchange_covers_a_larger_rack():
    lexicon = Lexicon.from_words(["horn"])
    game = Game(lexicon, GameConfig(rack_size=8), bag=_bag("zzzzzzzz", "abcdefgh"))
    keeper = game.gatekeeper(0)
    assert len(keeper.rack()) == 8
    for strategy in (Incrementalist(), WordSearch(lexicon)):
        assert strategy.choose_move(keeper) == ExchangeTiles((True,) * 8)


def test_word_search_finds_best_opening():
    lexicon = Lexicon.from_words(["horn", "or", "on", "no"])
    game = Game(lexicon, bag=_bag("hornxyz", "abcdefg"))
    keeper = game.gatekeeper(0)
    move = WordSearch(lexicon).choose_move(keeper)
    assert isinstance(move, PlayWord)
    assert move.word == "horn"
    assert keeper.score(move.word, move.location, move.direction) == 14


def test_word_search_plays_blank_as_uppercase():
    lexicon = Lexicon.from_words(["horn"])
    game = Game(lexicon, bag=_bag("_ornxyz", "abcdefg"))
    move = WordSearch(lexicon).choose_move(game.gatekeeper(0))
    assert move.word == "Horn"
    assert game.apply(move).effect.points == 6


def test_word_search_extends_existing_word():
    lexicon = Lexicon.from_words(["horn", "horns"])
    game = Game(lexicon, bag=_bag("hornabc", "sxxxxxx", "qqqq"))
    assert game.apply_play("horn", CENTER, H).ok
    move = WordSearch(lexicon).choose_move(game.gatekeeper(1))
    assert move == PlayWord("    s", CENTER, H)
    # s lands on a double letter square
    assert game.apply(move).effect.points == 4 + 1 + 1 + 1 + 2


def test_word_search_passes_tiles_back_when_nothing_fits():
    lexicon = Lexicon.from_words(["horn"])
    game = Game(lexicon, bag=_bag("zzzzzzz", "abcdefg"))
    assert WordSearch(lexicon).choose_move(game.gatekeeper(0)) == ExchangeTiles((True,) * 7)


def test_self_play_conserves_tiles_and_keeps_racks_bounded():
    lexicon = load_lexicon(os.path.join(ROOT, "dictionaries", "en_small.txt"))
    game = Game(lexicon, GameConfig(seed=4))
    strategy = WordSearch(lexicon)
    for _ in range(12):
        if game.is_game_over():
            break
        player = game.current_player
        result = game.apply(strategy.choose_move(game.gatekeeper(player)))
        assert result.ok
        assert game.tile_count() == 100
        assert all(len(game.rack_of(p)) <= 7 for p in (0, 1))
    assert game.current_square(CENTER).is_occupied or game.is_game_over()
