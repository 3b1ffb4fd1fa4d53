from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple

from .board import BOARD_SIZE, CENTER, Direction, Location
from .game import Move, PlayWord
from .gatekeeper import GateKeeper
from .lexicon import Lexicon
from .strategies import exchange_all
from .tiles import BLANK


@dataclass
class _TrieNode:
    children: Dict[str, "_TrieNode"] = field(default_factory=dict)
    is_word: bool = False


def _build_trie(dictionary: Iterable[str]) -> Tuple[_TrieNode, int]:
    root = _TrieNode()
    max_len = 0
    for w in dictionary:
        word = w.strip().lower()
        if len(word) < 2 or len(word) > BOARD_SIZE:
            continue
        if not all('a' <= ch <= 'z' for ch in word):
            continue
        max_len = max(max_len, len(word))
        node = root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = _TrieNode()
                node.children[ch] = nxt
            node = nxt
        node.is_word = True
    return root, max_len


def _anchor_squares(gatekeeper: GateKeeper) -> Set[Location]:
    """Occupied squares and the empty squares touching them."""
    anchors: Set[Location] = set()
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            location = Location(r, c)
            if not gatekeeper.square(location).is_occupied:
                continue
            anchors.add(location)
            for direction in Direction:
                for side in (location.neighbor(direction), location.antineighbor(direction)):
                    if side.is_on_board():
                        anchors.add(side)
    return anchors


def _candidate_starts(gatekeeper: GateKeeper, direction: Direction, max_len: int) -> Sequence[Location]:
    """Return start squares worth searching from.

    - first move: starts from which a word can cover the center
    - otherwise: starts with an empty (or off-board) square before them and an
      anchor square within max_len squares
    """
    if not gatekeeper.square(CENTER).is_occupied:
        starts = []
        for back in range(min(max_len, CENTER.row + 1)):
            starts.append(Location(CENTER.row - back * direction.dr, CENTER.column - back * direction.dc))
        return starts

    anchors = _anchor_squares(gatekeeper)
    starts = []
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            start = Location(r, c)
            before = start.antineighbor(direction)
            if before.is_on_board() and gatekeeper.square(before).is_occupied:
                continue
            location = start
            for _ in range(max_len):
                if not location.is_on_board():
                    break
                if location in anchors:
                    starts.append(start)
                    break
                location = location.neighbor(direction)
    return starts


def best_move(
    gatekeeper: GateKeeper,
    trie_root: _TrieNode,
    max_word_len: int,
) -> Optional[Tuple[PlayWord, int]]:
    """Return the highest-scoring legal play and its score, or None."""
    best: Optional[Tuple[PlayWord, int]] = None
    if max_word_len < 2:
        return None

    rack_counts0 = Counter(gatekeeper.rack())

    def consider(start: Location, direction: Direction, symbols: List[str], after: Location) -> None:
        nonlocal best
        if all(ch == ' ' for ch in symbols):
            return
        if after.is_on_board() and gatekeeper.square(after).is_occupied:
            # The word carries on through the next tile; the search will reach it.
            return
        word = "".join(symbols)
        if gatekeeper.verify_legality(word, start, direction) is not None:
            return
        score = gatekeeper.score(word, start, direction)
        if best is None or score > best[1]:
            best = (PlayWord(word, start, direction), score)

    def dfs_from_start(
        start: Location,
        direction: Direction,
        location: Location,
        node: _TrieNode,
        rack_counts: Counter,
        symbols: List[str],
    ) -> None:
        if len(symbols) >= max_word_len or not location.is_on_board():
            return

        after = location.neighbor(direction)
        square = gatekeeper.square(location)
        if square.is_occupied:
            nxt = node.children.get(square.tile.lower())
            if nxt is None:
                return
            symbols.append(' ')
            if nxt.is_word and len(symbols) >= 2:
                consider(start, direction, symbols, after)
            dfs_from_start(start, direction, after, nxt, rack_counts, symbols)
            symbols.pop()
            return

        # Empty square: try rack letters, then the blank standing in for any letter (uppercase).
        for ch in sorted(node.children):
            nxt = node.children[ch]
            for symbol, tile in ((ch, ch), (ch.upper(), BLANK)):
                if rack_counts.get(tile, 0) <= 0:
                    continue
                rack_counts[tile] -= 1
                symbols.append(symbol)
                if nxt.is_word and len(symbols) >= 2:
                    consider(start, direction, symbols, after)
                dfs_from_start(start, direction, after, nxt, rack_counts, symbols)
                symbols.pop()
                rack_counts[tile] += 1

    for direction in Direction:
        for start in _candidate_starts(gatekeeper, direction, max_word_len):
            dfs_from_start(start, direction, start, trie_root, rack_counts0.copy(), [])

    return best


class WordSearch:
    """Plays the highest-scoring word it can find in the lexicon; exchanges everything otherwise."""

    name = "word-search"

    def __init__(self, lexicon: Lexicon):
        self._trie, self._max_len = _build_trie(lexicon)

    def choose_move(self, gatekeeper: GateKeeper) -> Move:
        found = best_move(gatekeeper, self._trie, self._max_len)
        if found is None:
            return exchange_all(gatekeeper)
        return found[0]
