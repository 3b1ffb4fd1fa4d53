import random
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence

BLANK = '_'
RACK_SIZE = 7
BINGO_BONUS = 50

TILE_VALUES: Dict[str, int] = {
    **{c: 1 for c in list("eaionrtlsu")},
    **{c: 2 for c in list("dg")},
    **{c: 3 for c in list("bcmp")},
    **{c: 4 for c in list("fhvwy")},
    "k": 5,
    **{c: 8 for c in list("jx")},
    **{c: 10 for c in list("qz")},
    BLANK: 0,
}

# 98 letters + 2 blanks
DISTRIBUTION = (
    "aaaaaaaaabbccddddeeeeeeeeeeeeffggghhiiiiiiiiijkllllmmnnnnnnooooooooppqrrrrrrssssttttttuuuuvvwwxyyz"
    + BLANK * 2
)


def tile_value(ch: str, values: Mapping[str, int] = TILE_VALUES) -> int:
    # uppercase -> played blank (0 points); '_' -> unplayed blank; ' ' -> no tile
    if 'a' <= ch <= 'z':
        return values.get(ch, 0)
    return 0


class Rack:
    """A player's hand: an ordered multiset of at most RACK_SIZE tiles."""

    def __init__(self, tiles: Iterable[str] = ()):
        self.tiles: List[str] = list(tiles)

    def __len__(self) -> int:
        return len(self.tiles)

    def __iter__(self) -> Iterator[str]:
        return iter(self.tiles)

    def __repr__(self) -> str:
        return f"Rack({''.join(self.tiles)!r})"

    def copy(self) -> List[str]:
        return list(self.tiles)

    def remove_tiles(self, word: str) -> str:
        """Remove the tiles used in word and return them.

        An uppercase symbol consumes a blank, a lowercase one its own letter,
        and a space (existing board tile) consumes nothing.
        """
        removed: List[str] = []
        for ch in word:
            if ch == ' ':
                continue
            tile = BLANK if 'A' <= ch <= 'Z' else ch
            self.tiles.remove(tile)
            removed.append(tile)
        return "".join(removed)

    def remove_selected(self, selection: Sequence[bool]) -> str:
        # Entries beyond the length of the rack are ignored
        chosen = [i for i, flag in enumerate(selection[: len(self.tiles)]) if flag]
        removed = "".join(self.tiles[i] for i in chosen)
        for i in reversed(chosen):
            del self.tiles[i]
        return removed

    def fill_from(self, bag: "TileBag", size: int = RACK_SIZE) -> int:
        return bag.deal(self, size - len(self.tiles))

    def value(self, values: Mapping[str, int] = TILE_VALUES) -> int:
        return sum(tile_value(t, values) for t in self.tiles)


class TileBag:
    """Undrawn tiles. Draws are taken from the end of the bag."""

    def __init__(self, tiles: Iterable[str], rng: random.Random):
        self.tiles: List[str] = list(tiles)
        self.rng = rng

    @staticmethod
    def standard(rng: random.Random, distribution: str = DISTRIBUTION) -> "TileBag":
        bag = TileBag(distribution, rng)
        bag.shuffle()
        return bag

    def __len__(self) -> int:
        return len(self.tiles)

    def shuffle(self) -> None:
        self.rng.shuffle(self.tiles)

    def draw(self) -> str:
        return self.tiles.pop()

    def deal(self, rack: Rack, n: int) -> int:
        """Move up to n tiles into rack; fewer if the bag runs out. Returns the number dealt."""
        dealt = 0
        while dealt < n and self.tiles:
            rack.tiles.append(self.draw())
            dealt += 1
        return dealt

    def return_tiles(self, tiles: Iterable[str]) -> None:
        self.tiles.extend(tiles)
        self.shuffle()
