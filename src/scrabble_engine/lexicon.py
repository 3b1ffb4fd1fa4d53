from pathlib import Path
from typing import FrozenSet, Iterable, Iterator, Union


class Lexicon:
    """Read-only set of legal words, compared case-insensitively."""

    def __init__(self, words: FrozenSet[str]):
        self._words = words

    @staticmethod
    def from_words(words: Iterable[str]) -> "Lexicon":
        return Lexicon(frozenset(w.strip().lower() for w in words if w.strip()))

    def contains(self, word: str) -> bool:
        return word.lower() in self._words

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and self.contains(word)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)


def load_lexicon(path: Union[str, Path]) -> Lexicon:
    with open(path, "r", encoding="utf-8") as f:
        return Lexicon.from_words(line for line in f if line.strip() and line[0].isalpha())
