"""Splitting sentences on separators and the common segmenter interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, Iterator, Sequence

from pagefinder.segment.unicode import RuneStr, Text, Word, WordRange, decode_runes, words_from_ranges

SPECIAL_SEPARATORS = " \t\n，。"


class PreFilter:
    """Cuts a sentence into rune ranges; each separator forms its own range."""

    def __init__(self, symbols: Iterable[int], sentence: Text) -> None:
        self.symbols = frozenset(symbols)
        self.runes: list[RuneStr] = decode_runes(sentence)

    def __iter__(self) -> Iterator[tuple[int, int]]:
        begin = 0
        for cursor, rune in enumerate(self.runes):
            if rune.rune in self.symbols:
                if begin < cursor:
                    yield begin, cursor
                yield cursor, cursor + 1
                begin = cursor + 1
        if begin < len(self.runes):
            yield begin, len(self.runes)


class SegmentBase(ABC):
    """Base of all segmenters: separators split a sentence before cutting."""

    def __init__(self) -> None:
        self.symbols: set[int] = set()
        self.reset_separators(SPECIAL_SEPARATORS)

    def reset_separators(self, separators: Text) -> None:
        """Use the characters of ``separators``; a repeated one raises ValueError."""
        symbols: set[int] = set()
        for rune in decode_runes(separators):
            if rune.rune in symbols:
                raise ValueError(f"separator {chr(rune.rune)!r} already exists")
            symbols.add(rune.rune)
        self.symbols = symbols

    @abstractmethod
    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int, *args) -> list[WordRange]:
        """Cut ``runes[begin:end]`` into word ranges."""

    def cut_words(self, sentence: Text, *args) -> list[Word]:
        """Cut a sentence into words with their offsets."""
        pre_filter = PreFilter(self.symbols, sentence)
        ranges = [
            word_range
            for begin, end in pre_filter
            for word_range in self.cut_range(pre_filter.runes, begin, end, *args)
        ]
        return words_from_ranges(sentence, pre_filter.runes, ranges)

    def cut(self, sentence: Text, *args) -> list[Text]:
        """Cut a sentence into word strings."""
        return [word.word for word in self.cut_words(sentence, *args)]