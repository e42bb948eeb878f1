"""Part-of-speech tags from the dictionary, with a fallback for unknown words."""

from __future__ import annotations

from typing import Protocol, Sequence

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.unicode import RuneStr, Text, decode_runes

POS_M = "m"
POS_ENG = "eng"
POS_X = "x"


class _TaggedSegment(Protocol):
    dict_trie: DictTrie

    def cut(self, sentence: Text) -> list[Text]: ...


def _special_rule(runes: Sequence[RuneStr]) -> str:
    half = len(runes) // 2
    ascii_count = 0
    digit_count = 0
    for rune in runes:
        if ascii_count >= half:
            break
        if rune.rune < 0x80:
            ascii_count += 1
            if 0x30 <= rune.rune <= 0x39:
                digit_count += 1
    if ascii_count == 0:
        return POS_X
    if digit_count == ascii_count:
        return POS_M
    return POS_ENG


class PosTagger:
    """Tags words using a segmenter's dictionary."""

    def tag(self, sentence: Text, segment: _TaggedSegment) -> list[tuple[Text, str]]:
        """Cut ``sentence`` with ``segment`` and pair every word with its tag."""
        return [(word, self.lookup_tag(word, segment)) for word in segment.cut(sentence)]

    def lookup_tag(self, word: Text, segment: _TaggedSegment) -> str:
        """The dictionary tag of ``word``, or a guess from its ASCII content."""
        try:
            runes = decode_runes(word)
        except ValueError:
            return POS_X
        unit = segment.dict_trie.find(runes)
        if unit is None or not unit.tag:
            return _special_rule(runes)
        return unit.tag