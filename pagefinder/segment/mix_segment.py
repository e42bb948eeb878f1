"""Dictionary segmentation with HMM decoding of unknown character runs."""

from __future__ import annotations

import os
from typing import Sequence, Union

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import HMMModel, HMMSegment
from pagefinder.segment.mp_segment import MPSegment
from pagefinder.segment.pos_tagger import PosTagger
from pagefinder.segment.segment_base import SegmentBase
from pagefinder.segment.unicode import RuneStr, Text, WordRange


class MixSegment(SegmentBase):
    """Cuts with the dictionary, then re-cuts runs of lone characters with the HMM."""

    def __init__(self, dict_trie: DictTrie, model: Union[HMMModel, str, os.PathLike]) -> None:
        super().__init__()
        self.mp_segment = MPSegment(dict_trie)
        self.hmm_segment = HMMSegment(model)
        self._tagger = PosTagger()

    @property
    def dict_trie(self) -> DictTrie:
        return self.mp_segment.dict_trie

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int, hmm: bool = True) -> list[WordRange]:
        if not hmm:
            return self.mp_segment.cut_range(runes, begin, end)
        words = self.mp_segment.cut_range(runes, begin, end)
        is_user_single = self.mp_segment.is_user_dict_single_chinese_word

        def is_lone(word_range: WordRange) -> bool:
            return word_range.left == word_range.right and not is_user_single(runes[word_range.left].rune)

        ranges: list[WordRange] = []
        index = 0
        while index < len(words):
            if not is_lone(words[index]):
                ranges.append(words[index])
                index += 1
                continue
            stop = index
            while stop < len(words) and is_lone(words[stop]):
                stop += 1
            ranges.extend(self.hmm_segment.cut_range(runes, words[index].left, words[stop - 1].left + 1))
            index = stop
        return ranges

    def tag(self, sentence: Text) -> list[tuple[Text, str]]:
        """Cut ``sentence`` and pair each word with its part-of-speech tag."""
        return self._tagger.tag(sentence, self)

    def lookup_tag(self, word: Text) -> str:
        """The part-of-speech tag of a single word."""
        return self._tagger.lookup_tag(word, self)