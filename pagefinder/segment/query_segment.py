"""Search-engine segmentation: mixed cut plus dictionary sub-words of long words."""

from __future__ import annotations

import os
from typing import Sequence, Union

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import HMMModel
from pagefinder.segment.mix_segment import MixSegment
from pagefinder.segment.segment_base import SegmentBase
from pagefinder.segment.unicode import RuneStr, WordRange


class QuerySegment(SegmentBase):
    """Emits the two- and three-character dictionary words inside each long word."""

    def __init__(self, dict_trie: DictTrie, model: Union[HMMModel, str, os.PathLike]) -> None:
        super().__init__()
        self.mix_segment = MixSegment(dict_trie, model)
        self.dict_trie = dict_trie

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int, hmm: bool = True) -> list[WordRange]:
        ranges: list[WordRange] = []
        for word_range in self.mix_segment.cut_range(runes, begin, end, hmm):
            length = word_range.length()
            for size in (2, 3):
                if length <= size:
                    continue
                for start in range(word_range.left, word_range.left + length - size + 1):
                    if self.dict_trie.find(runes[start:start + size]) is not None:
                        ranges.append(WordRange(start, start + size - 1))
            ranges.append(word_range)
        return ranges