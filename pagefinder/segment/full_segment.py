"""Full segmentation: every dictionary word found in the text."""

from __future__ import annotations

from typing import Sequence

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.segment_base import SegmentBase
from pagefinder.segment.unicode import RuneStr, WordRange


class FullSegment(SegmentBase):
    """Lists all multi-character dictionary words and uncovered single characters."""

    def __init__(self, dict_trie: DictTrie) -> None:
        super().__init__()
        self.dict_trie = dict_trie

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        dags = self.dict_trie.find_dags(runes[begin:end])
        ranges: list[WordRange] = []
        max_index = 0
        word_len = 0
        for position, dag in enumerate(dags):
            alone = len(dag.nexts) == 1 and max_index <= position
            for next_offset, unit in dag.nexts:
                if unit is None:
                    if len(dag.nexts) == 1 and max_index <= position:
                        ranges.append(WordRange(begin + position, begin + next_offset))
                else:
                    word_len = len(unit.word)
                    if word_len >= 2 or alone:
                        ranges.append(WordRange(begin + position, begin + next_offset))
                max_index = max(max_index, position + word_len)
        return ranges