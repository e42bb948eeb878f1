"""Maximum-probability segmentation over the dictionary's word graph."""

from __future__ import annotations

from typing import Sequence

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import MIN_DOUBLE
from pagefinder.segment.pos_tagger import PosTagger
from pagefinder.segment.segment_base import SegmentBase
from pagefinder.segment.trie import MAX_WORD_LENGTH, Dag
from pagefinder.segment.unicode import RuneStr, Text, WordRange


class MPSegment(SegmentBase):
    """Picks the path of dictionary words with the largest total log weight."""

    def __init__(self, dict_trie: DictTrie) -> None:
        super().__init__()
        self.dict_trie = dict_trie
        self._tagger = PosTagger()

    def cut_range(
        self,
        runes: Sequence[RuneStr],
        begin: int,
        end: int,
        max_word_len: int = MAX_WORD_LENGTH,
    ) -> list[WordRange]:
        dags = self.dict_trie.find_dags(runes[begin:end], max_word_len)
        self._calc_dp(dags)
        ranges: list[WordRange] = []
        index = 0
        while index < len(dags):
            unit = dags[index].info
            size = len(unit.word) if unit is not None else 1
            ranges.append(WordRange(begin + index, begin + index + size - 1))
            index += size
        return ranges

    def _calc_dp(self, dags: list[Dag]) -> None:
        min_weight = self.dict_trie.min_weight
        for dag in reversed(dags):
            dag.info = None
            dag.weight = MIN_DOUBLE
            for next_pos, unit in dag.nexts:
                value = dags[next_pos + 1].weight if next_pos + 1 < len(dags) else 0.0
                value += unit.weight if unit is not None else min_weight
                if value > dag.weight:
                    dag.info = unit
                    dag.weight = value

    def tag(self, sentence: Text) -> list[tuple[Text, str]]:
        """Cut ``sentence`` and pair each word with its part-of-speech tag."""
        return self._tagger.tag(sentence, self)

    def is_user_dict_single_chinese_word(self, rune: int) -> bool:
        """True when ``rune`` is a one-character user dictionary word."""
        return self.dict_trie.is_user_dict_single_chinese_word(rune)