"""TextRank keyword extraction over a co-occurrence graph."""

from __future__ import annotations

import os
from collections import defaultdict
from typing import Union

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import HMMModel
from pagefinder.segment.keyword_extractor import Keyword
from pagefinder.segment.mix_segment import MixSegment
from pagefinder.segment.unicode import Text, is_single_word


class WordGraph:
    """Undirected weighted graph of words ranked by PageRank iteration."""

    def __init__(self, damping: float = 0.85) -> None:
        self.damping = damping
        self.graph: dict[Text, dict[Text, float]] = defaultdict(lambda: defaultdict(float))

    def add_edge(self, start: Text, end: Text, weight: float) -> None:
        """Add ``weight`` to the edge between ``start`` and ``end``."""
        self.graph[start][end] += weight
        self.graph[end][start] += weight

    def rank(self, words: dict[Text, Keyword], rank_time: int = 10) -> None:
        """Set the weight of every graph node in ``words``, then normalise all weights."""
        if not self.graph:
            return
        nodes = sorted(self.graph)
        default = 1.0 / len(nodes)
        out_sum: dict[Text, float] = {}
        for node in nodes:
            keyword = words.setdefault(node, Keyword(node))
            keyword.word = node
            keyword.weight = default
            out_sum[node] = sum(self.graph[node].values())
        for _ in range(rank_time):
            for node in nodes:
                score = sum(
                    weight / out_sum[other] * words[other].weight
                    for other, weight in sorted(self.graph[node].items())
                )
                words[node].weight = (1 - self.damping) + self.damping * score
        weights = [keyword.weight for keyword in words.values()]
        low, high = min(weights), max(weights)
        for keyword in words.values():
            keyword.weight = (keyword.weight - low / 10.0) / (high - low / 10.0)


def _load_stop_words(path: Union[str, os.PathLike]) -> set[str]:
    with open(path, encoding="utf-8") as handle:
        words = {line.rstrip("\n") for line in handle}
    if not words:
        raise ValueError(f"stop word file {path} is empty")
    return words


class TextRankExtractor:
    """Keywords ranked by their centrality among nearby words."""

    def __init__(
        self,
        dict_trie: DictTrie,
        model: Union[HMMModel, str, os.PathLike],
        stop_word_path: Union[str, os.PathLike],
    ) -> None:
        self.segment = MixSegment(dict_trie, model)
        self.stop_words = _load_stop_words(stop_word_path)

    def _skipped(self, word: Text) -> bool:
        return is_single_word(word) or word in self.stop_words

    def extract(self, sentence: Text, top_n: int, span: int = 5, rank_time: int = 10) -> list[Keyword]:
        """The ``top_n`` highest ranked keywords, highest first."""
        words = self.segment.cut(sentence)
        graph = WordGraph()
        keywords: dict[Text, Keyword] = {}
        offset = 0
        for index, word in enumerate(words):
            start = offset
            offset += len(word)
            if self._skipped(word):
                continue
            skip = 0
            other = index + 1
            while other < index + span + skip and other < len(words):
                if self._skipped(words[other]):
                    skip += 1
                else:
                    graph.add_edge(word, words[other], 1)
                other += 1
            keywords.setdefault(word, Keyword(word)).offsets.append(start)
        if offset != len(sentence):
            raise ValueError("segmented words do not cover the sentence")
        graph.rank(keywords, rank_time)
        ranked = sorted((keywords[word] for word in sorted(keywords)), key=lambda k: -k.weight)
        return ranked[:max(top_n, 0)]