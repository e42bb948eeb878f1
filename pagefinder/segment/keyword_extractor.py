"""TF-IDF keyword extraction."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Union

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.hmm import HMMModel
from pagefinder.segment.mix_segment import MixSegment
from pagefinder.segment.unicode import Text, is_single_word


@dataclass
class Keyword:
    """A keyword, where it occurs in the text and its weight."""

    word: Text
    offsets: list[int] = field(default_factory=list)
    weight: float = 0.0


def _atof(text: str) -> float:
    match = re.match(r"\s*([+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?)", text)
    return float(match.group(1)) if match else 0.0


def _load_stop_words(path: Union[str, os.PathLike]) -> set[str]:
    with open(path, encoding="utf-8") as handle:
        words = {line.rstrip("\n") for line in handle}
    if not words:
        raise ValueError(f"stop word file {path} is empty")
    return words


class KeywordExtractor:
    """Ranks the words of a text by term count times inverse document frequency."""

    def __init__(
        self,
        dict_trie: DictTrie,
        model: Union[HMMModel, str, os.PathLike],
        idf_path: Union[str, os.PathLike],
        stop_word_path: Union[str, os.PathLike],
    ) -> None:
        self.segment = MixSegment(dict_trie, model)
        self.idf: dict[str, float] = {}
        self.idf_average = self._load_idf(idf_path)
        self.stop_words = _load_stop_words(stop_word_path)

    def _load_idf(self, path: Union[str, os.PathLike]) -> float:
        total = 0.0
        line_count = 0
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line_count += 1
                line = line.rstrip("\n")
                if not line:
                    continue
                parts = line.split(" ")
                if parts[-1] == "":
                    parts.pop()
                if len(parts) != 2:
                    continue
                idf = _atof(parts[1])
                self.idf[parts[0]] = idf
                total += idf
        if line_count == 0:
            raise ValueError(f"idf file {path} is empty")
        average = total / line_count
        if average <= 0:
            raise ValueError(f"idf file {path} has no positive average")
        return average

    def extract(self, sentence: Text, top_n: int) -> list[Keyword]:
        """The ``top_n`` heaviest keywords, heaviest first."""
        keywords: dict[Text, Keyword] = {}
        offset = 0
        for word in self.segment.cut(sentence):
            start = offset
            offset += len(word)
            if is_single_word(word) or word in self.stop_words:
                continue
            keyword = keywords.setdefault(word, Keyword(word))
            keyword.offsets.append(start)
            keyword.weight += 1.0
        if offset != len(sentence):
            raise ValueError("segmented words do not cover the sentence")
        for word in sorted(keywords):
            key = word if isinstance(word, str) else word.decode("utf-8")
            keywords[word].weight *= self.idf.get(key, self.idf_average)
        ranked = sorted((keywords[word] for word in sorted(keywords)), key=lambda k: -k.weight)
        return ranked[:max(top_n, 0)]