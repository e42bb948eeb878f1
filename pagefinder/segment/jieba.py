"""One object bundling the dictionary, the HMM model and every segmenter."""

from __future__ import annotations

import os
from typing import Iterable, Union

from pagefinder.segment.dict_trie import DictTrie
from pagefinder.segment.full_segment import FullSegment
from pagefinder.segment.hmm import HMMModel, HMMSegment
from pagefinder.segment.keyword_extractor import KeywordExtractor
from pagefinder.segment.mix_segment import MixSegment
from pagefinder.segment.mp_segment import MPSegment
from pagefinder.segment.query_segment import QuerySegment
from pagefinder.segment.unicode import Text

PathLike = Union[str, os.PathLike]


class Jieba:
    """Word segmentation front end sharing one dictionary and one model."""

    def __init__(
        self,
        dict_path: PathLike,
        model_path: PathLike,
        user_dict_path: PathLike,
        idf_path: PathLike,
        stop_word_path: PathLike,
    ) -> None:
        self.dict_trie = DictTrie(dict_path, user_dict_path)
        self.model = HMMModel(model_path)
        self.mp_segment = MPSegment(self.dict_trie)
        self.hmm_segment = HMMSegment(self.model)
        self.mix_segment = MixSegment(self.dict_trie, self.model)
        self.full_segment = FullSegment(self.dict_trie)
        self.query_segment = QuerySegment(self.dict_trie, self.model)
        self.extractor = KeywordExtractor(self.dict_trie, self.model, idf_path, stop_word_path)

    def cut(self, sentence: Text, hmm: bool = True) -> list[Text]:
        """Mixed dictionary and HMM segmentation."""
        return self.mix_segment.cut(sentence, hmm)

    def cut_all(self, sentence: Text) -> list[Text]:
        """Every dictionary word found in the sentence."""
        return self.full_segment.cut(sentence)

    def cut_for_search(self, sentence: Text, hmm: bool = True) -> list[Text]:
        """Mixed segmentation plus the short dictionary words inside long ones."""
        return self.query_segment.cut(sentence, hmm)

    def cut_hmm(self, sentence: Text) -> list[Text]:
        """Segmentation by the HMM alone."""
        return self.hmm_segment.cut(sentence)

    def cut_small(self, sentence: Text, max_word_len: int) -> list[Text]:
        """Dictionary segmentation with words no longer than ``max_word_len``."""
        return self.mp_segment.cut(sentence, max_word_len)

    def tag(self, sentence: Text) -> list[tuple[Text, str]]:
        """Words of the sentence with their part-of-speech tags."""
        return self.mix_segment.tag(sentence)

    def lookup_tag(self, word: Text) -> str:
        """Part-of-speech tag of a single word."""
        return self.mix_segment.lookup_tag(word)

    def insert_user_word(self, word: str, tag: str = "", freq: int = 0) -> None:
        """Add a word to the dictionary."""
        self.dict_trie.insert_user_word(word, tag, freq)

    def delete_user_word(self, word: str, tag: str = "") -> None:
        """Remove a word from the dictionary."""
        self.dict_trie.delete_user_word(word, tag)

    def find(self, word: Text) -> bool:
        """True when ``word`` is in the dictionary."""
        return word in self.dict_trie

    def reset_separators(self, separators: Text) -> None:
        """Replace the separator characters of every segmenter."""
        for segment in (
            self.mp_segment,
            self.hmm_segment,
            self.mix_segment,
            self.full_segment,
            self.query_segment,
        ):
            segment.reset_separators(separators)

    def load_user_dict(self, source: Union[PathLike, Iterable[str]]) -> None:
        """Add user words from files or from lines."""
        self.dict_trie.load_user_dict(source)