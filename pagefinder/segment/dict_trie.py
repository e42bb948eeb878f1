"""Word dictionary with log-probability weights, backed by a trie."""

from __future__ import annotations

import math
import os
import re
from enum import Enum
from typing import Iterable, Optional, Sequence, Union

from pagefinder.segment.trie import MAX_WORD_LENGTH, Dag, DictUnit, RuneLike, Trie
from pagefinder.segment.unicode import decode_unicode


class UserWordWeightOption(Enum):
    """Which dictionary weight user words without a frequency receive."""

    MIN = "min"
    MEDIAN = "median"
    MAX = "max"


def _split(text: str, separators: str) -> list[str]:
    """Split on any of ``separators``, dropping a single trailing empty field."""
    if not text:
        return []
    parts = re.split("[" + re.escape(separators) + "]", text)
    if parts[-1] == "":
        parts.pop()
    return parts


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class DictTrie:
    """A dictionary file of ``word freq tag`` lines plus optional user words."""

    def __init__(
        self,
        dict_path: Union[str, os.PathLike],
        user_dict_paths: Union[str, os.PathLike] = "",
        user_word_weight_opt: UserWordWeightOption = UserWordWeightOption.MEDIAN,
    ) -> None:
        self._trie: Optional[Trie] = None
        self._active_units: list[DictUnit] = []
        self._user_single_words: set[int] = set()
        self._static_units = self._load_dict(dict_path)
        if not self._static_units:
            raise ValueError(f"dictionary {dict_path} is empty")
        for unit in self._static_units:
            if unit.weight <= 0:
                raise ValueError(f"non-positive frequency for {unit.word!r}")
        self.freq_sum = sum(unit.weight for unit in self._static_units)
        for unit in self._static_units:
            unit.weight = math.log(unit.weight / self.freq_sum)

        ordered = sorted(unit.weight for unit in self._static_units)
        self.min_weight = ordered[0]
        self.max_weight = ordered[-1]
        self.median_weight = ordered[len(ordered) // 2]
        self.user_word_default_weight = {
            UserWordWeightOption.MIN: self.min_weight,
            UserWordWeightOption.MEDIAN: self.median_weight,
        }.get(user_word_weight_opt, self.max_weight)

        if user_dict_paths:
            self.load_user_dict(user_dict_paths)
        self._trie = Trie([unit.word for unit in self._static_units], self._static_units)

    @staticmethod
    def _load_dict(path: Union[str, os.PathLike]) -> list[DictUnit]:
        units = []
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                line = line.rstrip("\n")
                parts = _split(line, " ")
                if len(parts) != 3:
                    raise ValueError(f"illegal dictionary line: {line!r}")
                word, freq, tag = parts
                units.append(DictUnit(decode_unicode(word), float(freq), tag))
        return units

    def insert_user_word(self, word: str, tag: str = "", freq: int = 0) -> None:
        """Add a word; a non-zero ``freq`` sets its weight, else the default is used."""
        weight = math.log(freq / self.freq_sum) if freq else self.user_word_default_weight
        unit = DictUnit(decode_unicode(word), weight, tag)
        self._active_units.append(unit)
        self._trie.insert(unit.word, unit)

    def delete_user_word(self, word: str, tag: str = "") -> None:
        """Remove a word from the lookup trie."""
        self._trie.delete(decode_unicode(word))

    def find(self, runes: Sequence[RuneLike]) -> Optional[DictUnit]:
        """Return the entry for exactly ``runes``, or None."""
        return self._trie.find(runes)

    def find_dags(self, runes: Sequence[RuneLike], max_word_len: int = MAX_WORD_LENGTH) -> list[Dag]:
        """Dictionary words starting at each position of ``runes``."""
        return self._trie.find_dags(runes, max_word_len)

    def __contains__(self, word: object) -> bool:
        if not isinstance(word, (str, bytes)):
            return False
        try:
            runes = decode_unicode(word)
        except ValueError:
            return False
        return self.find(runes) is not None

    def is_user_dict_single_chinese_word(self, rune: int) -> bool:
        """True when a one-character user word has this code point."""
        return rune in self._user_single_words

    def insert_user_dict_line(self, line: str) -> None:
        """Add one ``word [freq] [tag]`` user dictionary line."""
        parts = _split(line, " ")
        if len(parts) == 1:
            unit = DictUnit(decode_unicode(parts[0]), self.user_word_default_weight, "")
        elif len(parts) == 2:
            unit = DictUnit(decode_unicode(parts[0]), self.user_word_default_weight, parts[1])
        elif len(parts) == 3:
            freq = _atoi(parts[1])
            weight = math.log(freq / self.freq_sum) if freq > 0 else -math.inf
            unit = DictUnit(decode_unicode(parts[0]), weight, parts[2])
        else:
            return
        self._static_units.append(unit)
        if len(unit.word) == 1:
            self._user_single_words.add(unit.word[0])
        if self._trie is not None:
            self._trie.insert(unit.word, unit)

    def load_user_dict(self, source: Union[str, os.PathLike, Iterable[str]]) -> None:
        """Load user words from ``|``/``;`` separated paths or from lines."""
        if isinstance(source, (str, os.PathLike)):
            for path in _split(os.fspath(source), "|;"):
                with open(path, encoding="utf-8") as handle:
                    for line in handle:
                        line = line.rstrip("\n")
                        if line:
                            self.insert_user_dict_line(line)
            return
        lines = sorted(source) if isinstance(source, (set, frozenset)) else source
        for line in lines:
            self.insert_user_dict_line(line)