"""Building the English and Chinese candidate dictionaries and their index."""

from __future__ import annotations

import logging
import os
import string
from collections import Counter
from typing import Union

from pagefinder.config import Configuration
from pagefinder.dictionary import Dictionary
from pagefinder.dir_scanner import scan_dir
from pagefinder.split_tool import SplitTool

logger = logging.getLogger(__name__)

_LETTERS = frozenset(string.ascii_letters)


def normalize_en_word(word: str) -> str:
    """Lower-case ``word``, or return an empty string if it is not all ASCII letters."""
    if not all(char in _LETTERS for char in word):
        return ""
    return word.lower()


class DictProducer:
    """Counts words in corpus files and indexes dictionary words by character."""

    def __init__(self, tool: SplitTool, config: Configuration) -> None:
        self.tool = tool
        self.config = config
        self.stop_words = config.stop_words()
        self.entries: list[tuple[str, int]] = []
        self.index: dict[str, set[int]] = {}

    def build_en_dict(self) -> None:
        """Count the English words of every file in ``EnDictMetaDir``."""
        counts: Counter[str] = Counter()
        for path in scan_dir(self.config.get("EnDictMetaDir")):
            with open(path, encoding="utf-8", errors="replace") as handle:
                text = handle.read()
            for token in text.split():
                word = normalize_en_word(token)
                if word not in self.stop_words and len(word) > 1:
                    counts[word] += 1
        self.entries = sorted(counts.items())
        logger.info("English dictionary built with %d words", len(self.entries))

    def build_cn_dict(self) -> None:
        """Count the non-ASCII words of every file in ``CnDictMetaDir``."""
        counts: Counter[str] = Counter()
        for path in scan_dir(self.config.get("CnDictMetaDir")):
            with open(path, encoding="utf-8") as handle:
                text = handle.read().replace("\n", "")
            for word in self.tool.cut_for_search(text):
                if word and word not in self.stop_words and ord(word[0]) >= 0x80:
                    counts[word] += 1
        self.entries = sorted(counts.items())
        logger.info("Chinese dictionary built with %d words", len(self.entries))

    def build_index(self) -> None:
        """Load the stored dictionaries and map each character to the words holding it."""
        dirs = self.config.dict_dirs()
        if not dirs:
            raise ValueError("no DictDir configured")
        dictionary = Dictionary()
        dictionary.load_dict(f"{dirs[0]}/dictCn.dat")
        dictionary.load_dict(f"{dirs[0]}/dictEn.dat")
        self.entries = dictionary.entries
        self.index = {}
        for position, (word, _) in enumerate(self.entries):
            if not word:
                continue
            count = len(word.encode("utf-8")) // len(word[0].encode("utf-8"))
            for char in word[:count]:
                self.index.setdefault(char, set()).add(position)

    def store_dict(self, filepath: Union[str, os.PathLike]) -> None:
        """Write the dictionary as ``word freq`` lines."""
        with open(filepath, "w", encoding="utf-8") as handle:
            handle.writelines(f"{word} {freq}\n" for word, freq in self.entries)
        logger.info("dictionary stored at %s", filepath)

    def store_index(self, filepath: Union[str, os.PathLike]) -> None:
        """Write the index as ``char position position ...`` lines."""
        with open(filepath, "w", encoding="utf-8") as handle:
            for key in sorted(self.index):
                positions = "".join(f"{p} " for p in sorted(self.index[key]))
                handle.write(f"{key} {positions}\n")
        logger.info("index stored at %s", filepath)