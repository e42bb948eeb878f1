"""Candidate word dictionary and its character index, as loaded from disk."""

from __future__ import annotations

import os
from typing import Union

PathLike = Union[str, os.PathLike]


class Dictionary:
    """Words with frequencies, and for each character the positions of words holding it."""

    def __init__(self) -> None:
        self.entries: list[tuple[str, int]] = []
        self.index: dict[str, set[int]] = {}

    def load_dict(self, path: PathLike) -> None:
        """Append ``word freq`` pairs; reading stops at the first bad frequency."""
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
        for word, freq in zip(tokens[0::2], tokens[1::2]):
            try:
                value = int(freq)
            except ValueError:
                break
            self.entries.append((word, value))

    def load_index(self, path: PathLike) -> None:
        """Add lines of ``key position position ...`` to the index."""
        with open(path, encoding="utf-8") as handle:
            for line in handle:
                tokens = line.split()
                if not tokens:
                    continue
                key = tokens[0]
                for token in tokens[1:]:
                    try:
                        position = int(token)
                    except ValueError:
                        break
                    self.index.setdefault(key, set()).add(position)


def load_dictionary(data_dir: PathLike = "../data") -> Dictionary:
    """Load ``dictCn.dat``, ``dictEn.dat`` and ``DictIndex.dat`` from ``data_dir``."""
    dictionary = Dictionary()
    dictionary.load_dict(os.path.join(data_dir, "dictCn.dat"))
    dictionary.load_dict(os.path.join(data_dir, "dictEn.dat"))
    dictionary.load_index(os.path.join(data_dir, "DictIndex.dat"))
    return dictionary