"""Key/value configuration file with stop-word and dictionary lookups."""

from __future__ import annotations

import os
from typing import Union

DEFAULT_CONFIG_PATH = "../conf/myConf.conf"


class Configuration:
    """Settings read from lines of ``key value``; the first value for a key wins."""

    def __init__(self, path: Union[str, os.PathLike] = DEFAULT_CONFIG_PATH) -> None:
        self.path = os.fspath(path)
        self.values: dict[str, str] = {}
        with open(self.path, encoding="utf-8") as handle:
            for line in handle:
                tokens = line.split()
                if not tokens:
                    continue
                self.values.setdefault(tokens[0], tokens[1] if len(tokens) > 1 else "")

    def get(self, key: str, default: str = "") -> str:
        """The value configured for ``key``, or ``default``."""
        return self.values.get(key, default)

    def stop_words(self) -> set[str]:
        """Words of every file named by a key that starts with ``StopWords``."""
        words: set[str] = set()
        for key in sorted(self.values):
            if key.startswith("StopWords"):
                with open(self.values[key], encoding="utf-8") as handle:
                    words.update(handle.read().split())
        return words

    def dict_dirs(self) -> list[str]:
        """The configured ``DictDir`` directories."""
        return [self.values["DictDir"]] if "DictDir" in self.values else []