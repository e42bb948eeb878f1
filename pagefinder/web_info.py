"""Page offsets and the weighted inverted index, as loaded for searching."""

from __future__ import annotations

import logging
import os
from typing import Union

from pagefinder.config import Configuration

logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]

OFFSET_FILE = "offsetNewLib.dat"
INVERT_INDEX_FILE = "invertIndexLib.dat"


class WebInfo:
    """Where each page sits in the page library, and which pages hold each word."""

    def __init__(self) -> None:
        self.offsets: dict[int, tuple[int, int]] = {}
        self.invert_index: dict[str, set[tuple[int, float]]] = {}

    def load(self, offset_path: PathLike, index_path: PathLike) -> None:
        """Read ``doc offset length`` triples and ``word doc weight ...`` lines.

        Reading of either file stops at the first malformed number.
        """
        with open(offset_path, encoding="utf-8") as handle:
            tokens = iter(handle.read().split())
        for triple in zip(tokens, tokens, tokens):
            try:
                doc_id, pos, length = (int(token) for token in triple)
            except ValueError:
                break
            self.offsets[doc_id] = (pos, length)
        logger.info("offsets loaded from %s", offset_path)

        with open(index_path, encoding="utf-8") as handle:
            for line in handle:
                tokens = line.split()
                if not tokens:
                    continue
                word = tokens[0]
                rest = iter(tokens[1:])
                for doc_token, weight_token in zip(rest, rest):
                    try:
                        posting = (int(doc_token), float(weight_token))
                    except ValueError:
                        break
                    self.invert_index.setdefault(word, set()).add(posting)
        logger.info("inverted index with %d words loaded from %s", len(self.invert_index), index_path)


def load_web_info(config: Configuration) -> WebInfo:
    """Load the files named by the ``OffsetLib`` and ``InvertedIndexLib`` settings."""
    info = WebInfo()
    info.load(
        f"{config.get('OffsetLib')}/{OFFSET_FILE}",
        f"{config.get('InvertedIndexLib')}/{INVERT_INDEX_FILE}",
    )
    return info