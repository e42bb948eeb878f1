"""Ranking pages of the library against a search query."""

from __future__ import annotations

import heapq
import json
import logging
import math
from collections import Counter
from typing import Iterable, Mapping, Optional, Sequence

from pagefinder.config import Configuration
from pagefinder.split_tool import SplitTool
from pagefinder.web_info import WebInfo
from pagefinder.webpage import parse_web_page

logger = logging.getLogger(__name__)

PAGE_LIB_FILE = "pageLib.xml"
MAX_RESULTS = 10
SEARCH_IDF = math.log2(1.5)

InvertIndex = Mapping[str, Iterable[tuple[int, float]]]


def find_relevant_documents(
    query_words: Sequence[str], invert_index: InvertIndex, min_score: float = 0.0
) -> list[int]:
    """Documents matching enough query words, most matches first, then highest total weight.

    A document must match at least ``max(2, len(query_words) // 2)`` query words
    and reach ``min_score`` in summed weight.
    """
    min_keywords = max(2, int(len(query_words) * 0.5))
    scores: dict[int, list] = {}
    for word in query_words:
        for doc_id, weight in invert_index.get(word, ()):
            entry = scores.setdefault(doc_id, [0, 0.0])
            entry[0] += 1
            entry[1] += weight
    kept = [
        (doc_id, count, total)
        for doc_id, (count, total) in sorted(scores.items())
        if count >= min_keywords and total >= min_score
    ]
    kept.sort(key=lambda item: (-item[1], -item[2]))
    return [doc_id for doc_id, _, _ in kept]


def _search_weights(words: Sequence[str]) -> dict[str, float]:
    counts = Counter(words)
    weights = {word: count / len(words) * SEARCH_IDF for word, count in sorted(counts.items())}
    norm = math.sqrt(sum(weight * weight for weight in weights.values()))
    if norm:
        weights = {word: weight / norm for word, weight in weights.items()}
    return weights


def _posting_weight(postings: Iterable[tuple[int, float]], doc_id: int) -> Optional[float]:
    weights = [weight for doc, weight in postings if doc == doc_id and weight >= 0.0]
    return min(weights) if weights else None


class WebPageQuery:
    """Answers a query with the ten pages closest to it by cosine similarity."""

    def __init__(self, split_tool: SplitTool, web_info: WebInfo, config: Configuration) -> None:
        self.split_tool = split_tool
        self.web_info = web_info
        self.config = config

    def _rank(self, words: Sequence[str]) -> list[tuple[float, int]]:
        invert_index = self.web_info.invert_index
        weights = _search_weights(words) if words else {}
        scored: list[tuple[float, int]] = []
        for doc_id in find_relevant_documents(words, invert_index):
            dot = 0.0
            for word, weight in weights.items():
                doc_weight = _posting_weight(invert_index.get(word, ()), doc_id)
                if doc_weight is not None:
                    dot += weight * doc_weight
            scored.append((dot, doc_id))
        return heapq.nlargest(MAX_RESULTS, scored)

    def query(self, key: str) -> str:
        """The best pages for ``key`` as ``{"result": [...]}`` JSON."""
        stop_words = self.config.stop_words()
        words = [word for word in self.split_tool.cut(key) if word not in stop_words]
        ranked = self._rank(words)
        logger.info("query %r matched %d documents", key, len(ranked))

        results = []
        with open(f"{self.config.get('PageLib')}/{PAGE_LIB_FILE}", "rb") as pages:
            for position, (_, doc_id) in enumerate(ranked, start=1):
                pos, length = self.web_info.offsets[doc_id]
                pages.seek(pos)
                page = parse_web_page(pages.read(length))
                results.append(
                    {
                        "title": page.title,
                        "content": page.content,
                        "url": page.link,
                        f"WebPage{position}": page.doc_id,
                    }
                )
        return json.dumps({"result": results}, indent=4, ensure_ascii=False, sort_keys=True)