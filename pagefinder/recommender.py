"""Keyword suggestions ranked by edit distance and frequency."""

from __future__ import annotations

import heapq
import json
from dataclasses import dataclass

from pagefinder.dictionary import Dictionary

MAX_CANDIDATES = 10


@dataclass(frozen=True)
class CandidateResult:
    """A suggested word; a smaller value is a better suggestion."""

    word: str
    freq: int
    dist: int

    def __lt__(self, other: "CandidateResult") -> bool:
        if self.dist != other.dist:
            return self.dist < other.dist
        if self.freq != other.freq:
            return self.freq > other.freq
        return len(self.word.encode("utf-8")) > len(other.word.encode("utf-8"))


def edit_distance(lhs: str, rhs: str) -> int:
    """Levenshtein distance between two strings, counted in characters."""
    previous = list(range(len(rhs) + 1))
    for i, left in enumerate(lhs, start=1):
        current = [i]
        for j, right in enumerate(rhs, start=1):
            if left == right:
                current.append(previous[j - 1])
            else:
                current.append(min(current[j - 1], previous[j], previous[j - 1]) + 1)
        previous = current
    return previous[-1]


def _worst_first_key(candidate: CandidateResult) -> tuple[int, int, int]:
    return (-candidate.dist, candidate.freq, len(candidate.word.encode("utf-8")))


class KeyRecommender:
    """Finds up to ten dictionary words sharing a character with the query."""

    def __init__(self, query_word: str, dictionary: Dictionary) -> None:
        self.query_word = query_word
        self.dictionary = dictionary
        self.split_word = list(query_word)
        self.candidates: list[CandidateResult] = []

    def edit_distance(self, other: str) -> int:
        """Edit distance between the query word and ``other``."""
        return edit_distance(self.query_word, other)

    def query(self) -> list[CandidateResult]:
        """Collect the best candidates, best first."""
        positions: set[int] = set()
        for char in self.split_word:
            positions |= self.dictionary.index.get(char, set())

        heap: list[tuple[tuple[int, int, int], int, CandidateResult]] = []
        max_dist = 0
        for counter, position in enumerate(sorted(positions)):
            word, freq = self.dictionary.entries[position]
            candidate = CandidateResult(word, freq, self.edit_distance(word))
            item = (_worst_first_key(candidate), counter, candidate)
            if len(heap) < MAX_CANDIDATES:
                max_dist = max(max_dist, candidate.dist)
                heapq.heappush(heap, item)
            elif candidate.dist <= max_dist:
                heapq.heapreplace(heap, item)
                max_dist = heap[0][2].dist
        self.candidates = sorted(candidate for _, _, candidate in heap)
        return list(self.candidates)

    def candidate_json(self) -> str:
        """The candidates as ``{"query": [...]}`` JSON, or ``null`` when there are none."""
        if not self.candidates:
            return json.dumps(None)
        message = {"query": [candidate.word for candidate in self.candidates]}
        return json.dumps(message, indent=4, ensure_ascii=False)