"""Prefix tree over rune sequences used for dictionary lookups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence, Union

from pagefinder.segment.unicode import RuneStr

MAX_WORD_LENGTH = 512

RuneLike = Union[int, RuneStr]


@dataclass
class DictUnit:
    """A dictionary entry: the word's runes, its log weight and its tag."""

    word: tuple[int, ...]
    weight: float = 0.0
    tag: str = ""


@dataclass
class Dag:
    """Words starting at one rune: ``nexts`` holds ``(end_index, unit)`` pairs."""

    rune: RuneLike
    nexts: list[tuple[int, Optional[DictUnit]]] = field(default_factory=list)
    info: Optional[DictUnit] = None
    weight: float = 0.0


class _Node:
    __slots__ = ("children", "value")

    def __init__(self) -> None:
        self.children: dict[int, _Node] = {}
        self.value: Optional[DictUnit] = None


def _code(rune: RuneLike) -> int:
    return rune if isinstance(rune, int) else rune.rune


class Trie:
    """Maps rune sequences to dictionary units.

    Runes may be given as code points or as ``RuneStr`` values.
    """

    def __init__(self, keys: Iterable[Sequence[RuneLike]] = (), values: Iterable[DictUnit] = ()) -> None:
        keys = list(keys)
        values = list(values)
        if len(keys) != len(values):
            raise ValueError("keys and values differ in length")
        self._root = _Node()
        for key, value in zip(keys, values):
            self.insert(key, value)

    def find(self, runes: Sequence[RuneLike]) -> Optional[DictUnit]:
        """Return the unit stored for exactly ``runes``, or None."""
        if not runes:
            return None
        node: Optional[_Node] = self._root
        for rune in runes:
            node = node.children.get(_code(rune))
            if node is None:
                return None
        return node.value

    def find_dags(self, runes: Sequence[RuneLike], max_word_len: int = MAX_WORD_LENGTH) -> list[Dag]:
        """For each position, list the dictionary words that start there."""
        codes = [_code(r) for r in runes]
        dags: list[Dag] = []
        for start, rune in enumerate(runes):
            node = self._root.children.get(codes[start])
            dag = Dag(rune, [(start, node.value if node is not None else None)])
            if node is not None:
                for end in range(start + 1, min(len(codes), start + max_word_len)):
                    node = node.children.get(codes[end])
                    if node is None:
                        break
                    if node.value is not None:
                        dag.nexts.append((end, node.value))
            dags.append(dag)
        return dags

    def insert(self, key: Sequence[RuneLike], value: DictUnit) -> None:
        """Store ``value`` under ``key``; an empty key is ignored."""
        if not key:
            return
        node = self._root
        for rune in key:
            node = node.children.setdefault(_code(rune), _Node())
        node.value = value

    def delete(self, key: Sequence[RuneLike]) -> None:
        """Drop the whole branch under the key's first rune."""
        if not key:
            return
        self._root.children.pop(_code(key[0]), None)