"""Word splitting interface used by the indexers and query handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pagefinder.segment.jieba import Jieba


class SplitTool(ABC):
    """Something that cuts text into words."""

    @abstractmethod
    def cut(self, text: str) -> list[str]:
        """Cut text into words."""

    @abstractmethod
    def cut_for_search(self, text: str) -> list[str]:
        """Cut text into words plus the shorter words inside long ones."""


class JiebaSplitTool(SplitTool):
    """Splits text with a ``Jieba`` segmenter, HMM enabled."""

    def __init__(self, jieba: Jieba) -> None:
        self.jieba = jieba

    def cut(self, text: str) -> list[str]:
        return list(self.jieba.cut(text, True))

    def cut_for_search(self, text: str) -> list[str]:
        return list(self.jieba.cut_for_search(text, True))