"""Building the weighted inverted index of the page library."""

from __future__ import annotations

import logging
import math
import os
import xml.etree.ElementTree as ET
from collections import Counter
from typing import Optional, Union

from pagefinder.config import Configuration
from pagefinder.split_tool import SplitTool

logger = logging.getLogger(__name__)

PAGE_LIB_FILE = "pageLib.xml"
NEW_PAGE_LIB_FILE = "pageLibNew.xml"
OFFSET_FILE = "offsetLib.dat"
NEW_OFFSET_FILE = "offsetNewLib.dat"
INVERT_INDEX_FILE = "invertIndexLib.dat"
MAX_DOC_ID = 4400
NO_TITLE = "没有标题"
NO_CONTENT = "没有内容"


def _document_text(data: bytes) -> str:
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise ValueError(f"cannot parse page: {exc}") from exc
    if root.tag != "doc":
        raise ValueError("page has no doc root element")
    title = root.find("title")
    content = root.find("content")
    title_text = title.text if title is not None else None
    content_text = content.text if content is not None else None
    text = title_text or NO_TITLE
    if content_text:
        return f"{text}:{content_text}"
    return text + NO_CONTENT


class PageLibPreprocessor:
    """Reads page offsets, weighs each document's words and stores the index."""

    def __init__(self, split_tool: SplitTool, config: Configuration) -> None:
        self.split_tool = split_tool
        self.config = config
        self.offsets: dict[int, tuple[int, int]] = {}
        self.invert_index: dict[str, set[tuple[int, float]]] = {}

    @property
    def page_lib_dir(self) -> str:
        return self.config.get("PageLib")

    def read_offsets(self, filename: str = OFFSET_FILE) -> dict[int, tuple[int, int]]:
        """Add ``doc_id offset length`` triples from a file in the page library directory."""
        path = f"{self.page_lib_dir}/{filename}"
        with open(path, encoding="utf-8") as handle:
            tokens = iter(handle.read().split())
        for triple in zip(tokens, tokens, tokens):
            try:
                doc_id, pos, length = (int(token) for token in triple)
            except ValueError:
                break
            self.offsets[doc_id] = (pos, length)
        logger.info("offsets loaded from %s", path)
        return self.offsets

    def build_invert_index(self) -> dict[str, set[tuple[int, float]]]:
        """Weigh every word of every deduplicated page, then store the index."""
        self.read_offsets(NEW_OFFSET_FILE)
        stop_words = self.config.stop_words()
        doc_words: dict[int, set[str]] = {}
        doc_freq: Counter[str] = Counter()
        with open(f"{self.page_lib_dir}/{PAGE_LIB_FILE}", "rb") as pages:
            for doc_id in sorted(self.offsets):
                pos, length = self.offsets[doc_id]
                pages.seek(pos)
                data = pages.read(length)
                if len(data) != length:
                    logger.warning("short read of document %d", doc_id)
                    continue
                text = _document_text(data)
                words = {w for w in self.split_tool.cut_for_search(text) if w not in stop_words}
                if words:
                    doc_words[doc_id] = words
                doc_freq.update(words)
        self.invert_index = self._weigh(doc_words, doc_freq)
        self.store_invert_index()
        return self.invert_index

    def _weigh(
        self, doc_words: dict[int, set[str]], doc_freq: Counter[str]
    ) -> dict[str, set[tuple[int, float]]]:
        total = float(len(self.offsets))
        index: dict[str, set[tuple[int, float]]] = {}
        for doc_id, words in sorted(doc_words.items()):
            tf = 1.0 / len(words)
            weights = {
                word: tf * math.log2(total / doc_freq[word] + 1 + 1) for word in sorted(words)
            }
            norm = math.sqrt(sum(weight * weight for weight in weights.values()))
            for word, weight in weights.items():
                index.setdefault(word, set()).add((doc_id, weight / norm))
        return index

    def store_invert_index(self) -> str:
        """Write ``word doc weight doc weight ...`` lines; return the file path."""
        path = f"{self.config.get('InvertedIndexLib')}/{INVERT_INDEX_FILE}"
        with open(path, "w", encoding="utf-8") as handle:
            for word in sorted(self.invert_index):
                postings = "".join(f" {doc} {weight:g}" for doc, weight in sorted(self.invert_index[word]))
                handle.write(f"{word}{postings}\n")
        logger.info("inverted index with %d words stored at %s", len(self.invert_index), path)
        return path

    def store_on_disk(self, offset_path: Optional[Union[str, os.PathLike]] = None) -> str:
        """Write the kept offsets and copy the kept pages to a new page library."""
        if offset_path is None:
            offset_path = f"{self.page_lib_dir}/{NEW_OFFSET_FILE}"
        with open(offset_path, "w", encoding="utf-8") as handle:
            handle.writelines(
                f"{doc_id} {pos} {length}\n" for doc_id, (pos, length) in sorted(self.offsets.items())
            )
        new_path = f"{self.page_lib_dir}/{NEW_PAGE_LIB_FILE}"
        with open(f"{self.page_lib_dir}/{PAGE_LIB_FILE}", "rb") as pages, open(new_path, "wb") as out:
            for doc_id in sorted(self.offsets):
                if not 1 <= doc_id <= MAX_DOC_ID:
                    continue
                pos, length = self.offsets[doc_id]
                pages.seek(pos)
                out.write(pages.read(length))
        logger.info("new page library stored at %s", new_path)
        return new_path