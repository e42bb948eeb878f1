"""Building the page library file from a directory of RSS feeds."""

from __future__ import annotations

import logging
import os
import re
import xml.etree.ElementTree as ET
from typing import Iterator, Optional, Union

from pagefinder.config import Configuration
from pagefinder.dir_scanner import scan_dir

logger = logging.getLogger(__name__)

PAGE_LIB_FILE = "pageLib.xml"
NO_DESCRIPTION = "no description"

_TAG_OR_ENTITY = re.compile(r"<[^>]*>|&[^;]+;")


def remove_html_tags(text: str) -> str:
    """Strip HTML tags and character entities such as ``&amp;`` from ``text``."""
    return _TAG_OR_ENTITY.sub("", text)


def _element_text(element: Optional[ET.Element]) -> str:
    return (element.text or "") if element is not None else ""


def _format_record(doc_id: int, title: str, link: str, content: str) -> str:
    return (
        "<doc>\n"
        f"    <docId>{doc_id}</docId>\n"
        f"    <title>{title}</title>\n"
        f"    <link>{link}</link>\n"
        f"    <content>{content}</content>\n"
        "</doc>\n\n"
    )


def _read_items(path: str) -> Iterator[tuple[str, str, str]]:
    """Yield ``(title, link, content)`` for each item of an RSS file."""
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ValueError(f"cannot parse {path}: {exc}") from exc
    if root.tag != "rss":
        raise ValueError(f"{path} has no rss root element")
    channel = root.find("channel")
    if channel is None:
        raise ValueError(f"{path} has no channel element")
    for item in channel.findall("item"):
        title = item.find("title")
        link = item.find("link")
        if title is None or link is None:
            raise ValueError(f"{path} has an item without title or link")
        description = item.find("description")
        content = (
            NO_DESCRIPTION if description is None else remove_html_tags(_element_text(description))
        )
        yield remove_html_tags(_element_text(title)), _element_text(link), content


class PageLib:
    """Collects every RSS item of ``WebCorpusDir`` into one ``<doc>`` file."""

    def __init__(self, config: Configuration) -> None:
        self.config = config
        self.path = f"{config.get('PageLib')}/{PAGE_LIB_FILE}"
        self.offsets: dict[int, tuple[int, int]] = {}

    def create(self) -> dict[int, tuple[int, int]]:
        """Write the page library; return ``doc_id -> (byte offset, byte length)``."""
        self.offsets = {}
        position = 0
        doc_id = 1
        with open(self.path, "wb") as out:
            for path in scan_dir(self.config.get("WebCorpusDir")):
                for title, link, content in _read_items(path):
                    record = _format_record(doc_id, title, link, content).encode("utf-8")
                    out.write(record)
                    self.offsets[doc_id] = (position, len(record))
                    position += len(record)
                    doc_id += 1
        logger.info("page library created with %d documents at %s", doc_id - 1, self.path)
        return self.offsets

    def store(self, path: Union[str, os.PathLike]) -> None:
        """Write the offsets as ``doc_id offset length`` lines."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.writelines(
                f"{doc_id} {pos} {length}\n" for doc_id, (pos, length) in sorted(self.offsets.items())
            )
        logger.info("offsets stored at %s", path)