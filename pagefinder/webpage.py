"""One ``<doc>`` record of the page library."""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import Union

NO_CONTENT = "no content"


@dataclass
class WebPage:
    """The fields of a stored page."""

    doc_id: int = 0
    title: str = ""
    link: str = ""
    content: str = ""


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_web_page(doc: Union[str, bytes]) -> WebPage:
    """Parse a ``<doc>`` record; raises ``ValueError`` when it is not one."""
    try:
        root = ET.fromstring(doc)
    except ET.ParseError as exc:
        raise ValueError(f"cannot parse page: {exc}") from exc
    if root.tag != "doc":
        raise ValueError("page has no doc root element")

    def text_of(name: str) -> str:
        element = root.find(name)
        if element is None:
            raise ValueError(f"page has no {name} element")
        return element.text or ""

    content = root.find("content")
    if content is None:
        raise ValueError("page has no content element")
    return WebPage(
        doc_id=_atoi(text_of("docId")),
        title=text_of("title"),
        link=text_of("link"),
        content=content.text or NO_CONTENT,
    )