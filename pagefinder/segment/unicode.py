"""Decoding of text into runes, and the word ranges that segmenters produce."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Union

Text = Union[str, bytes]


@dataclass(frozen=True)
class RuneStr:
    """One decoded character and its position within the decoded text."""

    rune: int
    offset: int
    length: int
    unicode_offset: int = 0
    unicode_length: int = 0


@dataclass(frozen=True)
class Word:
    """A slice of the segmented text."""

    word: Text
    offset: int
    unicode_offset: int = 0
    unicode_length: int = 0


@dataclass(frozen=True)
class WordRange:
    """An inclusive range ``[left, right]`` of rune indices."""

    left: int
    right: int

    def length(self) -> int:
        """Number of runes covered by the range."""
        return self.right - self.left + 1

    def is_all_ascii(self, runes: Sequence[RuneStr]) -> bool:
        """True when every rune of the range is below 0x80."""
        return all(r.rune < 0x80 for r in runes[self.left:self.right + 1])


def decode_rune(data: bytes) -> tuple[int, int]:
    """Decode the first UTF-8 character of ``data``.

    Returns ``(rune, byte_length)``, or ``(0, 0)`` when no character can be read.
    """
    if not data:
        return 0, 0
    first = data[0]
    size = len(data)
    if not first & 0x80:
        return first & 0x7F, 1
    if first <= 0xDF and size > 1:
        count, rune = 2, first & 0x1F
    elif first <= 0xEF and size > 2:
        count, rune = 3, first & 0x0F
    elif first <= 0xF7 and size > 3:
        count, rune = 4, first & 0x07
    else:
        return 0, 0
    for byte in data[1:count]:
        rune = (rune << 6) | (byte & 0x3F)
    return rune, count


def decode_runes(text: Text) -> list[RuneStr]:
    """Split text into runes.

    For ``str`` input offsets count characters; for ``bytes`` input they count
    bytes of the UTF-8 encoding. Raises ``ValueError`` on undecodable bytes.
    """
    if isinstance(text, str):
        return [RuneStr(ord(char), index, 1, index, 1) for index, char in enumerate(text)]
    data = bytes(text)
    runes: list[RuneStr] = []
    offset = 0
    while offset < len(data):
        rune, size = decode_rune(data[offset:offset + 4])
        if size == 0:
            raise ValueError(f"invalid UTF-8 sequence at byte {offset}")
        runes.append(RuneStr(rune, offset, size, len(runes), 1))
        offset += size
    return runes


def decode_unicode(text: Text) -> tuple[int, ...]:
    """Return the code points of ``text`` as a tuple."""
    return tuple(r.rune for r in decode_runes(text))


def is_single_word(text: Text) -> bool:
    """True when ``text`` holds at most one character."""
    data = text.encode("utf-8") if isinstance(text, str) else bytes(text)
    _, size = decode_rune(data)
    return size == len(data)


def _word_from_range(text: Text, runes: Sequence[RuneStr], word_range: WordRange) -> Word:
    left = runes[word_range.left]
    right = runes[word_range.right]
    size = right.offset - left.offset + right.length
    return Word(
        text[left.offset:left.offset + size],
        left.offset,
        left.unicode_offset,
        right.unicode_offset - left.unicode_offset + right.unicode_length,
    )


def words_from_ranges(text: Text, runes: Sequence[RuneStr], ranges: Sequence[WordRange]) -> list[Word]:
    """Turn rune ranges back into slices of ``text``."""
    return [_word_from_range(text, runes, word_range) for word_range in ranges]