"""Hidden Markov model segmentation for runs of unknown characters."""

from __future__ import annotations

import os
from typing import Iterator, Sequence, TextIO, Union

from pagefinder.segment.segment_base import SegmentBase
from pagefinder.segment.unicode import RuneStr, WordRange, decode_unicode

MIN_DOUBLE = -3.14e100
MAX_DOUBLE = 3.14e100

_B, _E, _M, _S = range(4)
_STATES = range(4)


def _split(text: str, separator: str) -> list[str]:
    """Split on ``separator``, dropping a single trailing empty field."""
    if not text:
        return []
    parts = text.split(separator)
    if parts[-1] == "":
        parts.pop()
    return parts


def _content_lines(handle: TextIO) -> Iterator[str]:
    for line in handle:
        line = line.strip()
        if line and not line.startswith("#"):
            yield line


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise ValueError("HMM model file is truncated") from None


def _read_row(line: str) -> list[float]:
    parts = _split(line, " ")
    if len(parts) != len(_STATES):
        raise ValueError(f"expected {len(_STATES)} probabilities, got line {line!r}")
    return [float(part) for part in parts]


def _read_emit(line: str) -> dict[int, float]:
    probs: dict[int, float] = {}
    for entry in _split(line, ","):
        pair = _split(entry, ":")
        if len(pair) != 2:
            raise ValueError(f"illegal emit probability entry {entry!r}")
        key = decode_unicode(pair[0])
        if len(key) != 1:
            raise ValueError(f"emit key {pair[0]!r} is not a single character")
        probs[key[0]] = float(pair[1])
    return probs


class HMMModel:
    """Start, transition and emission log probabilities for states B, E, M, S."""

    def __init__(self, model_path: Union[str, os.PathLike]) -> None:
        with open(model_path, encoding="utf-8") as handle:
            lines = _content_lines(handle)
            self.start_prob = _read_row(_next_line(lines))
            self.trans_prob = [_read_row(_next_line(lines)) for _ in _STATES]
            self.emit_probs = [_read_emit(_next_line(lines)) for _ in _STATES]

    def emit_prob(self, state: int, rune: int, default: float) -> float:
        """Emission log probability of ``rune`` in ``state``, or ``default``."""
        return self.emit_probs[state].get(rune, default)


def _is_ascii_letter(code: int) -> bool:
    return 0x41 <= code <= 0x5A or 0x61 <= code <= 0x7A


def _is_ascii_digit(code: int) -> bool:
    return 0x30 <= code <= 0x39


def _letters_end(runes: Sequence[RuneStr], begin: int, end: int) -> int:
    if not _is_ascii_letter(runes[begin].rune):
        return begin
    pos = begin + 1
    while pos < end and (_is_ascii_letter(runes[pos].rune) or _is_ascii_digit(runes[pos].rune)):
        pos += 1
    return pos


def _number_end(runes: Sequence[RuneStr], begin: int, end: int) -> int:
    if not _is_ascii_digit(runes[begin].rune):
        return begin
    pos = begin + 1
    while pos < end and (_is_ascii_digit(runes[pos].rune) or runes[pos].rune == ord(".")):
        pos += 1
    return pos


class HMMSegment(SegmentBase):
    """Cuts text by Viterbi decoding; ASCII letters and numbers form their own words."""

    def __init__(self, model: Union[HMMModel, str, os.PathLike]) -> None:
        super().__init__()
        self.model = model if isinstance(model, HMMModel) else HMMModel(model)

    def cut_range(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        ranges: list[WordRange] = []
        left = right = begin
        while right < end:
            if runes[right].rune < 0x80:
                if left != right:
                    ranges.extend(self._internal_cut(runes, left, right))
                left = right
                right = _letters_end(runes, left, end)
                if right == left:
                    right = _number_end(runes, left, end)
                if right == left:
                    right = left + 1
                ranges.append(WordRange(left, right - 1))
                left = right
            else:
                right += 1
        if left != right:
            ranges.extend(self._internal_cut(runes, left, right))
        return ranges

    def _internal_cut(self, runes: Sequence[RuneStr], begin: int, end: int) -> list[WordRange]:
        status = self._viterbi([r.rune for r in runes[begin:end]])
        ranges: list[WordRange] = []
        left = begin
        for offset, state in enumerate(status):
            if state % 2:  # E or S closes a word
                ranges.append(WordRange(left, begin + offset))
                left = begin + offset + 1
        return ranges

    def _viterbi(self, codes: Sequence[int]) -> list[int]:
        model = self.model
        weights = [[model.start_prob[y] + model.emit_prob(y, codes[0], MIN_DOUBLE) for y in _STATES]]
        paths = [[-1] * len(_STATES)]
        for code in codes[1:]:
            previous = weights[-1]
            row: list[float] = []
            back: list[int] = []
            for y in _STATES:
                emit = model.emit_prob(y, code, MIN_DOUBLE)
                best, best_state = MIN_DOUBLE, _E
                for pre in _STATES:
                    candidate = previous[pre] + model.trans_prob[pre][y] + emit
                    if candidate > best:
                        best, best_state = candidate, pre
                row.append(best)
                back.append(best_state)
            weights.append(row)
            paths.append(back)
        state = _E if weights[-1][_E] >= weights[-1][_S] else _S
        status: list[int] = []
        for back in reversed(paths):
            status.append(state)
            state = back[state]
        status.reverse()
        return status