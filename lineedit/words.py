"""Cursor motion targets within a text: graphemes, words and WORDs.

Every position is a UTF-8 byte offset into the text. A "word" follows the
Unicode word boundary rules; a "WORD" is a run of anything but whitespace.
"""

from __future__ import annotations

from itertools import pairwise
from typing import Iterable, TypeVar

from lineedit.segmentation import grapheme_indices, is_whitespace_str, word_bound_indices

__all__ = [
    "grapheme_right_index",
    "grapheme_left_index",
    "word_right_index",
    "big_word_right_index",
    "word_right_end_index",
    "big_word_right_end_index",
    "word_right_start_index",
    "big_word_right_start_index",
    "word_left_index",
    "big_word_left_index",
    "next_whitespace",
]

_T = TypeVar("_T")


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogatepass")


def _byte_len(text: str) -> int:
    return len(_encode(text))


def _split(text: str, pos: int) -> tuple[str, str]:
    """Split ``text`` at byte offset ``pos``.

    Raises IndexError when ``pos`` lies outside the text and ValueError when it
    does not fall on a character boundary.
    """
    data = _encode(text)
    if not 0 <= pos <= len(data):
        raise IndexError(f"position {pos} out of range for text of {len(data)} bytes")
    return _decode(data[:pos]), _decode(data[pos:])


def _last(items: Iterable[_T]) -> _T | None:
    last = None
    for last in items:
        pass
    return last


def _last_grapheme_start(text: str) -> int:
    last = _last(grapheme_indices(text))
    return last[0] if last is not None else 0


def grapheme_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next grapheme to the right of ``pos``."""
    _, after = _split(text, pos)
    clusters = grapheme_indices(after)
    next(clusters, None)
    second = next(clusters, None)
    return pos + second[0] if second is not None else _byte_len(text)


def grapheme_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next grapheme to the left of ``pos``."""
    before, _ = _split(text, pos)
    return _last_grapheme_start(before)


def word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next word to the right."""
    _, after = _split(text, pos)
    for i, word in word_bound_indices(after):
        if not is_whitespace_str(word):
            return pos + i + _byte_len(word)
    return _byte_len(text)


def big_word_right_index(text: str, pos: int) -> int:
    """Offset *behind* the next WORD to the right."""
    _, after = _split(text, pos)
    found_ws = False
    for i, word in word_bound_indices(after):
        ws = is_whitespace_str(word)
        found_ws = found_ws or ws
        if found_ws and not ws:
            return pos + i + _byte_len(word)
    return _byte_len(text)


def word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the end of* the next word to the right (on its last grapheme)."""
    _, after = _split(text, pos)
    for i, word in word_bound_indices(after):
        last = _last(grapheme_indices(word))
        if last is None:
            continue
        candidate = pos + i + last[0]
        if not is_whitespace_str(word) and candidate != pos:
            return candidate
    return _last_grapheme_start(text)


def big_word_right_end_index(text: str, pos: int) -> int:
    """Offset *at the end of* the next WORD to the right (on its last grapheme)."""
    _, after = _split(text, pos)
    for (prev_i, prev_word), (_, word) in pairwise(word_bound_indices(after)):
        if not is_whitespace_str(word):
            continue
        last = _last(grapheme_indices(prev_word))
        if last is None:
            continue
        candidate = pos + prev_i + last[0]
        if candidate != pos:
            return candidate
    return _last_grapheme_start(text)


def word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the right."""
    _, after = _split(text, pos)
    for i, word in word_bound_indices(after):
        if i != 0 and not is_whitespace_str(word):
            return pos + i
    return _byte_len(text)


def big_word_right_start_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the right."""
    _, after = _split(text, pos)
    found_ws = False
    for i, word in word_bound_indices(after):
        ws = is_whitespace_str(word)
        found_ws = found_ws or (i != 0 and ws)
        if found_ws and i != 0 and not ws:
            return pos + i
    return _byte_len(text)


def word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next word to the left."""
    before, _ = _split(text, pos)
    last = _last(
        (i, word) for i, word in word_bound_indices(before) if not is_whitespace_str(word)
    )
    return last[0] if last is not None else 0


def big_word_left_index(text: str, pos: int) -> int:
    """Offset *in front of* the next WORD to the left."""
    before, _ = _split(text, pos)
    before_bytes = _encode(before)
    start: int | None = None
    for i, word in word_bound_indices(before):
        if is_whitespace_str(word):
            if start is not None and not is_whitespace_str(_decode(before_bytes[i:])):
                start = None
        elif start is None:
            start = i
    return start if start is not None else 0


def next_whitespace(text: str, pos: int) -> int:
    """Offset of the next whitespace run to the right, or the end of the text."""
    _, after = _split(text, pos)
    for i, word in word_bound_indices(after):
        if i != 0 and is_whitespace_str(word):
            return pos + i
    return _byte_len(text)