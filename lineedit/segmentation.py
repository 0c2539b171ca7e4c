"""Unicode text segmentation: extended grapheme clusters and word boundaries.

All offsets produced here are UTF-8 byte offsets into the text, so that
cursor positions can be stored the same way throughout the editor.
"""

from __future__ import annotations

import enum
import unicodedata
from functools import lru_cache
from typing import Iterable, Iterator

import regex

__all__ = ["grapheme_indices", "word_bound_indices", "is_whitespace_str"]

_GRAPHEME = regex.compile(r"\X", regex.DOTALL)

# Characters that Python's str.isspace() accepts but that are not White_Space.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")


def _byte_len(segment: str) -> int:
    return len(segment.encode("utf-8", "surrogatepass"))


def _with_byte_offsets(segments: Iterable[str]) -> Iterator[tuple[int, str]]:
    offset = 0
    for segment in segments:
        yield offset, segment
        offset += _byte_len(segment)


def grapheme_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, cluster)`` for each extended grapheme cluster."""
    return _with_byte_offsets(match.group() for match in _GRAPHEME.finditer(text))


def word_bound_indices(text: str) -> Iterator[tuple[int, str]]:
    """Yield ``(byte_offset, segment)`` for each segment between word boundaries.

    Whitespace runs and punctuation are segments of their own, just like words.
    """
    return _with_byte_offsets(_word_segments(text))


def is_whitespace_str(s: str) -> bool:
    """Return True if every character of ``s`` is whitespace (True for "")."""
    return all(c.isspace() and c not in _NOT_WHITESPACE for c in s)


class _WordProp(enum.Enum):
    CR = enum.auto()
    LF = enum.auto()
    NEWLINE = enum.auto()
    EXTEND = enum.auto()
    ZWJ = enum.auto()
    REGIONAL_INDICATOR = enum.auto()
    FORMAT = enum.auto()
    KATAKANA = enum.auto()
    HEBREW_LETTER = enum.auto()
    ALETTER = enum.auto()
    SINGLE_QUOTE = enum.auto()
    DOUBLE_QUOTE = enum.auto()
    MIDNUMLET = enum.auto()
    MIDLETTER = enum.auto()
    MIDNUM = enum.auto()
    NUMERIC = enum.auto()
    EXTENDNUMLET = enum.auto()
    WSEGSPACE = enum.auto()
    OTHER = enum.auto()


_P = _WordProp

_NEWLINES = frozenset({_P.CR, _P.LF, _P.NEWLINE})
_IGNORABLE = frozenset({_P.EXTEND, _P.FORMAT, _P.ZWJ})
_AHLETTER = frozenset({_P.ALETTER, _P.HEBREW_LETTER})
_MIDLETTER_Q = frozenset({_P.MIDLETTER, _P.MIDNUMLET, _P.SINGLE_QUOTE})
_MIDNUM_Q = frozenset({_P.MIDNUM, _P.MIDNUMLET, _P.SINGLE_QUOTE})
_BEFORE_EXTENDNUMLET = frozenset(
    {_P.ALETTER, _P.HEBREW_LETTER, _P.NUMERIC, _P.KATAKANA, _P.EXTENDNUMLET}
)
_AFTER_EXTENDNUMLET = frozenset({_P.ALETTER, _P.HEBREW_LETTER, _P.NUMERIC, _P.KATAKANA})

_WSEG_CHARS = frozenset(
    " \u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a\u205f\u3000"
)
_MIDNUMLET_CHARS = frozenset(".\u2018\u2019\u2024\ufe52\uff07\uff0e")
_MIDLETTER_CHARS = frozenset(":\u00b7\u0387\u055f\u05f4\u2027\ufe13\ufe55\uff1a")
_MIDNUM_CHARS = frozenset(
    ",;\u037e\u0589\u060c\u060d\u066c\u07f8\u2044\ufe10\ufe14\ufe50\ufe54\uff0c\uff1b"
)

_KATAKANA_RANGES = (
    (0x3031, 0x3035),
    (0x309B, 0x309C),
    (0x30A0, 0x30FF),
    (0x31F0, 0x31FF),
    (0x32D0, 0x32FE),
    (0x3300, 0x3357),
    (0xFF66, 0xFF9D),
    (0x1B000, 0x1B000),
)
_HEBREW_RANGES = ((0x05D0, 0x05F2), (0xFB1D, 0xFB4F))
# Letters that never join into words: ideographs, kana and complex-context scripts.
_NON_WORD_LETTER_RANGES = (
    (0x0E00, 0x0EFF),
    (0x1000, 0x109F),
    (0x1780, 0x17FF),
    (0x1950, 0x19DF),
    (0x1A20, 0x1AAF),
    (0x3005, 0x3007),
    (0x3021, 0x3029),
    (0x3038, 0x303B),
    (0x3040, 0x309F),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xA9E0, 0xA9FF),
    (0xAA60, 0xAADF),
    (0xF900, 0xFAFF),
    (0x20000, 0x3FFFF),
)
_EXTENDED_PICTOGRAPHIC_RANGES = (
    (0x00A9, 0x00A9),
    (0x00AE, 0x00AE),
    (0x203C, 0x203C),
    (0x2049, 0x2049),
    (0x2122, 0x2122),
    (0x2139, 0x2139),
    (0x2194, 0x2199),
    (0x21A9, 0x21AA),
    (0x231A, 0x231B),
    (0x2328, 0x2328),
    (0x23CF, 0x23CF),
    (0x23E9, 0x23F3),
    (0x23F8, 0x23FA),
    (0x24C2, 0x24C2),
    (0x25AA, 0x25AB),
    (0x25B6, 0x25B6),
    (0x25C0, 0x25C0),
    (0x25FB, 0x25FE),
    (0x2600, 0x27BF),
    (0x2934, 0x2935),
    (0x2B05, 0x2B07),
    (0x2B1B, 0x2B1C),
    (0x2B50, 0x2B50),
    (0x2B55, 0x2B55),
    (0x3030, 0x3030),
    (0x303D, 0x303D),
    (0x3297, 0x3297),
    (0x3299, 0x3299),
    (0x1F000, 0x1F0FF),
    (0x1F10D, 0x1F10F),
    (0x1F12F, 0x1F12F),
    (0x1F16C, 0x1F171),
    (0x1F17E, 0x1F17F),
    (0x1F18E, 0x1F18E),
    (0x1F191, 0x1F19A),
    (0x1F1AD, 0x1F1E5),
    (0x1F201, 0x1F20F),
    (0x1F21A, 0x1F21A),
    (0x1F22F, 0x1F22F),
    (0x1F232, 0x1F23A),
    (0x1F23C, 0x1F23F),
    (0x1F249, 0x1F3FA),
    (0x1F400, 0x1F53D),
    (0x1F546, 0x1F64F),
    (0x1F680, 0x1F6FF),
    (0x1F774, 0x1F77F),
    (0x1F7D5, 0x1F7FF),
    (0x1F80C, 0x1F80F),
    (0x1F848, 0x1F84F),
    (0x1F85A, 0x1F85F),
    (0x1F888, 0x1F88F),
    (0x1F8AE, 0x1F8FF),
    (0x1F90C, 0x1F93A),
    (0x1F93C, 0x1F945),
    (0x1F947, 0x1FAFF),
    (0x1FC00, 0x1FFFD),
)


def _in_ranges(cp: int, ranges: tuple[tuple[int, int], ...]) -> bool:
    return any(low <= cp <= high for low, high in ranges)


@lru_cache(maxsize=4096)
def _is_extended_pictographic(c: str) -> bool:
    return _in_ranges(ord(c), _EXTENDED_PICTOGRAPHIC_RANGES)


@lru_cache(maxsize=4096)
def _word_prop(c: str) -> _WordProp:
    cp = ord(c)
    if c == "\r":
        return _P.CR
    if c == "\n":
        return _P.LF
    if c in "\x0b\x0c\x85\u2028\u2029":
        return _P.NEWLINE
    if c == "\u200d":
        return _P.ZWJ
    if 0x1F1E6 <= cp <= 0x1F1FF:
        return _P.REGIONAL_INDICATOR
    category = unicodedata.category(c)
    if (
        c == "\u200c"
        or category in ("Mn", "Me", "Mc")
        or 0x1F3FB <= cp <= 0x1F3FF
        or 0xFF9E <= cp <= 0xFF9F
    ):
        return _P.EXTEND
    if category == "Cf" and c != "\u200b":
        return _P.FORMAT
    if c in _WSEG_CHARS:
        return _P.WSEGSPACE
    if c == "'":
        return _P.SINGLE_QUOTE
    if c == '"':
        return _P.DOUBLE_QUOTE
    if c in _MIDNUMLET_CHARS:
        return _P.MIDNUMLET
    if c in _MIDLETTER_CHARS:
        return _P.MIDLETTER
    if c in _MIDNUM_CHARS:
        return _P.MIDNUM
    if _in_ranges(cp, _KATAKANA_RANGES):
        return _P.KATAKANA
    if category == "Lo" and _in_ranges(cp, _HEBREW_RANGES):
        return _P.HEBREW_LETTER
    if category == "Nd":
        return _P.NUMERIC
    if category == "Pc" or c == "\u202f":
        return _P.EXTENDNUMLET
    if (category.startswith("L") or category == "Nl") and not _in_ranges(
        cp, _NON_WORD_LETTER_RANGES
    ):
        return _P.ALETTER
    return _P.OTHER


def _skip_back(props: list[_WordProp], idx: int) -> int:
    while idx >= 0 and props[idx] in _IGNORABLE:
        idx -= 1
    return idx


def _skip_forward(props: list[_WordProp], idx: int) -> int:
    while idx < len(props) and props[idx] in _IGNORABLE:
        idx += 1
    return idx


def _is_break(props: list[_WordProp], pict: list[bool], i: int) -> bool:
    """Decide whether there is a word boundary between characters i-1 and i."""
    prev, cur = props[i - 1], props[i]
    if prev is _P.CR and cur is _P.LF:
        return False
    if prev in _NEWLINES or cur in _NEWLINES:
        return True
    if prev is _P.ZWJ and pict[i]:
        return False
    if prev is _P.WSEGSPACE and cur is _P.WSEGSPACE:
        return False
    if cur in _IGNORABLE:
        return False

    j = _skip_back(props, i - 1)
    if j < 0:
        return True
    left = props[j]
    j2 = _skip_back(props, j - 1)
    left2 = props[j2] if j2 >= 0 else None
    k = _skip_forward(props, i + 1)
    right2 = props[k] if k < len(props) else None

    if left in _AHLETTER and cur in _AHLETTER:
        return False
    if left in _AHLETTER and cur in _MIDLETTER_Q and right2 in _AHLETTER:
        return False
    if left2 in _AHLETTER and left in _MIDLETTER_Q and cur in _AHLETTER:
        return False
    if left is _P.HEBREW_LETTER and cur is _P.SINGLE_QUOTE:
        return False
    if left is _P.HEBREW_LETTER and cur is _P.DOUBLE_QUOTE and right2 is _P.HEBREW_LETTER:
        return False
    if left2 is _P.HEBREW_LETTER and left is _P.DOUBLE_QUOTE and cur is _P.HEBREW_LETTER:
        return False
    if left is _P.NUMERIC and cur is _P.NUMERIC:
        return False
    if left in _AHLETTER and cur is _P.NUMERIC:
        return False
    if left is _P.NUMERIC and cur in _AHLETTER:
        return False
    if left2 is _P.NUMERIC and left in _MIDNUM_Q and cur is _P.NUMERIC:
        return False
    if left is _P.NUMERIC and cur in _MIDNUM_Q and right2 is _P.NUMERIC:
        return False
    if left is _P.KATAKANA and cur is _P.KATAKANA:
        return False
    if left in _BEFORE_EXTENDNUMLET and cur is _P.EXTENDNUMLET:
        return False
    if left is _P.EXTENDNUMLET and cur in _AFTER_EXTENDNUMLET:
        return False
    if left is _P.REGIONAL_INDICATOR and cur is _P.REGIONAL_INDICATOR:
        count = 0
        idx = j
        while idx >= 0 and props[idx] is _P.REGIONAL_INDICATOR:
            count += 1
            idx = _skip_back(props, idx - 1)
        if count % 2 == 1:
            return False
    return True


def _word_segments(text: str) -> Iterator[str]:
    if not text:
        return
    props = [_word_prop(c) for c in text]
    pict = [_is_extended_pictographic(c) for c in text]
    start = 0
    for i in range(1, len(text)):
        if _is_break(props, pict, i):
            yield text[start:i]
            start = i
    yield text[start:]