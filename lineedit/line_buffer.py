"""In-memory text of the line(s) being edited, together with a cursor.

The cursor (``insertion_point``) is a UTF-8 byte offset into the text, which
is how every position handed in or out of a :class:`LineBuffer` is measured.
"""

from __future__ import annotations

import os

from lineedit import words
from lineedit.segmentation import grapheme_indices, is_whitespace_str

__all__ = ["LineBuffer"]


def _encode(text: str) -> bytes:
    return text.encode("utf-8", "surrogatepass")


def _decode(data: bytes) -> str:
    return data.decode("utf-8", "surrogatepass")


def _swap_ascii_case(c: str) -> str:
    if "A" <= c <= "Z":
        return c.lower()
    if c.isascii():
        return c.upper()
    return c


class LineBuffer:
    """Editable text with a cursor, supporting grapheme- and word-wise motion."""

    def __init__(self, text: str = "") -> None:
        self._text = ""
        self.insertion_point = 0
        self.insert_str(text)

    # -- basic access -------------------------------------------------------

    @property
    def text(self) -> str:
        """The whole content of the buffer."""
        return self._text

    def __len__(self) -> int:
        """Length of the buffer in UTF-8 bytes."""
        return len(self._bytes())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineBuffer):
            return NotImplemented
        return self._text == other._text and self.insertion_point == other.insertion_point

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"LineBuffer(text={self._text!r}, insertion_point={self.insertion_point})"

    def _bytes(self) -> bytes:
        return _encode(self._text)

    def _slice(self, start: int, end: int | None = None) -> str:
        return _decode(self._bytes()[start:end])

    def is_valid(self) -> bool:
        """True if the text is valid UTF-8 and the cursor sits on a grapheme boundary."""
        try:
            data = self._text.encode("utf-8")
        except UnicodeEncodeError:
            return False
        ip = self.insertion_point
        if not 0 <= ip <= len(data):
            return False
        if ip == len(data):
            return True
        if data[ip] & 0xC0 == 0x80:
            return False
        return any(i == ip for i, _ in grapheme_indices(self._text))

    def set_buffer(self, buffer: str) -> None:
        """Replace the content and put the cursor at its end."""
        self._text = buffer
        self.insertion_point = len(self)

    def line(self) -> int:
        """Zero-based number of the line the cursor is on."""
        return self._bytes()[: self.insertion_point].count(b"\n")

    def num_lines(self) -> int:
        """Number of lines in the buffer."""
        return self._text.count("\n") + 1

    def ends_with(self, c: str) -> bool:
        """True if the buffer ends with ``c``."""
        return self._text.endswith(c)

    # -- whole-line motion --------------------------------------------------

    def move_to_start(self) -> None:
        """Put the cursor at the start of the buffer."""
        self.insertion_point = 0

    def move_to_line_start(self) -> None:
        """Put the cursor before the first character of the current line."""
        self.insertion_point = self._bytes().rfind(b"\n", 0, self.insertion_point) + 1

    def move_to_line_end(self) -> None:
        """Put the cursor on the end of the current line (before ``\\n`` or ``\\r\\n``)."""
        self.insertion_point = self.find_current_line_end()

    def move_to_end(self) -> None:
        """Put the cursor behind the last character."""
        self.insertion_point = len(self)

    def find_current_line_end(self) -> int:
        """Offset where the current line ends: the buffer end or its ``\\n``/``\\r\\n``."""
        data = self._bytes()
        index = data.find(b"\n", self.insertion_point)
        if index < 0:
            return len(data)
        if index > 0 and data[index - 1] == ord("\r"):
            return index - 1
        return index

    # -- motion targets -----------------------------------------------------

    def grapheme_right_index(self) -> int:
        """Offset behind the next grapheme to the right."""
        return words.grapheme_right_index(self._text, self.insertion_point)

    def grapheme_left_index(self) -> int:
        """Offset in front of the next grapheme to the left."""
        return words.grapheme_left_index(self._text, self.insertion_point)

    def word_right_index(self) -> int:
        """Offset behind the next word to the right."""
        return words.word_right_index(self._text, self.insertion_point)

    def big_word_right_index(self) -> int:
        """Offset behind the next WORD to the right."""
        return words.big_word_right_index(self._text, self.insertion_point)

    def word_right_end_index(self) -> int:
        """Offset at the end of the next word to the right."""
        return words.word_right_end_index(self._text, self.insertion_point)

    def big_word_right_end_index(self) -> int:
        """Offset at the end of the next WORD to the right."""
        return words.big_word_right_end_index(self._text, self.insertion_point)

    def word_right_start_index(self) -> int:
        """Offset in front of the next word to the right."""
        return words.word_right_start_index(self._text, self.insertion_point)

    def big_word_right_start_index(self) -> int:
        """Offset in front of the next WORD to the right."""
        return words.big_word_right_start_index(self._text, self.insertion_point)

    def word_left_index(self) -> int:
        """Offset in front of the next word to the left."""
        return words.word_left_index(self._text, self.insertion_point)

    def big_word_left_index(self) -> int:
        """Offset in front of the next WORD to the left."""
        return words.big_word_left_index(self._text, self.insertion_point)

    def next_whitespace(self) -> int:
        """Offset of the next whitespace to the right, or the buffer end."""
        return words.next_whitespace(self._text, self.insertion_point)

    # -- motion -------------------------------------------------------------

    def move_right(self) -> None:
        """Move behind the next grapheme to the right."""
        self.insertion_point = self.grapheme_right_index()

    def move_left(self) -> None:
        """Move in front of the next grapheme to the left."""
        self.insertion_point = self.grapheme_left_index()

    def move_word_left(self) -> None:
        """Move in front of the next word to the left."""
        self.insertion_point = self.word_left_index()

    def move_big_word_left(self) -> None:
        """Move in front of the next WORD to the left."""
        self.insertion_point = self.big_word_left_index()

    def move_word_right(self) -> None:
        """Move behind the next word to the right."""
        self.insertion_point = self.word_right_index()

    def move_word_right_start(self) -> None:
        """Move to the start of the next word."""
        self.insertion_point = self.word_right_start_index()

    def move_big_word_right_start(self) -> None:
        """Move to the start of the next WORD."""
        self.insertion_point = self.big_word_right_start_index()

    def move_word_right_end(self) -> None:
        """Move to the end of the next word."""
        self.insertion_point = self.word_right_end_index()

    def move_big_word_right_end(self) -> None:
        """Move to the end of the next WORD."""
        self.insertion_point = self.big_word_right_end_index()

    # -- insertion and removal ----------------------------------------------

    def insert_char(self, c: str) -> None:
        """Insert ``c`` at the cursor and move right one grapheme."""
        self.replace_range(self.insertion_point, self.insertion_point, c)
        self.move_right()

    def insert_str(self, string: str) -> None:
        """Insert ``string`` at the cursor and put the cursor behind it."""
        self.replace_range(self.insertion_point, self.insertion_point, string)
        self.insertion_point += len(_encode(string))

    def insert_newline(self) -> None:
        """Insert the platform's line terminator."""
        if os.name == "nt":
            self.insert_str("\r\n")
        else:
            self.insert_char("\n")

    def clear(self) -> None:
        """Empty the buffer and reset the cursor."""
        self._text = ""
        self.insertion_point = 0

    def clear_to_end(self) -> None:
        """Remove everything from the cursor to the end of the buffer."""
        if self.insertion_point < len(self):
            self.clear_range(self.insertion_point, len(self))

    def clear_to_line_end(self) -> None:
        """Remove from the cursor to the end of the line, keeping the newline."""
        self.clear_range(self.insertion_point, self.find_current_line_end())

    def clear_to_insertion_point(self) -> None:
        """Remove from the start of the buffer to the cursor."""
        self.clear_range(0, self.insertion_point)
        self.insertion_point = 0

    def clear_range_safe(self, start: int, end: int) -> None:
        """Remove ``start..end`` and keep the cursor on the same text."""
        start, end = min(start, end), max(start, end)
        if self.insertion_point <= start:
            pass
        elif self.insertion_point < end:
            self.insertion_point = start
        else:
            self.insertion_point -= end - start
        self.clear_range(start, end)

    def clear_range(self, start: int, end: int) -> None:
        """Remove ``start..end`` without touching the cursor."""
        self.replace_range(start, end, "")

    def replace_range(self, start: int, end: int, replace_with: str) -> None:
        """Substitute ``start..end`` with ``replace_with`` without touching the cursor.

        Raises IndexError for a range outside the buffer and ValueError when an
        end does not fall on a character boundary.
        """
        data = self._bytes()
        if not 0 <= start <= end <= len(data):
            raise IndexError(f"range {start}..{end} out of bounds for {len(data)} bytes")
        self._text = _decode(data[:start]) + replace_with + _decode(data[end:])
        # Reject a split inside a character in the middle too.
        _decode(data[start:end])

    # -- inspection ---------------------------------------------------------

    def on_whitespace(self) -> bool:
        """True if the character at the cursor is whitespace."""
        after = self._slice(self.insertion_point)
        return bool(after) and is_whitespace_str(after[0])

    def grapheme_right(self) -> str:
        """The grapheme right of the cursor, or an empty string."""
        return self._slice(self.insertion_point, self.grapheme_right_index())

    def grapheme_left(self) -> str:
        """The grapheme left of the cursor, or an empty string."""
        return self._slice(self.grapheme_left_index(), self.insertion_point)

    def current_word_range(self) -> tuple[int, int]:
        """``(start, end)`` of the word under the cursor."""
        right = self.word_right_index()
        left = words.word_left_index(self._text, right)
        return left, right

    def current_line_range(self) -> tuple[int, int]:
        """``(start, end)`` of the current line, the end including its terminator."""
        data = self._bytes()
        left = data.rfind(b"\n", 0, self.insertion_point) + 1
        index = data.find(b"\n", self.insertion_point)
        right = len(data) if index < 0 else index + 1
        return left, right

    # -- case changes and swaps ---------------------------------------------

    def _change_word(self, convert) -> None:
        start, end = self.current_word_range()
        self.replace_range(start, end, convert(self._slice(start, end)))
        self.move_word_right()

    def uppercase_word(self) -> None:
        """Uppercase the current word and move behind it."""
        self._change_word(str.upper)

    def lowercase_word(self) -> None:
        """Lowercase the current word and move behind it."""
        self._change_word(str.lower)

    def switchcase_char(self) -> None:
        """Switch the ASCII case of the grapheme at the cursor and move right."""
        start, end = self.insertion_point, self.grapheme_right_index()
        if end > start:
            swapped = "".join(_swap_ascii_case(c) for c in self._slice(start, end))
            self.replace_range(start, end, swapped)
            self.move_right()

    def capitalize_char(self) -> None:
        """Uppercase the grapheme at the cursor (skipping whitespace) and move right."""
        if self.on_whitespace():
            self.move_word_right()
            self.move_word_left()
        start, end = self.insertion_point, self.grapheme_right_index()
        if end > start:
            self.replace_range(start, end, self._slice(start, end).upper())
            self.move_right()

    def delete_left_grapheme(self) -> None:
        """Delete one grapheme left of the cursor."""
        left, ip = self.grapheme_left_index(), self.insertion_point
        if left < ip:
            self.clear_range(left, ip)
            self.insertion_point = left

    def delete_right_grapheme(self) -> None:
        """Delete one grapheme right of the cursor."""
        right, ip = self.grapheme_right_index(), self.insertion_point
        if right > ip:
            self.clear_range(ip, right)

    def delete_word_left(self) -> None:
        """Delete to the start of the word on the left."""
        left = self.word_left_index()
        self.clear_range(left, self.insertion_point)
        self.insertion_point = left

    def delete_word_right(self) -> None:
        """Delete to the end of the word on the right."""
        self.clear_range(self.insertion_point, self.word_right_index())

    def swap_words(self) -> None:
        """Swap the current word with the word to its right."""
        first = self.current_word_range()
        self.move_word_right()
        second = self.current_word_range()
        if first != second:
            self.move_word_left()
            word_1 = self._slice(*first)
            word_2 = self._slice(*second)
            self.replace_range(*second, word_1)
            self.replace_range(*first, word_2)

    def swap_graphemes(self) -> None:
        """Swap the graphemes on either side of the cursor."""
        initial = self.insertion_point
        if initial == 0:
            self.move_right()
        elif initial == len(self):
            self.move_left()

        updated = self.insertion_point
        first_start = self.grapheme_left_index()
        second_end = self.grapheme_right_index()

        if first_start < updated < second_end:
            first = self._slice(first_start, updated)
            second = self._slice(updated, second_end)
            self.replace_range(updated, second_end, first)
            self.replace_range(first_start, updated, second)
            self.insertion_point = second_end
        else:
            self.insertion_point = updated

    # -- vertical motion ----------------------------------------------------

    def _grapheme_column(self, line_start: int) -> int:
        return sum(1 for _ in grapheme_indices(self._slice(line_start, self.insertion_point)))

    def move_line_up(self) -> None:
        """Move to the same grapheme column on the previous line."""
        if self.is_cursor_at_first_line():
            return
        old_start, _ = self.current_line_range()
        column = self._grapheme_column(old_start)
        self.insertion_point = old_start
        self.move_left()

        new_start, new_end = self.current_line_range()
        clusters = list(grapheme_indices(self._slice(new_start, new_end)))[: column + 1]
        self.insertion_point = new_start + clusters[-1][0] if clusters else new_start

    def move_line_down(self) -> None:
        """Move to the same grapheme column on the next line."""
        if self.is_cursor_at_last_line():
            return
        old_start, old_end = self.current_line_range()
        column = self._grapheme_column(old_start)
        self.insertion_point = old_end

        new_start, new_end = self.current_line_range()
        clusters = list(grapheme_indices(self._slice(new_start, new_end)))
        if column < len(clusters):
            self.insertion_point = new_start + clusters[column][0]
        else:
            self.insertion_point = self.find_current_line_end()

    def is_cursor_at_first_line(self) -> bool:
        """True if no newline precedes the cursor."""
        return b"\n" not in self._bytes()[: self.insertion_point]

    def is_cursor_at_last_line(self) -> bool:
        """True if no newline follows the cursor."""
        return b"\n" not in self._bytes()[self.insertion_point :]

    # -- character search ---------------------------------------------------

    def find_char_right(self, c: str, current_line: bool) -> int | None:
        """Offset of the first ``c`` right of the grapheme at the cursor, if any."""
        start = self.grapheme_right_index()
        end = self.current_line_range()[1] if current_line else len(self)
        index = self._bytes().find(_encode(c), start, end)
        return None if index < 0 else index

    def find_char_left(self, c: str, current_line: bool) -> int | None:
        """Offset of the last ``c`` left of the cursor, if any."""
        start = self.current_line_range()[0] if current_line else 0
        index = self._bytes().rfind(_encode(c), start, self.insertion_point)
        return None if index < 0 else index

    def move_right_until(self, c: str, current_line: bool) -> int:
        """Move onto the next ``c`` to the right; return the cursor."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_right_before(self, c: str, current_line: bool) -> int:
        """Move just before the next ``c`` to the right; return the cursor."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.insertion_point = index
            self.insertion_point = self.grapheme_left_index()
        return self.insertion_point

    def move_left_until(self, c: str, current_line: bool) -> int:
        """Move onto the previous ``c`` to the left; return the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index
        return self.insertion_point

    def move_left_before(self, c: str, current_line: bool) -> int:
        """Move just after the previous ``c`` to the left; return the cursor."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.insertion_point = index + len(_encode(c))
        return self.insertion_point

    def delete_right_until_char(self, c: str, current_line: bool) -> None:
        """Delete from the cursor up to and including the next ``c``."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index + len(_encode(c)))

    def delete_right_before_char(self, c: str, current_line: bool) -> None:
        """Delete from the cursor up to the next ``c``."""
        index = self.find_char_right(c, current_line)
        if index is not None:
            self.clear_range(self.insertion_point, index)

    def delete_left_until_char(self, c: str, current_line: bool) -> None:
        """Delete back to and including the previous ``c``."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            self.clear_range(index, self.insertion_point)
            self.insertion_point = index

    def delete_left_before_char(self, c: str, current_line: bool) -> None:
        """Delete back to just after the previous ``c``."""
        index = self.find_char_left(c, current_line)
        if index is not None:
            after = index + len(_encode(c))
            self.clear_range(after, self.insertion_point)
            self.insertion_point = after