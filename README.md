# lineedit

The text-handling building blocks of an interactive line editor, in pure Python:

- `lineedit.line_buffer.LineBuffer` holds text and a cursor. It moves and edits
  by Unicode grapheme and by word boundary, and it handles multi-line buffers.
- `lineedit.words` computes cursor targets (next grapheme, word, WORD, whitespace)
  on plain strings.
- `lineedit.segmentation` splits text into extended grapheme clusters and
  word-boundary segments.
- `lineedit.edit_stack.EditStack` is a linear undo/redo history of snapshots.
- `lineedit.clipboard` provides `Clipboard`, `LocalClipboard` and `ClipboardMode`
  for cut and paste.

All cursor positions and ranges are byte offsets into the UTF-8 encoding of
the text.

## Installation

```
pip install lineedit
```

To run the test suite from a checkout:

```
pip install -e ".[test]"
pytest
```

## Line buffer

```python
from lineedit.line_buffer import LineBuffer

buf = LineBuffer("This is a test")   # cursor at the end
buf.move_word_left()                 # cursor before "test"
buf.uppercase_word()
print(buf.text)                      # "This is a TEST"

buf.move_to_start()
buf.swap_words()
print(buf.text)                      # "is This a TEST"
```

`insertion_point` is a plain attribute. `len(buf)` gives the length in bytes.
`current_line_range()` and `current_word_range()` return `(start, end)` tuples.
`replace_range` raises `IndexError` for a range outside the buffer, and
`ValueError` when an end splits a character.

## Word motion on strings

```python
from lineedit.words import word_left_index, big_word_left_index

word_left_index("abc def-ghi", 10)      # 8
big_word_left_index("abc def-ghi", 10)  # 4
```

A *word* follows the Unicode word-boundary rules. A *WORD* is any run of
non-whitespace.

## Segmentation

```python
from lineedit.segmentation import grapheme_indices, word_bound_indices

list(grapheme_indices("a😇c"))        # [(0, 'a'), (1, '😇'), (5, 'c')]
list(word_bound_indices("abc def"))  # [(0, 'abc'), (3, ' '), (4, 'def')]
```

## Undo stack and clipboard

```python
from lineedit.edit_stack import EditStack
from lineedit.clipboard import ClipboardMode, LocalClipboard

stack = EditStack(str)     # starts with one entry: ""
stack.insert("a")
stack.insert("ab")
stack.undo()               # "a"
stack.redo()               # "ab"

clip = LocalClipboard()
clip.set("line\n", ClipboardMode.LINES)
clip.get()                 # ("line\n", ClipboardMode.LINES)
len(clip)                  # 5
clip.clear()
```

## What this package does not do

The package does not read keys from a terminal or draw a prompt. It has no
editor object that ties the line buffer, undo stack and clipboard together,
and it has no keyword completion. Those parts are left to the application
that uses these building blocks.