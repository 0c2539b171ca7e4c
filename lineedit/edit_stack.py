"""Linear undo/redo history of editor states."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

__all__ = ["EditStack"]

T = TypeVar("T")


class EditStack(Generic[T]):
    """Undo stack holding snapshots, with a pointer to the current one.

    The stack always holds at least one entry, the one made by ``factory``.
    """

    def __init__(self, factory: Callable[[], T]) -> None:
        self._factory = factory
        self._entries: list[T] = [factory()]
        self._index = 0

    def undo(self) -> T:
        """Step back one entry, staying put at the first, and return it."""
        if self._index > 0:
            self._index -= 1
        return self._entries[self._index]

    def redo(self) -> T:
        """Step forward one entry, staying put at the last, and return it."""
        if self._index < len(self._entries) - 1:
            self._index += 1
        return self._entries[self._index]

    def insert(self, value: T) -> None:
        """Push a new entry, discarding anything that had been undone."""
        del self._entries[self._index + 1 :]
        self._entries.append(value)
        self._index += 1

    def reset(self) -> None:
        """Return to the initial state with a single fresh entry."""
        self._entries = [self._factory()]
        self._index = 0

    def current(self) -> T:
        """Return the entry currently pointed to."""
        return self._entries[self._index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EditStack):
            return NotImplemented
        return self._entries == other._entries and self._index == other._index

    def __repr__(self) -> str:
        return f"EditStack(entries={self._entries!r}, index={self._index})"