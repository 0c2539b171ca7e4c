"""Clipboards used by the editor for cut, copy and paste."""

from __future__ import annotations

import enum
from abc import ABC, abstractmethod

__all__ = ["ClipboardMode", "Clipboard", "LocalClipboard", "get_local_clipboard"]


class ClipboardMode(enum.Enum):
    """How clipboard content is inserted back into the buffer."""

    NORMAL = enum.auto()
    """Directly at the cursor position."""
    LINES = enum.auto()
    """As whole lines above or below the current one."""


class Clipboard(ABC):
    """Storage for cut or copied text together with its insertion mode."""

    @abstractmethod
    def set(self, content: str, mode: ClipboardMode) -> None:
        """Store ``content`` with the given insertion ``mode``."""

    @abstractmethod
    def get(self) -> tuple[str, ClipboardMode]:
        """Return the stored content and its insertion mode."""

    def clear(self) -> None:
        """Empty the clipboard."""
        self.set("", ClipboardMode.NORMAL)

    def __len__(self) -> int:
        """Length of the stored content in UTF-8 bytes."""
        return len(self.get()[0].encode("utf-8", "surrogatepass"))


class LocalClipboard(Clipboard):
    """A clipboard that lives only inside this process."""

    def __init__(self) -> None:
        self._content = ""
        self._mode = ClipboardMode.NORMAL

    def set(self, content: str, mode: ClipboardMode) -> None:
        self._content = content
        self._mode = mode

    def get(self) -> tuple[str, ClipboardMode]:
        return self._content, self._mode


def get_local_clipboard() -> Clipboard:
    """Create a fresh in-process clipboard."""
    return LocalClipboard()