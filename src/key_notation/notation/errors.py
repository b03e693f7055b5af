from __future__ import annotations

from typing import Optional


class NotationError(ValueError):
    """Base class for every key notation parse failure.

    ``text`` is the offending substring where one exists; ``position`` is its
    index in the notation string being tokenized, when known.
    """

    message = "invalid key notation"

    def __init__(self, text: Optional[str] = None, *, position: Optional[int] = None) -> None:
        self.text = text
        self.position = position
        super().__init__(self._render())

    def _render(self) -> str:
        detail = self.message
        if self.text is not None:
            detail = f"{detail}: {self.text!r}"
        if self.position is not None:
            detail = f"{detail} (at index {self.position})"
        return detail


class NoKeyName(NotationError):
    message = "missing key name"


class InvalidKeyName(NotationError):
    message = "invalid key name"


class InvalidKeyModifier(NotationError):
    message = "invalid key modifier"


class UnexpectedGroupOpen(NotationError):
    message = "unexpected open of modifier group (`<`)"


class UnexpectedGroupClose(NotationError):
    message = "unexpected close of modifier group (`>`)"


class UnexpectedEnd(NotationError):
    message = "unclosed modifier group (missing `>` at end)"


class IncompleteGroup(NotationError):
    message = "modifier group must include a modifier and a key name"
