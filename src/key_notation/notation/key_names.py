from __future__ import annotations

from enum import Enum
from string import ascii_lowercase, digits
from typing import Dict, Optional, Tuple


class KeyName(str, Enum):
    """Symbolic key identifier; closed set."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"

    NUMBER_0 = "number_0"
    NUMBER_1 = "number_1"
    NUMBER_2 = "number_2"
    NUMBER_3 = "number_3"
    NUMBER_4 = "number_4"
    NUMBER_5 = "number_5"
    NUMBER_6 = "number_6"
    NUMBER_7 = "number_7"
    NUMBER_8 = "number_8"
    NUMBER_9 = "number_9"

    BANG = "bang"
    AT = "at"
    POUND = "pound"
    DOLLAR = "dollar"
    PERCENT = "percent"
    CARET = "caret"
    AMPERSAND = "ampersand"
    STAR = "star"
    PAREN_LEFT = "paren_left"
    PAREN_RIGHT = "paren_right"
    BRACKET_LEFT = "bracket_left"
    BRACKET_RIGHT = "bracket_right"
    BRACE_LEFT = "brace_left"
    BRACE_RIGHT = "brace_right"
    BACKTICK = "backtick"
    TILDE = "tilde"
    EQUALS = "equals"
    UNDERSCORE = "underscore"
    PLUS = "plus"
    FORWARD_SLASH = "forward_slash"
    BACKSLASH = "backslash"
    QUESTION = "question"
    PIPE = "pipe"
    SINGLE_QUOTE = "single_quote"
    DOUBLE_QUOTE = "double_quote"
    COMMA = "comma"
    PERIOD = "period"
    COLON = "colon"
    SEMICOLON = "semicolon"

    # Notation metacharacters; spelled with a leading escape.
    DASH = "dash"
    LESS_THAN = "less_than"
    GREATER_THAN = "greater_than"

    # No literal spelling, only reachable from host key events.
    SPACE = "space"

    @classmethod
    def from_literal(cls, literal: str) -> Optional[Tuple[KeyName, bool]]:
        """Look up a literal spelling.

        Returns ``(name, implicit_shift)``, or None when the literal is not in
        the table. Uppercase letters resolve with ``implicit_shift=True``.
        """

        return _BY_LITERAL.get(literal)

    @property
    def literal(self) -> Optional[str]:
        """Unshifted spelling, if the key has one."""

        return _LITERAL_BY_NAME.get(self)


# (name, unshifted spelling, shifted spelling)
_TABLE: Tuple[Tuple[KeyName, Optional[str], Optional[str]], ...] = (
    *((KeyName(ch), ch, ch.upper()) for ch in ascii_lowercase),
    *((KeyName(f"number_{d}"), d, None) for d in digits),
    (KeyName.BANG, "!", None),
    (KeyName.AT, "@", None),
    (KeyName.POUND, "#", None),
    (KeyName.DOLLAR, "$", None),
    (KeyName.PERCENT, "%", None),
    (KeyName.CARET, "^", None),
    (KeyName.AMPERSAND, "&", None),
    (KeyName.STAR, "*", None),
    (KeyName.PAREN_LEFT, "(", None),
    (KeyName.PAREN_RIGHT, ")", None),
    (KeyName.BRACKET_LEFT, "[", None),
    (KeyName.BRACKET_RIGHT, "]", None),
    (KeyName.BRACE_LEFT, "{", None),
    (KeyName.BRACE_RIGHT, "}", None),
    (KeyName.BACKTICK, "`", None),
    (KeyName.TILDE, "~", None),
    (KeyName.EQUALS, "=", None),
    (KeyName.UNDERSCORE, "_", None),
    (KeyName.PLUS, "+", None),
    (KeyName.FORWARD_SLASH, "/", None),
    (KeyName.BACKSLASH, "\\", None),
    (KeyName.QUESTION, "?", None),
    (KeyName.PIPE, "|", None),
    (KeyName.SINGLE_QUOTE, "'", None),
    (KeyName.DOUBLE_QUOTE, '"', None),
    (KeyName.COMMA, ",", None),
    (KeyName.PERIOD, ".", None),
    (KeyName.COLON, ":", None),
    (KeyName.SEMICOLON, ";", None),
    (KeyName.DASH, "\\-", None),
    (KeyName.LESS_THAN, "\\<", None),
    (KeyName.GREATER_THAN, "\\>", None),
    (KeyName.SPACE, None, None),
)


def _build_index() -> Dict[str, Tuple[KeyName, bool]]:
    index: Dict[str, Tuple[KeyName, bool]] = {}
    for name, lower, upper in _TABLE:
        for literal, shift in ((lower, False), (upper, True)):
            if literal is None:
                continue
            if literal in index:
                raise RuntimeError(f"duplicate key literal: {literal!r}")
            index[literal] = (name, shift)
    return index


_BY_LITERAL = _build_index()
_LITERAL_BY_NAME: Dict[KeyName, str] = {
    name: lower for name, lower, _ in _TABLE if lower is not None
}
