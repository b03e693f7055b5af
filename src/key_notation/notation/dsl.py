from __future__ import annotations

import logging
from typing import List

from .errors import (
    IncompleteGroup,
    InvalidKeyModifier,
    InvalidKeyName,
    UnexpectedEnd,
    UnexpectedGroupClose,
    UnexpectedGroupOpen,
)
from .ir import Key, Keys, Modifiers
from .key_names import KeyName


logger = logging.getLogger(__name__)

ESCAPE = "\\"
GROUP_OPEN = "<"
GROUP_CLOSE = ">"
MODIFIER_SEP = "-"

_CONTROL = "C"
_ALT = "M"


def split_keys(notation: str) -> List[str]:
    """Split a notation string into key tokens.

    Each token is a single character, an escaped character (``\\<``) or a
    whole modifier group including its delimiters (``<C-a>``).
    """

    tokens: List[str] = []
    start = 0
    escaped = False
    in_group = False

    for index, char in enumerate(notation):
        if escaped:
            escaped = False
            continue
        if char == ESCAPE:
            escaped = True

        end = index
        if char == GROUP_OPEN:
            if in_group:
                raise UnexpectedGroupOpen(notation[start : index + 1], position=index)
            in_group = True
        elif char == GROUP_CLOSE:
            if not in_group:
                raise UnexpectedGroupClose(char, position=index)
            in_group = False
            end = index + 1
        elif in_group:
            continue

        if start != end:
            tokens.append(notation[start:end])
            start = end

    if start < len(notation):
        if in_group:
            raise UnexpectedEnd(notation[start:], position=start)
        tokens.append(notation[start:])

    return tokens


def split_modifiers(group: str) -> List[str]:
    """Split the inside of a modifier group on unescaped ``-``.

    Empty pieces are dropped, so ``C--`` gives ``["C"]``.
    """

    parts: List[str] = []
    start = 0
    escaped = False

    for index, char in enumerate(group):
        if escaped:
            escaped = False
            continue
        if char == ESCAPE:
            escaped = True
        elif char == MODIFIER_SEP:
            if start != index:
                parts.append(group[start:index])
            start = index + 1

    if start < len(group):
        if escaped:
            # trailing escape has nothing to escape
            raise UnexpectedEnd(group[start:])
        parts.append(group[start:])

    return parts


def _is_group(token: str) -> bool:
    return token.startswith(GROUP_OPEN) and token.endswith(GROUP_CLOSE)


def _parse_plain_key(token: str) -> Key:
    found = KeyName.from_literal(token)
    if found is None:
        raise InvalidKeyName(token)
    name, shift = found
    return Key(name=name, modifiers=Modifiers(shift=shift))


def _parse_group_key(group: str) -> Key:
    parts = split_modifiers(group)
    if len(parts) < 2:
        raise IncompleteGroup(group)

    *modifier_tokens, literal = parts
    found = KeyName.from_literal(literal)
    if found is None:
        raise InvalidKeyName(literal)
    name, shift = found

    control = False
    alt = False
    for modifier in modifier_tokens:
        if modifier == _CONTROL:
            control = True
        elif modifier == _ALT:
            alt = True
        else:
            raise InvalidKeyModifier(modifier)

    return Key(name=name, modifiers=Modifiers(shift=shift, control=control, alt=alt))


def parse_key(token: str) -> Key:
    """Parse exactly one token (``a``, ``\\-`` or ``<C-M-a>``) into a Key."""

    if _is_group(token):
        return _parse_group_key(token[1:-1])
    return _parse_plain_key(token)


def parse_keys(notation: str) -> Keys:
    """Parse a whole notation string into an ordered Keys sequence.

    The first error aborts the parse; there are no partial results.
    """

    tokens = split_keys(notation)
    logger.debug("tokenized %r into %r", notation, tokens)
    return Keys([parse_key(token) for token in tokens])
