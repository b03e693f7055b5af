from __future__ import annotations

from .notation import (
    Key,
    KeyName,
    Keys,
    Modifiers,
    NotationError,
    parse_key,
    parse_keys,
)

__all__ = [
    "Key",
    "KeyName",
    "Keys",
    "Modifiers",
    "NotationError",
    "parse_key",
    "parse_keys",
]
