from __future__ import annotations

from .dsl import parse_key, parse_keys, split_keys, split_modifiers
from .errors import (
    IncompleteGroup,
    InvalidKeyModifier,
    InvalidKeyName,
    NoKeyName,
    NotationError,
    UnexpectedEnd,
    UnexpectedGroupClose,
    UnexpectedGroupOpen,
)
from .frontend import Binding, BindingError, KeymapFrontend
from .ir import Key, Keys, Modifiers
from .key_names import KeyName

__all__ = [
    "Binding",
    "BindingError",
    "IncompleteGroup",
    "InvalidKeyModifier",
    "InvalidKeyName",
    "Key",
    "KeyName",
    "KeymapFrontend",
    "Keys",
    "Modifiers",
    "NoKeyName",
    "NotationError",
    "UnexpectedEnd",
    "UnexpectedGroupClose",
    "UnexpectedGroupOpen",
    "parse_key",
    "parse_keys",
    "split_keys",
    "split_modifiers",
]
