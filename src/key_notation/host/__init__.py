from __future__ import annotations

from .adapter import UnsupportedHostKey, key_from_input, key_name_from_keycode, modifiers_from_mods
from .models import HostKeyCode, KeyInput, KeyMods

__all__ = [
    "HostKeyCode",
    "KeyInput",
    "KeyMods",
    "UnsupportedHostKey",
    "key_from_input",
    "key_name_from_keycode",
    "modifiers_from_mods",
]
