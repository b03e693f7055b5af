from __future__ import annotations

from string import ascii_uppercase, digits
from typing import Dict

from key_notation.notation.ir import Key, Modifiers
from key_notation.notation.key_names import KeyName

from .models import HostKeyCode, KeyInput, KeyMods


class UnsupportedHostKey(ValueError):
    """The host reported a key or modifier with no notation equivalent."""


_KEY_NAMES_BY_KEYCODE: Dict[HostKeyCode, KeyName] = {
    **{ch: KeyName(ch.lower()) for ch in ascii_uppercase},
    **{f"Key{d}": KeyName(f"number_{d}") for d in digits},
    "Space": KeyName.SPACE,
}


def key_name_from_keycode(keycode: HostKeyCode) -> KeyName:
    try:
        return _KEY_NAMES_BY_KEYCODE[keycode]
    except KeyError:
        raise UnsupportedHostKey(f"unsupported host keycode: {keycode!r}") from None


def modifiers_from_mods(mods: KeyMods) -> Modifiers:
    """Map a host bitmask; the platform (logo/super) modifier is rejected."""

    if mods & KeyMods.LOGO:
        raise UnsupportedHostKey("logo modifier has no notation equivalent")
    return Modifiers(
        shift=bool(mods & KeyMods.SHIFT),
        control=bool(mods & KeyMods.CTRL),
        alt=bool(mods & KeyMods.ALT),
    )


def key_from_input(event: KeyInput) -> Key:
    if event.keycode is None:
        raise UnsupportedHostKey("key event carries no keycode")
    return Key(
        name=key_name_from_keycode(event.keycode),
        modifiers=modifiers_from_mods(event.mods),
    )
