from __future__ import annotations

import pytest

from key_notation.host.adapter import (
    UnsupportedHostKey,
    key_from_input,
    key_name_from_keycode,
    modifiers_from_mods,
)
from key_notation.host.models import KeyInput, KeyMods
from key_notation.notation.dsl import parse_key
from key_notation.notation.ir import Modifiers
from key_notation.notation.key_names import KeyName


def test_keycodes() -> None:
    assert key_name_from_keycode("A") == KeyName.A
    assert key_name_from_keycode("Key5") == KeyName.NUMBER_5
    assert key_name_from_keycode("Space") == KeyName.SPACE


def test_unknown_keycode() -> None:
    with pytest.raises(UnsupportedHostKey):
        key_name_from_keycode("F13")


def test_modifiers_from_mods() -> None:
    assert modifiers_from_mods(KeyMods.NONE) == Modifiers()
    assert modifiers_from_mods(KeyMods.SHIFT | KeyMods.ALT) == Modifiers(shift=True, alt=True)


def test_logo_modifier_rejected() -> None:
    with pytest.raises(UnsupportedHostKey):
        modifiers_from_mods(KeyMods.CTRL | KeyMods.LOGO)


def test_key_from_input_matches_notation() -> None:
    event = KeyInput(keycode="B", mods=KeyMods.SHIFT | KeyMods.CTRL | KeyMods.ALT)
    assert key_from_input(event) == parse_key("<M-C-B>")


def test_key_from_input_without_keycode() -> None:
    with pytest.raises(UnsupportedHostKey):
        key_from_input(KeyInput(mods=KeyMods.CTRL))
