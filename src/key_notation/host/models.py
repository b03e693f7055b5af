from __future__ import annotations

from enum import IntFlag
from typing import Optional, TypeAlias

from pydantic import BaseModel


class KeyMods(IntFlag):
    """Host modifier bitmask."""

    NONE = 0
    SHIFT = 1
    CTRL = 2
    ALT = 4
    LOGO = 8


# Host keycode names: "A".."Z", "Key0".."Key9", "Space", ...
HostKeyCode: TypeAlias = str


class KeyInput(BaseModel):
    """A physical key press as reported by the host input system."""

    keycode: Optional[HostKeyCode] = None
    mods: KeyMods = KeyMods.NONE
