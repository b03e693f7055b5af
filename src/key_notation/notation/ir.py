from __future__ import annotations

from typing import Iterator, List

from pydantic import BaseModel, ConfigDict, Field, RootModel

from .key_names import KeyName


class Modifiers(BaseModel):
    """Independent modifier flags; all combinations are valid."""

    model_config = ConfigDict(frozen=True)

    shift: bool = False
    control: bool = False
    alt: bool = False

    def names(self) -> List[str]:
        flags = (("control", self.control), ("alt", self.alt), ("shift", self.shift))
        return [name for name, enabled in flags if enabled]


class Key(BaseModel):
    """One key press: symbolic name plus modifiers."""

    model_config = ConfigDict(frozen=True)

    name: KeyName
    modifiers: Modifiers = Field(default_factory=Modifiers)

    def describe(self) -> str:
        """Human-readable label, e.g. ``control+shift+b``."""

        return "+".join([*self.modifiers.names(), self.name.value])


class Keys(RootModel[List[Key]]):
    """Ordered key sequence, in the order it was written."""

    root: List[Key] = Field(default_factory=list)

    def __iter__(self) -> Iterator[Key]:  # type: ignore[override]
        return iter(self.root)

    def __len__(self) -> int:
        return len(self.root)

    def __getitem__(self, index: int) -> Key:
        return self.root[index]
