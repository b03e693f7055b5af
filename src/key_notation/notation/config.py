from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field


class ModeConfig(BaseModel):
    name: str
    bindings: Dict[str, str] = Field(default_factory=dict)


class KeymapConfig(BaseModel):
    version: int | None = None
    description: str | None = None
    bindings: Dict[str, str] = Field(default_factory=dict)
    mode: List[ModeConfig] = Field(default_factory=list)
