from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional
import tomllib

from pydantic import BaseModel

from .config import KeymapConfig
from .dsl import parse_keys
from .errors import NotationError
from .ir import Keys


logger = logging.getLogger(__name__)


class Binding(BaseModel):
    """One configured action and the key sequence bound to it."""

    action: str
    notation: str
    keys: Keys
    mode: Optional[str] = None


class BindingError(ValueError):
    """A binding in a keymap file holds a malformed notation."""

    def __init__(self, action: str, notation: str, mode: Optional[str], cause: NotationError) -> None:
        self.action = action
        self.notation = notation
        self.mode = mode
        self.cause = cause
        where = f"{mode}.{action}" if mode else action
        super().__init__(f"binding {where!r} = {notation!r}: {cause}")


class KeymapFrontend:
    """Parse keymap config (TOML) into bindings of parsed key sequences."""

    def load_toml(self, path: str | Path) -> Dict[str, Any]:
        """Load a TOML keymap file into a dict."""

        path = Path(path)
        return tomllib.loads(path.read_text(encoding="utf-8"))

    def parse_config(self, config: Dict[str, Any]) -> List[Binding]:
        cfg = KeymapConfig.model_validate(config)

        bindings: List[Binding] = []

        # Global bindings (no mode)
        for action, notation in cfg.bindings.items():
            bindings.append(_parse_binding(action, notation, mode=None))

        for group in cfg.mode:
            for action, notation in group.bindings.items():
                bindings.append(_parse_binding(action, notation, mode=group.name))

        logger.debug("parsed %d bindings from %d modes", len(bindings), len(cfg.mode))
        return bindings


def _parse_binding(action: str, notation: str, *, mode: Optional[str]) -> Binding:
    try:
        keys = parse_keys(notation)
    except NotationError as exc:
        raise BindingError(action, notation, mode, exc) from exc
    return Binding(action=action, notation=notation, keys=keys, mode=mode)
