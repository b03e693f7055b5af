from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from key_notation.notation.errors import InvalidKeyModifier, UnexpectedEnd
from key_notation.notation.frontend import BindingError, KeymapFrontend
from key_notation.notation.ir import Key, Modifiers
from key_notation.notation.key_names import KeyName


def test_parse_config_basic() -> None:
    path = Path(__file__).with_name("test_keys.toml")
    frontend = KeymapFrontend()
    config = frontend.load_toml(path)
    bindings = frontend.parse_config(config)

    assert [b.action for b in bindings] == ["save", "quit", "leave", "delete_word"]

    save = bindings[0]
    assert save.mode is None
    assert list(save.keys) == [Key(name=KeyName.S, modifiers=Modifiers(control=True))]

    quit_ = bindings[1]
    assert len(quit_.keys) == 2
    assert quit_.keys[1] == Key(name=KeyName.Q)

    # mode bindings inherit the mode name
    delete_word = bindings[3]
    assert delete_word.mode == "insert"
    assert delete_word.notation == "<M-\\->"
    assert list(delete_word.keys) == [Key(name=KeyName.DASH, modifiers=Modifiers(alt=True))]


def test_parse_config_empty() -> None:
    assert KeymapFrontend().parse_config({}) == []


def test_parse_config_reports_binding() -> None:
    config = {"mode": [{"name": "normal", "bindings": {"jump": "<S-j>"}}]}

    with pytest.raises(BindingError) as exc_info:
        KeymapFrontend().parse_config(config)

    err = exc_info.value
    assert err.action == "jump"
    assert err.mode == "normal"
    assert isinstance(err.cause, InvalidKeyModifier)
    assert isinstance(err.__cause__, InvalidKeyModifier)
    assert "normal.jump" in str(err)


def test_parse_config_unclosed_group() -> None:
    with pytest.raises(BindingError) as exc_info:
        KeymapFrontend().parse_config({"bindings": {"save": "<C-s"}})
    assert isinstance(exc_info.value.cause, UnexpectedEnd)


def test_parse_config_rejects_bad_shape() -> None:
    with pytest.raises(ValidationError):
        KeymapFrontend().parse_config({"bindings": ["<C-s>"]})
