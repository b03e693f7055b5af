from __future__ import annotations

from string import ascii_lowercase

import pytest

from key_notation.notation.key_names import KeyName


@pytest.mark.parametrize("letter", list(ascii_lowercase))
def test_letters_have_shifted_spelling(letter: str) -> None:
    assert KeyName.from_literal(letter) == (KeyName(letter), False)
    assert KeyName.from_literal(letter.upper()) == (KeyName(letter), True)


def test_digits_and_symbols() -> None:
    assert KeyName.from_literal("0") == (KeyName.NUMBER_0, False)
    assert KeyName.from_literal("9") == (KeyName.NUMBER_9, False)
    assert KeyName.from_literal("#") == (KeyName.POUND, False)
    assert KeyName.from_literal('"') == (KeyName.DOUBLE_QUOTE, False)
    assert KeyName.from_literal("\\") == (KeyName.BACKSLASH, False)


def test_metacharacters_need_escape() -> None:
    assert KeyName.from_literal("\\-") == (KeyName.DASH, False)
    assert KeyName.from_literal("\\<") == (KeyName.LESS_THAN, False)
    assert KeyName.from_literal("\\>") == (KeyName.GREATER_THAN, False)
    for bare in ("-", "<", ">"):
        assert KeyName.from_literal(bare) is None


@pytest.mark.parametrize("literal", ["", " ", "ab", "space", "\\a", "é"])
def test_unknown_literals(literal: str) -> None:
    assert KeyName.from_literal(literal) is None


def test_literal_round_trip() -> None:
    for name in KeyName:
        if name.literal is None:
            continue
        assert KeyName.from_literal(name.literal) == (name, False)
    assert KeyName.SPACE.literal is None
