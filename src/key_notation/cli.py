from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from typing import List

from pydantic import ValidationError

from key_notation.notation.dsl import parse_keys
from key_notation.notation.errors import NotationError
from key_notation.notation.frontend import BindingError, KeymapFrontend
from key_notation.notation.ir import Keys


logger = logging.getLogger(__name__)


def _format_keys(keys: Keys) -> str:
    return " ".join(key.describe() for key in keys)


def _report_notations(notations: List[str]) -> None:
    for notation in notations:
        print(f"{notation}\t{_format_keys(parse_keys(notation))}")


def _report_config(path: str) -> None:
    frontend = KeymapFrontend()
    bindings = frontend.parse_config(frontend.load_toml(path))
    for binding in bindings:
        where = f"{binding.mode}.{binding.action}" if binding.mode else binding.action
        print(f"{where}\t{binding.notation}\t{_format_keys(binding.keys)}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Parse key notation strings (e.g. '<C-a>b') and show the resolved keys."
    )
    parser.add_argument("notation", nargs="*", help="Notation string(s) to parse")
    parser.add_argument("--config", help="Keymap TOML file; parse every binding in it")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if not args.notation and not args.config:
        parser.error("give at least one notation or --config")

    try:
        if args.config:
            _report_config(args.config)
        _report_notations(args.notation)
    except (
        NotationError,
        BindingError,
        OSError,
        tomllib.TOMLDecodeError,
        ValidationError,
    ) as exc:
        logger.debug("parse failed", exc_info=exc)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
