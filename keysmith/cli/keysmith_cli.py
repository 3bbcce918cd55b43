#!/usr/bin/env python3
from __future__ import annotations

import sys

from keysmith.cli.pwgen_cli import main as password_main
from keysmith.cli.wordchain_cli import main as wordchain_main

_PASSWORD_ALIASES = frozenset({"random", "password", "pass", "pw"})
_WORDCHAIN_ALIASES = frozenset({"words", "word", "chain", "passphrase"})


def _print_help() -> None:
    print(
        "Keysmith unified CLI\n"
        "\n"
        "Usage:\n"
        "  keysmith [random flags]\n"
        "  keysmith random [random flags]\n"
        "  keysmith words [word-chain flags]\n"
        "\n"
        "Examples:\n"
        "  keysmith -n 5 -l 24\n"
        "  keysmith words -w 5 --separator random --case mixed --digits\n"
    )


def main(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return password_main([])

    command = args[0].lower()
    tail = args[1:]

    if command in ("-h", "--help", "help"):
        _print_help()
        return 0
    if command in _PASSWORD_ALIASES:
        return password_main(tail)
    if command in _WORDCHAIN_ALIASES:
        return wordchain_main(tail)
    if command.startswith("-"):
        return password_main(args)
    print(
        f"unknown command: {args[0]!r}. Use 'keysmith --help' for usage.",
        file=sys.stderr,
    )
    return 2


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
