#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from keysmith.core.error_dialect import format_error_text
from keysmith.core.models import PASSWORD_DEFAULT_LENGTH, PasswordRequest
from keysmith.core.password_service import generate_passwords


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Character-class password generator using os.urandom (one of each selected class guaranteed)"
    )
    parser.add_argument("-l", "--length", type=int, default=PASSWORD_DEFAULT_LENGTH, help="password length")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of outputs to print")
    parser.add_argument("--no-lowercase", action="store_true", help="exclude lowercase letters (a-z)")
    parser.add_argument("--no-uppercase", action="store_true", help="exclude uppercase letters (A-Z)")
    parser.add_argument("--no-digits", action="store_true", help="exclude digits (0-9)")
    parser.add_argument("--no-symbols", action="store_true", help="exclude symbols")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request = PasswordRequest(
        count=args.count,
        length=args.length,
        lowercase=not args.no_lowercase,
        uppercase=not args.no_uppercase,
        digits=not args.no_digits,
        symbols=not args.no_symbols,
    )
    try:
        result = generate_passwords(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.outputs:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
