#!/usr/bin/env python3
from __future__ import annotations

import argparse
import sys

from keysmith.core.error_dialect import format_error_text
from keysmith.core.models import (
    CASE_CHOICES,
    SEPARATOR_CHOICES,
    WORD_CHAIN_DEFAULT_CASE,
    WORD_CHAIN_DEFAULT_SEPARATOR,
    WORD_CHAIN_DEFAULT_WORDS,
    WordChainRequest,
)
from keysmith.core.word_chain_service import generate_word_chains


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Word-chain passphrase generator using os.urandom")

    parser.add_argument("-w", "--words", type=int, default=WORD_CHAIN_DEFAULT_WORDS, help="number of words per chain")
    parser.add_argument("-n", "--count", type=int, default=1, help="number of outputs to print")
    parser.add_argument(
        "--separator",
        choices=SEPARATOR_CHOICES,
        default=WORD_CHAIN_DEFAULT_SEPARATOR,
        help="separator between words; 'random' draws one per gap (default: hyphen)",
    )
    parser.add_argument(
        "--case",
        choices=CASE_CHOICES,
        default=WORD_CHAIN_DEFAULT_CASE,
        help="capitalization applied to each word (default: none)",
    )
    parser.add_argument("--digits", action="store_true", help="insert one random digit after each separator")
    parser.add_argument("--symbols", action="store_true", help="insert one random symbol after each separator")

    # Vocabulary sources
    parser.add_argument("--no-default-list", action="store_true", help="do not use the built-in word list")
    parser.add_argument("--custom", default="", help="whitespace-separated custom words")
    parser.add_argument(
        "--wordlist",
        action="append",
        default=[],
        help="path to a whitespace-separated word list file (repeatable)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    request = WordChainRequest(
        count=args.count,
        word_count=args.words,
        use_default_list=not args.no_default_list,
        custom_words=args.custom,
        wordlist_files=tuple(args.wordlist),
        separator=args.separator,
        capitalization=args.case,
        inject_digit=args.digits,
        inject_symbol=args.symbols,
    )
    try:
        result = generate_word_chains(request)
    except ValueError as exc:
        print(format_error_text(exc), file=sys.stderr)
        return 2
    for line in result.outputs:
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
