from __future__ import annotations

import io
import unittest
from contextlib import redirect_stderr, redirect_stdout

from keysmith.cli.keysmith_cli import main as keysmith_main
from keysmith.cli.pwgen_cli import main as password_main
from keysmith.cli.pwgen_cli import parse_args as parse_password_args
from keysmith.cli.wordchain_cli import main as wordchain_main
from keysmith.cli.wordchain_cli import parse_args as parse_wordchain_args


def _lines(text: str) -> list[str]:
    return [line for line in text.splitlines() if line.strip()]


class CliArgTests(unittest.TestCase):
    def test_password_cli_defaults(self) -> None:
        args = parse_password_args([])
        self.assertEqual(args.length, 16)
        self.assertEqual(args.count, 1)
        self.assertFalse(args.no_symbols)

    def test_wordchain_cli_defaults(self) -> None:
        args = parse_wordchain_args([])
        self.assertEqual(args.words, 4)
        self.assertEqual(args.separator, "hyphen")
        self.assertEqual(args.case, "none")
        self.assertEqual(args.wordlist, [])

    def test_wordchain_cli_wordlist_is_repeatable(self) -> None:
        args = parse_wordchain_args(["--wordlist", "a.txt", "--wordlist", "b.txt"])
        self.assertEqual(args.wordlist, ["a.txt", "b.txt"])

    def test_password_cli_prints_requested_outputs(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = password_main(["-n", "3", "-l", "10", "--no-uppercase", "--no-lowercase", "--no-symbols"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 3)
        for line in lines:
            self.assertEqual(len(line), 10)
            self.assertTrue(line.isdigit())

    def test_password_cli_reports_no_class_selected(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = password_main(["--no-uppercase", "--no-lowercase", "--no-symbols", "--no-digits"])
        self.assertEqual(rc, 2)
        self.assertIn("no_class_selected:", stderr.getvalue())

    def test_wordchain_cli_custom_words(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = wordchain_main(["-w", "3", "--no-default-list", "--custom", "cat dog", "--separator", "hyphen"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 1)
        self.assertRegex(lines[0], r"^(cat|dog)-(cat|dog)-(cat|dog)$")

    def test_wordchain_cli_reports_empty_vocabulary(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = wordchain_main(["--no-default-list"])
        self.assertEqual(rc, 2)
        self.assertIn("empty_vocabulary:", stderr.getvalue())

    def test_wordchain_cli_reports_missing_wordlist(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = wordchain_main(["--wordlist", ".tmp_missing_cli_wordlist.txt"])
        self.assertEqual(rc, 2)
        self.assertIn("vocabulary_unavailable:", stderr.getvalue())

    def test_keysmith_cli_defaults_to_random_mode(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = keysmith_main(["-n", "1", "-l", "8"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 1)
        self.assertEqual(len(lines[0]), 8)

    def test_keysmith_cli_words_subcommand_dispatch(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = keysmith_main(["words", "-n", "2", "-w", "5", "--separator", "underscore"])
        self.assertEqual(rc, 0)
        lines = _lines(stdout.getvalue())
        self.assertEqual(len(lines), 2)
        self.assertEqual(len(lines[0].split("_")), 5)

    def test_keysmith_cli_unknown_command(self) -> None:
        stderr = io.StringIO()
        with redirect_stderr(stderr):
            rc = keysmith_main(["frobnicate"])
        self.assertEqual(rc, 2)
        self.assertIn("unknown command", stderr.getvalue())

    def test_keysmith_cli_help(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            rc = keysmith_main(["--help"])
        self.assertEqual(rc, 0)
        self.assertIn("Keysmith unified CLI", stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
