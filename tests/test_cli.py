"""
Tests for command line parsing.
"""

import contextlib
import io
import unittest

from battery_notify import __version__
from battery_notify.cli import parse_args


class ParseArgsTest(unittest.TestCase):

    def test_defaults(self):
        _, args = parse_args([])
        self.assertEqual(args.thresholds.low, 30)
        self.assertEqual(args.thresholds.critical, 15)
        self.assertEqual(args.extra, [])

    def test_short_flags(self):
        _, args = parse_args(["-l", "25", "-c", "8.5"])
        self.assertEqual(args.thresholds.low, 25)
        self.assertEqual(args.thresholds.critical, 8.5)

    def test_long_flags(self):
        _, args = parse_args(["--low", "40", "--critical", "20"])
        self.assertEqual(args.thresholds.low, 40)
        self.assertEqual(args.thresholds.critical, 20)

    def test_positional_arguments_skip_validation(self):
        _, args = parse_args(["status"])
        self.assertEqual(args.extra, ["status"])
        self.assertIsNone(args.thresholds)

    def test_inverted_thresholds_are_rejected(self):
        stderr = io.StringIO()
        with contextlib.redirect_stderr(stderr), self.assertRaises(SystemExit) as cm:
            parse_args(["--low", "10", "--critical", "20"])
        self.assertEqual(cm.exception.code, 2)
        self.assertIn("critical threshold", stderr.getvalue())

    def test_non_numeric_threshold(self):
        with contextlib.redirect_stderr(io.StringIO()), self.assertRaises(SystemExit) as cm:
            parse_args(["--low", "half"])
        self.assertEqual(cm.exception.code, 2)

    def test_version(self):
        stdout = io.StringIO()
        with contextlib.redirect_stdout(stdout), self.assertRaises(SystemExit) as cm:
            parse_args(["--version"])
        self.assertEqual(cm.exception.code, 0)
        self.assertIn(__version__, stdout.getvalue())


if __name__ == "__main__":
    unittest.main()
