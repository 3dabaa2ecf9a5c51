"""
Tests for lexer diagnostics and the default error sink.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from interp.lexer.errors import (
    Diagnostic, ErrorReporter, LexerError, ERROR_CODES,
    create_unexpected_character_error, create_unterminated_string_error
)


class TestDiagnostic(unittest.TestCase):

    def test_str_includes_location_and_help(self):
        diagnostic = create_unterminated_string_error(4, "main.interp")
        text = str(diagnostic)
        self.assertTrue(text.startswith("ERROR[L002]: Unterminated string."))
        self.assertIn("--> main.interp:4", text)
        self.assertIn("help:", text)

    def test_unexpected_character_help(self):
        printable = create_unexpected_character_error("@", 1)
        self.assertIn("'@'", printable.help_text)

        control = create_unexpected_character_error("\x07", 1)
        self.assertIn("U+0007", control.help_text)

    def test_codes_are_known(self):
        self.assertIn(create_unexpected_character_error("@", 1).code, ERROR_CODES)
        self.assertIn(create_unterminated_string_error(1).code, ERROR_CODES)


class TestErrorReporter(unittest.TestCase):

    def test_records_and_logs(self):
        reporter = ErrorReporter("x.interp")
        self.assertFalse(reporter.had_error)

        with self.assertLogs("interp.lexer.errors", level="ERROR") as logs:
            reporter(7, "Unexpected character.")

        self.assertTrue(reporter.had_error)
        self.assertEqual(reporter.diagnostics, [
            Diagnostic(message="Unexpected character.", line=7, filename="x.interp"),
        ])
        self.assertIn("[line 7] Error: Unexpected character.", logs.output[0])

    def test_reset(self):
        reporter = ErrorReporter()
        with self.assertLogs("interp.lexer.errors", level="ERROR"):
            reporter(1, "boom")
        reporter.reset()
        self.assertFalse(reporter.had_error)
        self.assertEqual(reporter.diagnostics, [])


class TestLexerError(unittest.TestCase):

    def test_wraps_diagnostic(self):
        diagnostic = create_unexpected_character_error("$", 3)
        error = LexerError(diagnostic)
        self.assertIs(error.diagnostic, diagnostic)
        self.assertEqual(error.line, 3)
        self.assertEqual(error.args, ("Unexpected character.",))
        self.assertEqual(str(error), str(diagnostic))


if __name__ == "__main__":
    unittest.main()
