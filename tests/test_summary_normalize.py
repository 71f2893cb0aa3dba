import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.summary.normalize import condense, normalize, unify_line_endings  # noqa: E402


class NormalizerTests(unittest.TestCase):
    def test_crlf_and_tabs_collapse_to_single_spaces(self):
        result = normalize("a\r\n\tb")
        self.assertEqual(result, "a b")
        for char in ("\r", "\n", "\t"):
            self.assertNotIn(char, result)
        self.assertNotIn("  ", result)

    def test_empty_string_stays_empty(self):
        self.assertEqual(normalize(""), "")
        self.assertEqual(normalize("  \r\n\t "), "")

    def test_unify_keeps_line_breaks_for_sentence_splitting(self):
        self.assertEqual(unify_line_endings("\tline one\r\nline two  "), "line one\nline two")

    def test_condense_collapses_every_whitespace_run(self):
        self.assertEqual(condense("one\n\n two   three"), "one two three")

    def test_byte_order_mark_counts_as_whitespace(self):
        self.assertEqual(normalize("\ufeffJane Doe\n\ufeff CV"), "Jane Doe CV")

    def test_normalize_is_idempotent(self):
        samples = [
            "",
            "plain",
            "  padded\ttext  ",
            "Line one.\r\nLine two!\n\n\tLine three?",
            " non-breaking space and\x0bvertical tab",
        ]
        for sample in samples:
            with self.subTest(sample=sample):
                once = normalize(sample)
                self.assertEqual(normalize(once), once)


if __name__ == "__main__":
    unittest.main()
