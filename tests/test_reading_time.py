import math
import unittest
from unittest import mock

from mdblog.rendering import reading_time as rt
from mdblog.rendering.reading_time import reading_time, word_count


class TestReadingTime(unittest.TestCase):
    def test_simple_html(self):
        self.assertEqual(reading_time("<p>This is a sample text with several words.</p>"), "1 min read")

    def test_long_words_are_plain_words(self):
        html = "<p>This text includes extraordinarily long words to test calculation.</p>"
        self.assertEqual(word_count(html), 9)
        self.assertEqual(reading_time(html), "1 min read")

    def test_empty_and_missing_input(self):
        self.assertEqual(reading_time(""), "1 min read")
        self.assertEqual(reading_time(None), "1 min read")

    def test_multiple_tags(self):
        html = "<h1>Title</h1><p>Paragraph with <strong>bold</strong> text.</p><ul><li>Item 1</li><li>Item 2</li></ul>"
        # tags are removed without spacing, so adjacent words merge
        self.assertEqual(word_count(html), 6)
        self.assertEqual(reading_time(html), "1 min read")

    def test_four_hundred_words(self):
        self.assertEqual(reading_time("<p>" + "word " * 400 + "</p>"), "2 min read")

    def test_minutes_round_up(self):
        for words in (0, 1, 199, 200, 201, 399, 400, 401, 1000):
            expected = max(1, math.ceil(words / 200))
            self.assertEqual(reading_time("w " * words), f"{expected} min read", msg=f"words={words}")

    def test_unexpected_error_falls_back(self):
        with mock.patch.object(rt, "word_count", side_effect=RuntimeError("boom")):
            with self.assertLogs("mdblog.rendering.reading_time", level="ERROR"):
                self.assertEqual(reading_time("<p>x</p>"), rt.FALLBACK)


if __name__ == "__main__":
    unittest.main()
