import unittest
from datetime import date, datetime, timezone

from mdblog.content.frontmatter import coerce_date, split_front_matter, validate_front_matter


class TestFrontMatter(unittest.TestCase):
    def test_split(self):
        meta, body = split_front_matter("---\ntitle: Hello\ntags: [a, b]\n---\n\n# Body\n")
        self.assertEqual(meta, {"title": "Hello", "tags": ["a", "b"]})
        self.assertEqual(body, "# Body")

    def test_no_block(self):
        meta, body = split_front_matter("# Just markdown\n")
        self.assertEqual(meta, {})
        self.assertEqual(body, "# Just markdown\n")

    def test_unterminated_block_is_body(self):
        meta, body = split_front_matter("---\ntitle: x\n")
        self.assertEqual(meta, {})

    def test_valid_meta(self):
        meta = {"title": "T", "description": "D", "date": date(2024, 1, 2), "tags": ["x"], "draft": False}
        self.assertEqual(validate_front_matter(meta), [])

    def test_missing_required_and_bad_types(self):
        errors = validate_front_matter({"title": "", "tags": "not-a-list", "draft": "yes"})
        joined = "\n".join(errors)
        self.assertIn("<root>: 'description' is a required property", joined)
        self.assertIn("<root>: 'date' is a required property", joined)
        self.assertTrue(any(e.startswith("tags:") for e in errors))
        self.assertTrue(any(e.startswith("draft:") for e in errors))
        self.assertTrue(any(e.startswith("title:") for e in errors))

    def test_blank_title_rejected(self):
        errors = validate_front_matter({"title": "   ", "description": "D", "date": "2024-01-02"})
        self.assertTrue(any(e.startswith("title:") for e in errors))

    def test_bad_date_reported(self):
        errors = validate_front_matter({"title": "T", "description": "D", "date": "yesterday"})
        self.assertTrue(any(e.startswith("date:") for e in errors))

    def test_coerce_date(self):
        self.assertEqual(coerce_date(date(2024, 3, 5)), datetime(2024, 3, 5, tzinfo=timezone.utc))
        self.assertEqual(coerce_date("2024-01-15T09:30:00Z"), datetime(2024, 1, 15, 9, 30, tzinfo=timezone.utc))
        self.assertEqual(coerce_date(datetime(2024, 1, 1)).tzinfo, timezone.utc)
        with self.assertRaises(ValueError):
            coerce_date(None)


if __name__ == "__main__":
    unittest.main()
