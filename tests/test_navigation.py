import unittest
from datetime import datetime, timezone

from mdblog.rendering.formatting import class_names, format_date
from mdblog.rendering.navigation import Crumb, breadcrumbs, paginate


class TestBreadcrumbs(unittest.TestCase):
    def test_article_path(self):
        crumbs = breadcrumbs("/articles/feature-flags/", last_label="Feature flags")
        self.assertEqual(
            crumbs,
            [Crumb("home", "/"), Crumb("articles", "/articles/"), Crumb("Feature flags", None)],
        )

    def test_root(self):
        self.assertEqual(breadcrumbs("/"), [Crumb("home", None)])


class TestPaginate(unittest.TestCase):
    def test_pages(self):
        items = list(range(17))
        first = paginate(items, 8, 1)
        self.assertEqual(first.items, list(range(8)))
        self.assertEqual(first.total_pages, 3)
        self.assertIsNone(first.prev_url)
        self.assertEqual(first.next_url, "/articles/page/2/")

        second = paginate(items, 8, 2)
        self.assertEqual(second.prev_url, "/articles/")
        self.assertEqual(second.next_url, "/articles/page/3/")

        last = paginate(items, 8, 3)
        self.assertEqual(last.items, [16])
        self.assertIsNone(last.next_url)

    def test_empty_has_one_page(self):
        page = paginate([], 8, 1)
        self.assertEqual(page.items, [])
        self.assertEqual(page.total_pages, 1)

    def test_out_of_range(self):
        with self.assertRaises(ValueError):
            paginate([1, 2], 8, 2)
        with self.assertRaises(ValueError):
            paginate([1, 2], 8, 0)


class TestFormatting(unittest.TestCase):
    def test_format_date(self):
        self.assertEqual(format_date(datetime(2024, 3, 5, tzinfo=timezone.utc)), "March 5, 2024")

    def test_class_names(self):
        self.assertEqual(class_names("a b", None, "", ["c", False], {"d": True, "e": False}, "a"), "b c d a")


if __name__ == "__main__":
    unittest.main()
