import os
import unittest
from pathlib import Path
from unittest import mock

from mdblog.site.config import SiteConfig, load_site_config


class TestSiteConfig(unittest.TestCase):
    def test_defaults(self):
        with mock.patch.dict(os.environ, {}, clear=True), mock.patch("mdblog.site.config.load_dotenv"):
            config = load_site_config()
        self.assertEqual(config.num_posts_on_homepage, 4)
        self.assertEqual(config.posts_per_page, 8)
        self.assertEqual(config.site_host, "bdestrempes.dev")

    def test_env_overrides(self):
        env = {
            "SITE_TITLE": "Notes",
            "SITE_URL": "https://notes.example.com/",
            "POSTS_PER_PAGE": "3",
            "CONTENT_DIR": "/tmp/articles",
        }
        with mock.patch.dict(os.environ, env, clear=True), mock.patch("mdblog.site.config.load_dotenv"):
            config = load_site_config()
        self.assertEqual(config.title, "Notes")
        self.assertEqual(config.site_url, "https://notes.example.com")
        self.assertEqual(config.posts_per_page, 3)
        self.assertEqual(config.content_dir, Path("/tmp/articles"))

    def test_bad_integer_names_variable(self):
        with mock.patch.dict(os.environ, {"POSTS_PER_PAGE": "many"}, clear=True), mock.patch("mdblog.site.config.load_dotenv"):
            with self.assertRaises(ValueError) as ctx:
                load_site_config()
        self.assertIn("POSTS_PER_PAGE", str(ctx.exception))

    def test_absolute_url(self):
        config = SiteConfig(site_url="https://blog.example.com")
        self.assertEqual(config.absolute_url("/articles/x/"), "https://blog.example.com/articles/x/")


if __name__ == "__main__":
    unittest.main()
