from __future__ import annotations

import unittest

from md2toc.html import FALLBACK_TITLE, escape, page_title, render_page
from md2toc.markdown import HeadingRecord


class PageTests(unittest.TestCase):
    def test_title_is_first_heading(self) -> None:
        headings = [HeadingRecord(2, "Intro", "intro"), HeadingRecord(1, "Main", "main")]
        self.assertEqual(page_title(headings), "Intro")

    def test_fallback_title(self) -> None:
        self.assertEqual(page_title([]), FALLBACK_TITLE)
        self.assertEqual(FALLBACK_TITLE, "Document")

    def test_escape(self) -> None:
        self.assertEqual(escape("a < b & c > d"), "a &lt; b &amp; c &gt; d")

    def test_render_page(self) -> None:
        page = render_page("Q&A", '<div class="toc"></div>\n', "<p>body</p>\n")
        self.assertTrue(page.startswith("<!DOCTYPE html>\n"))
        self.assertIn("<title>Q&amp;A</title>", page)
        self.assertIn('<link rel="stylesheet" href="styles.css">', page)
        self.assertIn('<script src="script.js"></script>', page)
        self.assertIn('<div class="content">\n<p>body</p>\n', page)
        self.assertLess(page.index('<div class="toc">'), page.index('<div class="content">'))


if __name__ == "__main__":
    unittest.main()
