from __future__ import annotations

from typing import Sequence

from .assets import SCRIPT_NAME, STYLESHEET_NAME
from .markdown import HeadingRecord

FALLBACK_TITLE = "Document"


def escape(s: str) -> str:
    return s.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def page_title(headings: Sequence[HeadingRecord]) -> str:
    return headings[0].text if headings else FALLBACK_TITLE


def render_page(title: str, toc_html: str, body_html: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <link rel="stylesheet" href="{STYLESHEET_NAME}">
</head>
<body>
{toc_html}
    <div class="content">
{body_html}
    </div>
    <script src="{SCRIPT_NAME}"></script>
</body>
</html>
"""
