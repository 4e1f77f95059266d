from __future__ import annotations

from typing import Sequence

from .markdown import HeadingRecord

TOC_CAPTION = "Table of Contents"


def build_toc_html(headings: Sequence[HeadingRecord]) -> str:
    """Render the heading list as nested ``<ul>`` lists.

    Nesting follows the level jumps as they occur: going from level 1 straight
    to level 4 opens three lists at once, and a document starting at level 3
    opens two before its first item. Returns ``""`` when there are no
    headings, so no TOC container is emitted at all.
    """
    if not headings:
        return ""

    html = [f'<div class="toc">\n<h2>{TOC_CAPTION}</h2>\n<ul>\n']
    depth = 1
    for heading in headings:
        while depth < heading.level:
            html.append("<ul>\n")
            depth += 1
        while depth > heading.level:
            html.append("</ul>\n")
            depth -= 1
        html.append(f'<li><a href="#{heading.id}" data-id="{heading.id}">{heading.text}</a></li>\n')
    while depth > 1:
        html.append("</ul>\n")
        depth -= 1
    html.append("</ul>\n</div>\n")
    return "".join(html)
