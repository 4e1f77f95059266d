from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple

from .ids import IdentifierRegistry

HR_RE = re.compile(r"^\s*[-*_]{3,}\s*$")
FENCE_RE = re.compile(r"^```(?!`)(.*)$")
# only pipes, dashes, colons and whitespace, with at least one pipe and one dash
TABLE_DIVIDER_RE = re.compile(r"^(?=[^|]*\|)(?=[^-]*-)[\s|:-]+$")
HEADING_RE = re.compile(r"^(#{1,6})\s+(.*)$")

LINK_RE = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")
BOLD_RE = re.compile(r"\*\*([^*]+)\*\*")
ITALIC_RE = re.compile(r"\*([^*]+)\*")
CODE_RE = re.compile(r"`([^`]+)`")

InlineRule = Callable[[str], str]


def _link(text: str) -> str:
    return LINK_RE.sub(r'<a href="\2">\1</a>', text)


def _bold(text: str) -> str:
    return BOLD_RE.sub(r"<strong>\1</strong>", text)


def _italic(text: str) -> str:
    return ITALIC_RE.sub(r"<em>\1</em>", text)


def _code(text: str) -> str:
    return CODE_RE.sub(r"<code>\1</code>", text)


PARAGRAPH_RULES: List[InlineRule] = [_link, _bold, _italic, _code]
CELL_RULES: List[InlineRule] = [_bold, _italic, _code, _link]


def _apply(text: str, rules: List[InlineRule]) -> str:
    for rule in rules:
        text = rule(text)
    return text


def format_inline(text: str) -> str:
    """Inline formatting for paragraph lines: links, bold, italic, code."""
    return _apply(text, PARAGRAPH_RULES)


def format_cell(text: str) -> str:
    """Inline formatting for table cells: bold, italic, code, links."""
    return _apply(text, CELL_RULES)


def clean_heading_text(text: str) -> str:
    return text.replace("**", "")


def split_table_row(line: str) -> list[str]:
    row = line
    if row.startswith("|"):
        row = row[1:]
    if row.endswith("|"):
        row = row[:-1]
    cells = row.split("|")
    if cells and cells[-1] == "":
        cells.pop()
    return [cell.strip(" \t") for cell in cells]


@dataclass(frozen=True)
class HeadingRecord:
    level: int
    text: str
    id: str


@dataclass
class TableBuffer:
    rows: list[list[str]] = field(default_factory=list)

    def add_row(self, cells: list[str]) -> None:
        self.rows.append(cells)

    def clear(self) -> None:
        self.rows.clear()

    def __bool__(self) -> bool:
        return bool(self.rows)

    def to_html(self) -> str:
        out = ["<table>\n"]
        header = True
        for row in self.rows:
            if not row:
                continue
            tag = "th" if header else "td"
            cells = "".join(f"<{tag}>{cell}</{tag}>" for cell in row)
            out.append(f"<tr>{cells}</tr>\n")
            header = False
        out.append("</table>\n")
        return "".join(out)


class ScanResult(NamedTuple):
    html: str
    headings: list[HeadingRecord]


class MarkdownScanner:
    """Single-pass, line-oriented Markdown to HTML converter.

    Block state (code fence, pending table, heading ids) lives on the instance
    and is reset at the start of every :meth:`scan`.
    """

    def __init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.parts: list[str] = []
        self.headings: list[HeadingRecord] = []
        self.ids = IdentifierRegistry()
        self.table = TableBuffer()
        self.in_code_block = False
        self.in_table = False

    def scan(self, text: str) -> ScanResult:
        self._reset()
        for line in text.split("\n"):
            self._scan_line(line)
        # an unclosed code fence is left open
        if self.in_table and self.table:
            self._flush_table()
        return ScanResult("".join(self.parts), list(self.headings))

    def _flush_table(self) -> None:
        self.parts.append(self.table.to_html())
        self.table.clear()
        self.in_table = False

    def _scan_line(self, line: str) -> None:
        if not line:
            return

        if HR_RE.match(line):
            self.parts.append("<hr>\n")
            return

        fence = FENCE_RE.match(line)
        if fence:
            if self.in_code_block:
                self.parts.append("</code></pre>\n")
            else:
                lang = fence.group(1)
                attr = f' class="language-{lang}"' if lang else ""
                self.parts.append(f"<pre><code{attr}>\n")
            self.in_code_block = not self.in_code_block
            return

        if self.in_code_block:
            self.parts.append(line + "\n")
            return

        # a divider that does not start a table falls through as plain text
        if TABLE_DIVIDER_RE.match(line):
            if self.table and not self.in_table:
                self.in_table = True
                return
        elif "|" in line:
            self.table.add_row([format_cell(cell) for cell in split_table_row(line)])
            return
        elif self.in_table:
            self._flush_table()

        heading = HEADING_RE.match(line)
        if heading:
            self._add_heading(len(heading.group(1)), heading.group(2))
            return

        self.parts.append(f"<p>{format_inline(line)}</p>\n")

    def _add_heading(self, level: int, raw_text: str) -> None:
        text = clean_heading_text(raw_text)
        heading_id = self.ids.assign(text)
        self.headings.append(HeadingRecord(level, text, heading_id))
        self.parts.append(f'<h{level} id="{heading_id}">{text}</h{level}>\n')


def markdown_to_html(text: str) -> ScanResult:
    return MarkdownScanner().scan(text)
