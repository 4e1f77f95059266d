from __future__ import annotations

import logging
from pathlib import Path
from typing import NamedTuple

from .assets import CSS, JS, SCRIPT_NAME, STYLESHEET_NAME
from .config import ENCODING
from .html import page_title, render_page
from .markdown import markdown_to_html
from .toc import build_toc_html

logger = logging.getLogger(__name__)


class ConversionError(RuntimeError):
    pass


class InputFileError(ConversionError):
    pass


class OutputFileError(ConversionError):
    pass


class GeneratedFiles(NamedTuple):
    html: Path
    css: Path
    js: Path


def read_markdown(path: Path, *, encoding: str = ENCODING) -> str:
    if not path.exists():
        raise InputFileError(f"Input file does not exist: {path}")
    try:
        text = path.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise InputFileError(f"Could not open input file {path}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), path)
    return text


def write_output(path: Path, content: str, *, encoding: str = ENCODING) -> Path:
    try:
        path.write_text(content, encoding=encoding)
    except OSError as exc:
        raise OutputFileError(f"Could not open file {path} for writing: {exc}") from exc
    logger.debug("Wrote %s", path)
    return path


def convert_markdown(text: str) -> str:
    """Full HTML page (TOC sidebar plus body) for a Markdown document."""
    body_html, headings = markdown_to_html(text)
    logger.debug("Found %d headings", len(headings))
    return render_page(page_title(headings), build_toc_html(headings), body_html)


def convert_file(
    markdown_path: str | Path,
    output_path: str | Path,
    *,
    encoding: str = ENCODING,
) -> GeneratedFiles:
    """Convert one Markdown file and write the page, stylesheet and script.

    The stylesheet and script go next to ``output_path``. Files written before
    a failure are left in place.
    """
    md_path = Path(markdown_path)
    out_path = Path(output_path)

    page = convert_markdown(read_markdown(md_path, encoding=encoding))

    out_dir = out_path.parent
    try:
        out_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise OutputFileError(f"Could not create output directory {out_dir}: {exc}") from exc

    return GeneratedFiles(
        html=write_output(out_path, page, encoding=encoding),
        css=write_output(out_dir / STYLESHEET_NAME, CSS, encoding=encoding),
        js=write_output(out_dir / SCRIPT_NAME, JS, encoding=encoding),
    )
