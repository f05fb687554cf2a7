"""Module header extraction.

The header is the comment block at the very top of one file of the module
(`main.tf` unless told otherwise). Two shapes are recognised:

    # Line comments, `#` or `//`, one
    # per line, until the first non-comment line.

    /**
     * A block comment. A leading `* ` on each
     * inner line is decoration and is dropped.
     */
"""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)

_LINE_MARKERS = ("#", "//")


def load_header(path: str | Path, header_from: str = "main.tf") -> str:
    """Read the header of a module, or "" if it has none."""
    filename = Path(path) / header_from
    try:
        lines = filename.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        log.debug("No readable header file %s", filename)
        return ""

    # Skip leading blank lines
    while lines and not lines[0].strip():
        lines.pop(0)
    if not lines:
        return ""

    if lines[0].lstrip().startswith("/*"):
        header = _block_comment(lines)
    else:
        header = _line_comments(lines)
    return "\n".join(header).rstrip()


def _strip_line_marker(line: str) -> str | None:
    """Return the comment text of a line comment, None for any other line.

    Trailing whitespace is kept: two trailing spaces are a markdown line break.
    """
    stripped = line.lstrip()
    for marker in _LINE_MARKERS:
        if stripped.startswith(marker):
            text = stripped[len(marker) :]
            return text[1:] if text.startswith(" ") else text
    return None


def _line_comments(lines: list[str]) -> list[str]:
    header = []
    for line in lines:
        text = _strip_line_marker(line)
        if text is None:
            break
        header.append(text)
    return header


def _block_comment(lines: list[str]) -> list[str]:
    """Inner lines of a leading block comment, [] if it is never closed."""
    header = []
    closed = False
    for index, line in enumerate(lines):
        text = line.lstrip()
        if index == 0:
            text = text[2:].lstrip("*").lstrip()
        end = text.find("*/")
        if end != -1:
            text = text[:end].rstrip()
            closed = True
        if text.rstrip() == "*":
            text = ""
        elif text.startswith("* "):
            text = text[2:]
        if text or index > 0:
            header.append(text)
        if closed:
            break
    if not closed:
        return []
    # Drop blank lines left over from the opening/closing delimiters
    while header and not header[-1].strip():
        header.pop()
    while header and not header[0].strip():
        header.pop(0)
    return header
