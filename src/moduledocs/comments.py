"""Line-addressed comment lookup.

Recovers the `#` / `//` comment block written directly above a declaration.
This works on raw text below the parser, so it is usable for any block the
parser reports a line for, named or not.
"""

from __future__ import annotations

import logging
from pathlib import Path

log = logging.getLogger(__name__)


def _is_comment(line: str) -> bool:
    return line.startswith("#") or line.startswith("//")


def _comment_text(line: str) -> str:
    if line.startswith("#"):
        line = line[1:]
    elif line.startswith("//"):
        line = line[2:]
    return line.strip()


def load_comments(filename: str | Path, line_number: int) -> str:
    """Return the comments immediately preceding a 1-based line, space-joined.

    Returns "" if the file cannot be read, the line is out of range, or the
    line above is not a comment.
    """
    try:
        lines = Path(filename).read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError):
        log.debug("Cannot read %s for comment lookup", filename)
        return ""

    if line_number < 1 or line_number > len(lines):
        return ""

    comment = []
    for line in reversed(lines[: line_number - 1]):
        line = line.strip()
        if not _is_comment(line):
            break
        comment.append(_comment_text(line))
    comment.reverse()
    return " ".join(c for c in comment if c)
