"""HCL parsing for module directories.

Wraps python-hcl2 so the extractors work on flat `Block` records with
positions and never see the parser's nested dict layout.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator

import hcl2
from lark.exceptions import LarkError

from .errors import ParseError, PathNotFoundError
from .models import Position

log = logging.getLogger(__name__)

_START_LINE = "__start_line__"
_INTERPOLATION = re.compile(r"^\$\{(.*)\}$", re.DOTALL)


@dataclass
class Block:
    """One top-level block, e.g. `resource "aws_instance" "web" { ... }`."""

    kind: str  # "variable" | "output" | "resource" | "data" | "terraform" | ...
    labels: list[str]
    body: dict[str, Any]
    position: Position


@dataclass
class ParsedModule:
    """All blocks of a module directory in (filename, line) order."""

    path: str
    files: list[str] = field(default_factory=list)
    blocks: list[Block] = field(default_factory=list)

    def blocks_of(self, *kinds: str) -> list[Block]:
        return [b for b in self.blocks if b.kind in kinds]


def load_module(path: str | Path) -> ParsedModule:
    """Parse every `*.tf` file in a module directory.

    Raises:
        PathNotFoundError: If path does not exist or is not a directory.
        ParseError: If there are no source files or any file fails to parse.
    """
    root = Path(path)
    if not root.is_dir():
        raise PathNotFoundError(f"module directory not found: {root}", str(root))

    sources = sorted(p for p in root.glob("*.tf") if p.is_file())
    if not sources:
        raise ParseError(f"no module source files in {root}", str(root))

    module = ParsedModule(path=str(root))
    for source in sources:
        module.files.append(str(source))
        module.blocks.extend(_parse_file(source))

    module.blocks.sort(key=lambda b: (b.position.filename, b.position.line))
    log.debug(
        "Parsed %d blocks from %d files in %s", len(module.blocks), len(sources), root
    )
    return module


def _parse_file(source: Path) -> list[Block]:
    try:
        content = source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"Failed to read {source}: {e}", str(source)) from e
    try:
        parsed = hcl2.loads(content, with_meta=True)
    except LarkError as e:
        raise ParseError(
            f"Failed to parse {source}: {e.__class__.__name__}: {e}", str(source)
        ) from e

    blocks = []
    for kind, entries in parsed.items():
        if not isinstance(entries, list):
            # Top-level attributes are not blocks
            continue
        for entry in entries:
            if isinstance(entry, dict):
                blocks.extend(_flatten(kind, [], entry, str(source)))
    return blocks


def _is_meta(key: Any) -> bool:
    # Parser bookkeeping such as __start_line__ / __end_line__
    return isinstance(key, str) and key.startswith("__") and key.endswith("__")


def _flatten(
    kind: str, labels: list[str], node: dict[str, Any], filename: str
) -> Iterator[Block]:
    """Walk block labels down to the body, which carries the line metadata."""
    if _START_LINE in node:
        body = {k: v for k, v in node.items() if not _is_meta(k)}
        yield Block(kind, labels, body, Position(filename, node[_START_LINE]))
        return
    for label, child in node.items():
        if isinstance(child, dict):
            yield from _flatten(kind, labels + [unquote(label)], child, filename)


def unquote(value: Any) -> Any:
    """Normalise a parsed scalar to its source text.

    Strings may come back quoted (`"foo"`) or wrapped as an expression
    (`${string}`) depending on the parser release; both are unwrapped.
    Containers are normalised recursively. Nothing is evaluated.
    """
    if isinstance(value, list):
        return [unquote(v) for v in value]
    if isinstance(value, dict):
        return {unquote(k): unquote(v) for k, v in value.items() if not _is_meta(k)}
    if not isinstance(value, str):
        return value
    if len(value) >= 2 and value[0] == '"' and value[-1] == '"':
        value = value[1:-1]
    match = _INTERPOLATION.match(value)
    if match and "${" not in match.group(1):
        return match.group(1)
    return value


def attribute(block: Block, name: str, default: Any = None) -> Any:
    """Get a normalised attribute value from a block body."""
    if name not in block.body:
        return default
    return unquote(block.body[name])
