"""Output extraction and value enrichment."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .comments import load_comments
from .errors import ValuesFileError
from .models import Output
from .options import Options
from .parser import ParsedModule, attribute

log = logging.getLogger(__name__)

SENSITIVE_VALUE = "<sensitive>"


def load_output_values(path: str | Path) -> dict[str, Any]:
    """Read a JSON object mapping output names to values.

    Raises:
        ValuesFileError: If the file is missing, unreadable, not JSON, or not
            a JSON object.
    """
    try:
        content = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ValuesFileError(f"cannot read output values from {path}: {e}", str(path)) from e

    try:
        values = json.loads(content)
    except json.JSONDecodeError as e:
        raise ValuesFileError(f"invalid JSON in {path}: {e}", str(path)) from e

    if not isinstance(values, dict):
        raise ValuesFileError(
            f"output values in {path} must be a JSON object, got {type(values).__name__}",
            str(path),
        )
    return values


def _is_terraform_output(entry: Any) -> bool:
    # `terraform output -json` wraps each value: {"sensitive": .., "type": .., "value": ..}
    return isinstance(entry, dict) and "value" in entry and set(entry) <= {
        "sensitive",
        "type",
        "value",
    }


def _resolve_value(output: Output, values: dict[str, Any]) -> Any:
    entry = values.get(output.name)
    sensitive = output.sensitive
    if _is_terraform_output(entry):
        sensitive = sensitive or bool(entry.get("sensitive"))
        entry = entry["value"]
    if sensitive and output.name in values:
        return SENSITIVE_VALUE
    return entry


def load_outputs(parsed: ParsedModule, options: Options) -> list[Output]:
    """Extract outputs in source order, enriching them with values if requested.

    When options.output_values is set the values document is always read,
    even for a module without outputs.

    Raises:
        ValuesFileError: If values were requested and the document is unusable.
    """
    values = None
    if options.output_values:
        values = load_output_values(options.output_values_path)

    outputs = []
    for block in parsed.blocks_of("output"):
        if not block.labels:
            continue
        description = attribute(block, "description")
        if description is None:
            description = load_comments(block.position.filename, block.position.line)
        output = Output(
            name=block.labels[0],
            description=description,
            sensitive=attribute(block, "sensitive") in (True, "true"),
            position=block.position,
        )
        if values is not None:
            output.show_value = True
            output.value = _resolve_value(output, values)
        outputs.append(output)

    log.debug("Loaded %d outputs (values: %s)", len(outputs), options.output_values)
    return outputs
