"""Input variable extraction and required/optional classification."""

from __future__ import annotations

import logging

from .models import Input
from .parser import ParsedModule, attribute

log = logging.getLogger(__name__)


def load_inputs(
    parsed: ParsedModule,
) -> tuple[list[Input], list[Input], list[Input]]:
    """Extract variables in source order.

    Returns:
        (inputs, required, optional) where required and optional are
        order-preserving sub-sequences of inputs. An input is required iff
        it declares no default.
    """
    inputs = []
    for block in parsed.blocks_of("variable"):
        if not block.labels:
            continue
        inputs.append(
            Input(
                name=block.labels[0],
                type=attribute(block, "type") or "any",
                description=attribute(block, "description") or "",
                default=attribute(block, "default"),
                has_default="default" in block.body,
                position=block.position,
            )
        )

    required = [i for i in inputs if i.required]
    optional = [i for i in inputs if not i.required]
    log.debug(
        "Loaded %d inputs (%d required, %d optional)",
        len(inputs),
        len(required),
        len(optional),
    )
    return inputs, required, optional
