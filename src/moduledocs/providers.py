"""Provider extraction from resource and data blocks."""

from __future__ import annotations

import logging
from typing import Any

from .models import Provider
from .parser import ParsedModule, attribute, unquote

log = logging.getLogger(__name__)


def _required_providers(parsed: ParsedModule) -> dict[str, dict[str, Any]]:
    """Collect `terraform { required_providers { ... } }` entries by name."""
    required: dict[str, dict[str, Any]] = {}
    for block in parsed.blocks_of("terraform"):
        entries = unquote(block.body.get("required_providers", []))
        if isinstance(entries, dict):
            entries = [entries]
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            for name, requirement in entry.items():
                if isinstance(requirement, dict):
                    required[name] = requirement
                else:
                    # Legacy form: aws = "~> 2.0"
                    required[name] = {"version": requirement}
    return required


def _provider_of(labels: list[str], explicit: str | None) -> tuple[str, str | None]:
    """Resolve (name, alias) from the provider meta-argument or resource type."""
    if explicit:
        name, _, alias = explicit.partition(".")
        return name, alias or None
    return labels[0].split("_", 1)[0], None


def load_providers(parsed: ParsedModule) -> list[Provider]:
    """Extract the providers used by the module, first occurrence wins."""
    required = _required_providers(parsed)
    discovered: dict[str, Provider] = {}

    for block in parsed.blocks_of("resource", "data"):
        if not block.labels:
            continue
        name, alias = _provider_of(block.labels, attribute(block, "provider"))
        requirement = required.get(name, {})
        provider = Provider(
            name=name,
            alias=alias,
            source=requirement.get("source"),
            version=requirement.get("version"),
            position=block.position,
        )
        discovered.setdefault(provider.identity, provider)

    log.debug("Loaded %d providers", len(discovered))
    return list(discovered.values())
