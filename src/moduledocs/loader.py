"""Module loading: parse a directory and assemble its documentation model."""

from __future__ import annotations

import logging
from pathlib import Path

from .header import load_header
from .inputs import load_inputs
from .models import Module
from .options import Options
from .outputs import load_outputs
from .parser import ParsedModule, load_module
from .providers import load_providers
from .sorting import sort_items

log = logging.getLogger(__name__)


def load_module_items(parsed: ParsedModule, options: Options) -> Module:
    """Extract header, inputs, outputs and providers from a parsed module.

    Raises:
        ValuesFileError: If output values were requested and cannot be read.
    """
    header = load_header(Path(parsed.path), options.header_from)
    inputs, _, _ = load_inputs(parsed)
    outputs = load_outputs(parsed, options)
    providers = load_providers(parsed)
    return Module(header=header, inputs=inputs, outputs=outputs, providers=providers)


def load_with_options(options: Options) -> Module:
    """Load the module at options.path and sort it per options.sort_by.

    Raises:
        InvalidOptionsError: If options cannot drive a load.
        PathNotFoundError: If the module directory does not exist.
        ParseError: If the module has no source files or fails to parse.
        ValuesFileError: If output values were requested and cannot be read.
    """
    options.validate_for_load()
    parsed = load_module(options.path)
    module = load_module_items(parsed, options)
    sort_items(module, options.sort_by)
    log.debug(
        "Loaded module %s: %d inputs, %d outputs, %d providers",
        options.path,
        len(module.inputs),
        len(module.outputs),
        len(module.providers),
    )
    return module
