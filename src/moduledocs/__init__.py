"""moduledocs - Documentation model extraction for HCL modules."""

from moduledocs.comments import load_comments
from moduledocs.errors import (
    InvalidOptionsError,
    LoadError,
    ParseError,
    PathNotFoundError,
    ValuesFileError,
)
from moduledocs.header import load_header
from moduledocs.inputs import load_inputs
from moduledocs.loader import load_module_items, load_with_options
from moduledocs.models import Input, Module, Output, Position, Provider
from moduledocs.options import Options, SortBy
from moduledocs.outputs import load_output_values, load_outputs
from moduledocs.parser import load_module
from moduledocs.providers import load_providers
from moduledocs.sorting import sort_items

__all__ = [
    "Input",
    "InvalidOptionsError",
    "LoadError",
    "Module",
    "Options",
    "Output",
    "ParseError",
    "PathNotFoundError",
    "Position",
    "Provider",
    "SortBy",
    "ValuesFileError",
    "load_comments",
    "load_header",
    "load_inputs",
    "load_module",
    "load_module_items",
    "load_output_values",
    "load_outputs",
    "load_providers",
    "load_with_options",
    "sort_items",
]
