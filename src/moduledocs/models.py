"""Data models for module documentation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Position:
    """Where a declaration starts."""

    filename: str
    line: int  # 1-based


@dataclass
class Input:
    """A declared variable of the module."""

    name: str
    type: str = "any"  # Textual, never evaluated
    description: str = ""
    default: Any = None
    has_default: bool = False  # `default = null` still counts as declared
    position: Position | None = None

    @property
    def required(self) -> bool:
        return not self.has_default


@dataclass
class Output:
    """A declared output of the module."""

    name: str
    description: str = ""
    sensitive: bool = False
    show_value: bool = False
    value: Any = None  # Only meaningful when show_value is set
    position: Position | None = None


@dataclass
class Provider:
    """A provider used by the module's resources."""

    name: str
    alias: str | None = None
    source: str | None = None
    version: str | None = None
    position: Position | None = None

    @property
    def identity(self) -> str:
        """`name` or `name.alias`; providers are deduplicated by this key."""
        if self.alias:
            return f"{self.name}.{self.alias}"
        return self.name


@dataclass
class Module:
    """Documentation model of one module directory.

    `required_inputs` and `optional_inputs` are views filtered from `inputs`,
    so reordering `inputs` reorders them as well.
    """

    header: str = ""
    inputs: list[Input] = field(default_factory=list)
    outputs: list[Output] = field(default_factory=list)
    providers: list[Provider] = field(default_factory=list)

    @property
    def required_inputs(self) -> list[Input]:
        return [i for i in self.inputs if i.required]

    @property
    def optional_inputs(self) -> list[Input]:
        return [i for i in self.inputs if not i.required]

    def has_header(self) -> bool:
        return bool(self.header)

    def has_inputs(self) -> bool:
        return bool(self.inputs)

    def has_required_inputs(self) -> bool:
        return bool(self.required_inputs)

    def has_optional_inputs(self) -> bool:
        return bool(self.optional_inputs)

    def has_outputs(self) -> bool:
        return bool(self.outputs)

    def has_providers(self) -> bool:
        return bool(self.providers)
