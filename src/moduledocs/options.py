"""Options governing how a module is loaded.

Example:
    options = Options().with_options(Options(path="modules/vpc"))
    options = options.with_options({"sort_by": {"name": True}})
    module = load_with_options(options)
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidOptionsError


class SortBy(BaseModel):
    """Sort policy. Both axes off keeps source order."""

    model_config = ConfigDict(extra="forbid")

    name: bool = False
    required: bool = False


class Options(BaseModel):
    """Load options.

    Attributes:
        path: Module directory
        header_from: File (relative to path) whose leading comment is the header
        output_values: Enrich outputs with values from output_values_path
        output_values_path: JSON document of output values
        sort_by: Sort policy applied after extraction
    """

    model_config = ConfigDict(extra="forbid")

    path: str = "."
    header_from: str = "main.tf"
    output_values: bool = False
    output_values_path: str = ""
    sort_by: SortBy = Field(default_factory=SortBy)

    def with_options(self, override: Options | dict[str, Any] | None) -> Options:
        """Return new options with the explicitly set fields of override applied.

        Fields left at their defaults on override do not replace values on
        self; nested sort_by fields merge the same way.

        Raises:
            InvalidOptionsError: If override is None or not a valid options set.
        """
        if override is None:
            raise InvalidOptionsError("cannot use None as override value")
        if isinstance(override, dict):
            try:
                override = Options.model_validate(override)
            except ValueError as e:
                raise InvalidOptionsError(f"invalid options override: {e}") from e

        merged = _deep_merge(
            self.model_dump(exclude_unset=True),
            override.model_dump(exclude_unset=True),
        )
        return Options.model_validate(merged)

    def validate_for_load(self) -> None:
        """Raise InvalidOptionsError if these options cannot drive a load."""
        if self.output_values and not self.output_values_path:
            raise InvalidOptionsError(
                "output_values_path must be set when output_values is enabled",
                self.path,
            )


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
