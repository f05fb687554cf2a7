"""Shared pytest configuration for moduledocs tests."""

from pathlib import Path

import pytest
from moduledocs import load_module

TESTDATA = Path(__file__).parent / "testdata"


@pytest.fixture
def testdata() -> Path:
    """Directory holding the fixture modules."""
    return TESTDATA


@pytest.fixture
def parsed_module():
    """
    Factory fixture that parses a fixture module by name.

    Example:
        def test_inputs(parsed_module):
            inputs, required, optional = load_inputs(parsed_module("full-example"))
    """

    def _parse(name: str):
        return load_module(TESTDATA / name)

    return _parse


@pytest.fixture
def write_module(tmp_path):
    """
    Factory fixture that writes a throwaway module and returns its directory.

    Example:
        def test_alias(write_module):
            path = write_module({"main.tf": 'resource "aws_vpc" "a" {\\n  cidr_block = "x"\\n}\\n'})
    """

    def _write(files: dict[str, str]) -> Path:
        for name, content in files.items():
            (tmp_path / name).write_text(content)
        return tmp_path

    return _write
