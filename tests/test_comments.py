"""Tests for line-addressed comment lookup."""

import pytest
from moduledocs import load_comments


@pytest.mark.parametrize(
    "path, filename, line_number, expected",
    [
        ("full-example", "variables.tf", 2, "D description"),
        ("full-example", "variables.tf", 16, "A Description in multiple lines"),
        ("full-example", "variables.tf", 6, ""),
        ("full-example", "variables.tf", 100, ""),
        ("full-example", "variables.tf", 0, ""),
        ("full-example", "variables.tf", 1, ""),
        ("full-example", "non-exist.tf", 5, ""),
        ("non-exist", "variables.tf", 5, ""),
    ],
)
def test_load_comments(testdata, path, filename, line_number, expected):
    assert load_comments(testdata / path / filename, line_number) == expected


class TestCommentStyles:
    def test_double_slash(self, write_module):
        path = write_module({"main.tf": '// Bucket\n// for logs\nresource "a" "b" {\n}\n'})
        assert load_comments(path / "main.tf", 3) == "Bucket for logs"

    def test_blank_line_breaks_block(self, write_module):
        """Only comments directly above the line count."""
        path = write_module({"main.tf": "# orphan\n\nlocals {\n}\n"})
        assert load_comments(path / "main.tf", 3) == ""

    def test_code_line_breaks_block(self, write_module):
        path = write_module({"main.tf": "# first\na = 1\n# second\nb = 2\n"})
        assert load_comments(path / "main.tf", 4) == "second"

    def test_indented_comments(self, write_module):
        path = write_module({"main.tf": "  #  spaced out  \nb = 2\n"})
        assert load_comments(path / "main.tf", 2) == "spaced out"

    def test_undecodable_file(self, tmp_path):
        source = tmp_path / "main.tf"
        source.write_bytes(b'# caf\xe9\nvariable "x" {\n}\n')
        assert load_comments(source, 2) == ""
