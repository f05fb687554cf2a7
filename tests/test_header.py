"""Tests for module header extraction."""

from moduledocs import load_header

FULL_EXAMPLE_HEADER = (
    "Example of 'foo_bar' module in `foo_bar.tf`.\n"
    "\n"
    "- list item 1\n"
    "- list item 2\n"
    "\n"
    "Even inline **formatting** in _here_ is possible.\n"
    "and some [link](https://domain.com/)"
)


class TestLineCommentHeader:
    def test_full_example(self, testdata):
        """Markdown and blank comment lines are kept verbatim."""
        assert load_header(testdata / "full-example") == FULL_EXAMPLE_HEADER

    def test_header_missing(self, testdata):
        """A file that starts with code has no header."""
        assert load_header(testdata / "empty-header") == ""

    def test_module_missing(self, testdata):
        """A missing directory is not an error."""
        assert load_header(testdata / "non-exist") == ""

    def test_header_file_missing(self, testdata):
        """Modules without the header file have no header."""
        assert load_header(testdata / "no-required-inputs") == ""

    def test_stops_at_blank_line(self, write_module):
        path = write_module(
            {"main.tf": "# First\n# Second\n\n# Not header\nlocals {\n  a = 1\n}\n"}
        )
        assert load_header(path) == "First\nSecond"

    def test_double_slash_comments(self, write_module):
        path = write_module({"main.tf": "// One\n//   - indented\n//\n// Two\n"})
        assert load_header(path) == "One\n  - indented\n\nTwo"

    def test_leading_blank_lines_skipped(self, write_module):
        path = write_module({"main.tf": "\n\n# Title\n"})
        assert load_header(path) == "Title"


class TestBlockCommentHeader:
    def test_block_header(self, testdata):
        """Decorated block comments lose their `* ` prefix only."""
        expected = (
            "# Block Header\n"
            "\n"
            "Usage:\n"
            "\n"
            "- first\n"
            "  - nested\n"
            "\n"
            "Some **bold** text."
        )
        assert load_header(testdata / "block-header") == expected

    def test_single_line_block(self, write_module):
        path = write_module({"main.tf": "/* Just one line */\n"})
        assert load_header(path) == "Just one line"

    def test_undecorated_block(self, write_module):
        path = write_module({"main.tf": "/*\nPlain\n\ntext\n*/\n"})
        assert load_header(path) == "Plain\n\ntext"


class TestHeaderFrom:
    def test_custom_header_file(self, write_module):
        """The header file is a parameter, not a fixed name."""
        path = write_module({"main.tf": "# Main\n", "docs.tf": "# From docs\n"})
        assert load_header(path, header_from="docs.tf") == "From docs"
        assert load_header(path) == "Main"


class TestHeaderEdgeCases:
    def test_undecodable_file(self, tmp_path):
        (tmp_path / "main.tf").write_bytes(b"# caf\xe9\nlocals {\n}\n")
        assert load_header(tmp_path) == ""

    def test_trailing_spaces_kept(self, write_module):
        """Two trailing spaces are a markdown line break."""
        path = write_module({"main.tf": "# First  \n# Second\n"})
        assert load_header(path) == "First  \nSecond"

    def test_block_trailing_spaces_kept(self, write_module):
        path = write_module({"main.tf": "/**\n * First  \n * Second\n */\n"})
        assert load_header(path) == "First  \nSecond"

    def test_unclosed_block_comment(self, write_module):
        path = write_module({"main.tf": '/**\n * Never closed\n\nvariable "x" {\n}\n'})
        assert load_header(path) == ""
