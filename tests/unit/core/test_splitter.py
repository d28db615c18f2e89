"""Tests for the subtitle text splitting policy."""

import pytest

from srtshift.core.splitter import divide_text

pytestmark = pytest.mark.unit


class TestDivideText:
    """Test divide_text function."""

    @pytest.mark.parametrize(
        ("text", "left", "right"),
        [
            ("A\nB\n", "A\n", "A\n"),
            ("A\nB\nC\n", "A\n", "B\n"),
            ("A\nB\nC\nD\n", "A\n", "BC\n"),
            ("A\nB\nC\nD\nE\n", "AB\n", "CD\n"),
            ("A\nB\nC\nD\nE\nF\n", "ABC\n", "DEF\n"),
            ("A\nB\nC\nD\nE\nF\nG\n", "A\n", "BCDEFG\n"),
        ],
    )
    def test_divides_by_line_count(self, text, left, right):
        """Should apply the fixed line-count table."""
        assert divide_text(text) == (left, right)

    def test_single_line_goes_left(self):
        """Single-line text keeps its line on the left and leaves right empty."""
        assert divide_text("Hello\n") == ("Hello\n", "\n")

    def test_empty_text(self):
        """Empty text yields two bare newlines."""
        assert divide_text("") == ("\n", "\n")

    def test_without_trailing_newline(self):
        """A missing final newline does not change the line count."""
        assert divide_text("A\nB\nC") == ("A\n", "B\n")

    def test_handles_crlf_line_endings(self):
        """Should treat CRLF as a single line break."""
        assert divide_text("Hello\r\nBonjour\r\n!\r\n") == ("Hello\n", "Bonjour\n")

    def test_bilingual_three_line_entry(self):
        """Should separate the two language lines of a bilingual entry."""
        left, right = divide_text("Hello\n你好\n(greeting)\n")

        assert left == "Hello\n"
        assert right == "你好\n"

    def test_each_side_has_exactly_one_trailing_newline(self):
        """Grouped lines are joined without separators."""
        for count in range(0, 10):
            text = "".join(f"{i}\n" for i in range(count))
            left, right = divide_text(text)

            assert left.endswith("\n") and left.count("\n") == 1
            assert right.endswith("\n") and right.count("\n") == 1
