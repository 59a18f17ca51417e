"""
Unit tests for the $...$ / $$...$$ content splitter
"""

from core.mathtext.delimited import DelimitedPart, split_delimited_math, strip_math_delimiters


def _kinds(parts):
    return [(p.kind, p.content) for p in parts]


class TestSplitDelimitedMath:
    """Test split_delimited_math"""

    def test_plain_text(self):
        assert _kinds(split_delimited_math("no math here")) == [("text", "no math here")]

    def test_empty(self):
        assert split_delimited_math("") == []

    def test_inline(self):
        parts = split_delimited_math(r"Area is $\pi r^2$.")
        assert _kinds(parts) == [
            ("text", "Area is "),
            ("inline", r"\pi r^2"),
            ("text", "."),
        ]
        assert parts[1].raw == r"$\pi r^2$"

    def test_block_then_inline(self):
        parts = split_delimited_math("Before $$ x^2 + 1 $$ after $y$")
        assert _kinds(parts) == [
            ("text", "Before "),
            ("block", "x^2 + 1"),
            ("text", " after "),
            ("inline", "y"),
        ]

    def test_inline_does_not_span_lines(self):
        parts = split_delimited_math("costs $5\nand $6")
        assert _kinds(parts) == [("text", "costs $5\nand $6")]

    def test_raw_round_trip(self):
        content = "Start $a$ mid $$\\frac{1}{2}$$ and $b+c$ end $$x$$"
        parts = split_delimited_math(content)
        assert "".join(p.raw for p in parts) == content
        assert [p.kind for p in parts if p.is_math] == ["inline", "block", "inline", "block"]

    def test_to_dict(self):
        part = DelimitedPart("inline", "x", "$x$")
        assert part.to_dict() == {"kind": "inline", "content": "x", "raw": "$x$"}


class TestStripMathDelimiters:
    """Test strip_math_delimiters"""

    def test_display_dollars(self):
        assert strip_math_delimiters("$$ x^2 $$") == "x^2"

    def test_inline_dollars(self):
        assert strip_math_delimiters("$x$") == "x"

    def test_brackets_and_parens(self):
        assert strip_math_delimiters(r"\[ E = mc^2 \]") == "E = mc^2"
        assert strip_math_delimiters(r"\(a\)") == "a"

    def test_no_delimiters(self):
        assert strip_math_delimiters("  x + 1 ") == "x + 1"
