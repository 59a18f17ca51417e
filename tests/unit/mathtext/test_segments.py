"""
Unit tests for the segment model helpers
"""

from core.mathtext.segments import (
    MathMatch,
    Segment,
    SegmentType,
    has_math,
    merge_segments,
    segments_to_text,
)

TEXT = SegmentType.TEXT
MATH = SegmentType.MATH


class TestMergeSegments:
    """Test merge_segments"""

    def test_empty(self):
        assert merge_segments([]) == []

    def test_single_segment_unchanged(self):
        segments = [Segment(TEXT, "hello")]
        assert merge_segments(segments) == segments

    def test_merges_runs(self):
        segments = [
            Segment(TEXT, "a"),
            Segment(TEXT, "b"),
            Segment(MATH, "x"),
            Segment(MATH, "=1"),
            Segment(TEXT, "c"),
        ]
        assert merge_segments(segments) == [
            Segment(TEXT, "ab"),
            Segment(MATH, "x=1"),
            Segment(TEXT, "c"),
        ]

    def test_input_not_mutated(self):
        segments = [Segment(TEXT, "a"), Segment(TEXT, "b")]
        merge_segments(segments)
        assert segments == [Segment(TEXT, "a"), Segment(TEXT, "b")]

    def test_idempotent(self):
        segments = [
            Segment(MATH, "1"),
            Segment(MATH, "+2"),
            Segment(TEXT, " is "),
            Segment(MATH, "3"),
        ]
        once = merge_segments(segments)
        assert merge_segments(once) == once

    def test_preserves_text(self):
        segments = [Segment(TEXT, "a"), Segment(TEXT, "b"), Segment(MATH, "c")]
        assert segments_to_text(merge_segments(segments)) == "abc"


class TestSegmentHelpers:
    """Test has_math, segments_to_text and the dataclasses"""

    def test_has_math(self):
        assert has_math([Segment(TEXT, "a"), Segment(MATH, "x^2")]) is True
        assert has_math([Segment(TEXT, "a")]) is False
        assert has_math([]) is False

    def test_segments_to_text(self):
        assert segments_to_text([Segment(TEXT, "x is "), Segment(MATH, "5")]) == "x is 5"
        assert segments_to_text([]) == ""

    def test_to_dict(self):
        assert Segment(MATH, "x").to_dict() == {"type": "math", "content": "x"}

    def test_math_match_length(self):
        assert MathMatch(start=3, end=8, content="x = 5").length == 5
