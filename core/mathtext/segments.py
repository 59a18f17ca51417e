"""
Segment model shared by the math detectors.

A text is split into an ordered list of segments, each either natural
language or a math expression. Joining the segments' content in order
gives back the original text.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List


class SegmentType(Enum):
    """Classification of a span of text"""
    TEXT = "text"
    MATH = "math"


@dataclass
class Segment:
    """A contiguous span of text classified as text or math"""
    type: SegmentType
    content: str

    @property
    def is_math(self) -> bool:
        return self.type is SegmentType.MATH

    def to_dict(self) -> Dict[str, str]:
        return {"type": self.type.value, "content": self.content}

    def __repr__(self) -> str:
        preview = self.content[:40] + "..." if len(self.content) > 40 else self.content
        return f"Segment({self.type.value}, '{preview}')"


@dataclass
class MathMatch:
    """A half-open [start, end) span of the source text detected as math"""
    start: int
    end: int
    content: str

    @property
    def length(self) -> int:
        return self.end - self.start


def merge_segments(segments: List[Segment]) -> List[Segment]:
    """
    Merge adjacent segments of the same type.

    The input list and its segments are left untouched.
    """
    if len(segments) <= 1:
        return segments

    merged: List[Segment] = []
    for segment in segments:
        if merged and merged[-1].type is segment.type:
            merged[-1] = Segment(segment.type, merged[-1].content + segment.content)
        else:
            merged.append(Segment(segment.type, segment.content))

    return merged


def segments_to_text(segments: List[Segment]) -> str:
    """Convert segments back to plain text"""
    return "".join(segment.content for segment in segments)


def has_math(segments: List[Segment]) -> bool:
    """Check if segments contain any math"""
    return any(segment.is_math for segment in segments)
