"""
Math Text Module

Plain-text math handling for the whiteboard and tutor chat:
- Math segment detection in free-form text
- Plain notation <-> LaTeX conversion
- $...$ / $$...$$ splitting of chat content
- Variable extraction for the editor sidebar
"""

from .segments import Segment, SegmentType, MathMatch, merge_segments, has_math, segments_to_text
from .math_detector import MathDetector, detect_math_segments, is_math_expression
from .plain_to_latex import to_latex, from_latex, is_latex, normalize_latex
from .delimited import DelimitedPart, split_delimited_math, strip_math_delimiters
from .variables import MathVariable, extract_variables, graphable_equations

__all__ = [
    # Segments
    'Segment',
    'SegmentType',
    'MathMatch',
    'merge_segments',
    'has_math',
    'segments_to_text',
    # Detection
    'MathDetector',
    'detect_math_segments',
    'is_math_expression',
    # Conversion
    'to_latex',
    'from_latex',
    'is_latex',
    'normalize_latex',
    # Chat content
    'DelimitedPart',
    'split_delimited_math',
    'strip_math_delimiters',
    # Editor
    'MathVariable',
    'extract_variables',
    'graphable_equations',
]
