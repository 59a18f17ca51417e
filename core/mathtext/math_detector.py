r"""
Math Detection Module

Detects mathematical expressions written in plain text and splits the text
into text/math segments, including:
- Explicit delimiters: $...$, \(...\)
- Function calls and powers: sqrt(x), (a+b)^2, x^{n+1}
- Fractions and equations: 3/4, a/b, x = 5, y = 2x + 1
- Greek letter names: alpha, theta, ...

Usage:
    >>> from core.mathtext.math_detector import detect_math_segments
    >>> detect_math_segments("solve x = 5 please")
    [Segment(text, 'solve '), Segment(math, 'x = 5'), Segment(text, ' please')]
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Pattern, Tuple

import regex

from config.constants import MIN_MATH_LENGTH
from .segments import MathMatch, Segment, SegmentType

logger = logging.getLogger(__name__)


# (pattern, ignore_case, note). Order matters: more specific patterns first.
MATH_PATTERN_TABLE: List[Tuple[str, bool, str]] = [
    # Explicit math delimiters
    (r'\$([^$]+)\$', False, '$...$'),
    (r'\\\(([^)]+)\\\)', False, r'\(...\)'),

    # Complex expressions
    (r'sqrt\s*\([^)]+\)', True, 'sqrt(...)'),
    (r'\([^)]+\)\s*\^', False, '(...)^'),
    (r'\w+\s*\^\s*\{[^}]+\}', False, 'x^{...}'),

    # Fractions
    (r'\d+\s*/\s*\d+', False, '1/2, 3/4'),
    (r'[a-z]\s*/\s*[a-z]', True, 'a/b'),

    # Equations with equals
    (r'[a-z]\s*=\s*-?\d+(?:\.\d+)?', True, 'x = 5, y = -3.5'),
    (r'\d+[a-z]\s*[+\-]\s*\d+\s*=\s*\d+', True, '3x + 2 = 5'),
    (r'[a-z]\s*=\s*\d*[a-z](?:\s*[+\-*/^]\s*\d*[a-z]?)*', True, 'y = 2x + 1, y = mx + b'),

    # Expressions with variables and operators
    (r'\d+[a-z]\s*\^\s*\d+', True, '3x^2'),
    (r'[a-z]\s*\^\s*\d+', True, 'x^2'),
    (r'\d+[a-z]\s*[+\-]\s*\d+', True, '3x + 2'),
    (r'[a-z]\s*[+\-*/]\s*\d+', True, 'x + 2'),
    (r'\d+\s*[+\-*/]\s*[a-z]', True, '2 + x'),

    # Greek letters
    (r'\b(alpha|beta|gamma|delta|epsilon|theta|lambda|mu|pi|sigma|phi|omega|tau|rho)\b',
     True, 'greek letter'),

    # Pure arithmetic powers
    (r'\d+\s*\^\s*\d+', False, '2^3'),
]

# Strings matching any of these are not treated as math
FALSE_POSITIVE_TABLE: List[Tuple[str, bool]] = [
    (r'^[A-Z]$', False),           # single capital letter (initials)
    (r'^I$', True),                # pronoun
    (r'^a$', True),                # article
    (r'\b[A-Za-z]+ing\b', False),
    (r'\b[A-Za-z]+tion\b', False),
    (r'\b[A-Za-z]+ly\b', False),   # adverbs
]

# Whitespace as browsers match \s, including no-break and ideographic spaces
WHITESPACE_CLASS = '[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]'

MATH_CHAR_PATTERN = regex.compile(r'[\d+\-*/=^]', regex.ASCII)
GREEK_WORD_PATTERN = regex.compile(
    r'\b(alpha|beta|gamma|delta|epsilon|theta|lambda|mu|pi|sigma|phi|omega)\b',
    regex.ASCII | regex.IGNORECASE
)
SINGLE_LETTER_PATTERN = regex.compile(r'^[a-zA-Z]$', regex.ASCII)


@dataclass
class MathPattern:
    """A compiled entry of the pattern table"""
    pattern: Pattern
    note: str


def _compile(source: str, ignore_case: bool) -> Pattern:
    # ASCII keeps \w, \d and \b to [A-Za-z0-9_]; \s still covers Unicode spaces
    source = source.replace(r'\s', WHITESPACE_CLASS)
    flags = regex.ASCII
    if ignore_case:
        flags |= regex.IGNORECASE
    return regex.compile(source, flags)


class MathDetector:
    """Detects math expressions in plain text"""

    def __init__(self, extra_patterns: Optional[Iterable[Tuple[str, bool, str]]] = None):
        """
        Initialize the math detector

        Args:
            extra_patterns: Additional (pattern, ignore_case, note) entries
                appended after the built-in table
        """
        table = list(MATH_PATTERN_TABLE)
        if extra_patterns:
            table.extend(extra_patterns)
        self.patterns = [MathPattern(_compile(src, ci), note) for src, ci, note in table]
        self.false_positive_patterns = [_compile(src, ci) for src, ci in FALSE_POSITIVE_TABLE]

    def is_false_positive(self, text: str) -> bool:
        """Check if a string is likely not math despite matching a pattern"""
        trimmed = text.strip()

        if len(trimmed) < MIN_MATH_LENGTH:
            return True

        for pattern in self.false_positive_patterns:
            if pattern.search(trimmed):
                return True

        # Single letters without operators
        return bool(SINGLE_LETTER_PATTERN.match(trimmed))

    def is_math_expression(self, text: str) -> bool:
        """
        Check if a standalone string looks like a math expression

        Args:
            text: String to classify

        Returns:
            True if it has a math character or Greek name and matches a pattern
        """
        if self.is_false_positive(text):
            return False

        trimmed = text.strip()
        if not (MATH_CHAR_PATTERN.search(trimmed) or GREEK_WORD_PATTERN.search(trimmed)):
            return False

        return any(entry.pattern.search(trimmed) for entry in self.patterns)

    def find_math_matches(self, text: str) -> List[MathMatch]:
        """
        Find all math spans in text

        Every pattern is run over the whole text. Overlapping hits are
        resolved left to right against the last kept hit: the longer span
        wins, ties keep the earlier one.

        Returns:
            Non-overlapping MathMatch objects sorted by start
        """
        matches: List[MathMatch] = []
        seen = set()

        for entry in self.patterns:
            for match in entry.pattern.finditer(text):
                start, end = match.span()
                if end <= start or (start, end) in seen:
                    continue
                # Check the capture group when the pattern has one
                candidate = match.group(1) if entry.pattern.groups and match.group(1) else match.group(0)
                if self.is_false_positive(candidate):
                    continue
                seen.add((start, end))
                matches.append(MathMatch(start=start, end=end, content=match.group(0)))

        matches.sort(key=lambda m: m.start)

        filtered: List[MathMatch] = []
        for match in matches:
            if not filtered or match.start >= filtered[-1].end:
                filtered.append(match)
            elif match.length > filtered[-1].length:
                filtered[-1] = match

        return filtered

    def detect_math_segments(self, text: str) -> List[Segment]:
        """
        Split text into text and math segments

        Args:
            text: Input text

        Returns:
            Ordered segments whose contents join back into text. Empty or
            blank input yields a single text segment.
        """
        if not text or not text.strip():
            return [Segment(SegmentType.TEXT, text)]

        math_matches = self.find_math_matches(text)
        if not math_matches:
            return [Segment(SegmentType.TEXT, text)]

        segments: List[Segment] = []
        last_end = 0

        for match in math_matches:
            if match.start > last_end:
                segments.append(Segment(SegmentType.TEXT, text[last_end:match.start]))
            segments.append(Segment(SegmentType.MATH, match.content))
            last_end = match.end

        if last_end < len(text):
            segments.append(Segment(SegmentType.TEXT, text[last_end:]))

        logger.debug("Detected %d math span(s) in %d chars", len(math_matches), len(text))
        return segments


_default_detector = MathDetector()


def is_math_expression(text: str) -> bool:
    """Check if a string looks like a math expression"""
    return _default_detector.is_math_expression(text)


def detect_math_segments(text: str) -> List[Segment]:
    """Detect and split text into segments of text and math"""
    return _default_detector.detect_math_segments(text)
