r"""
Delimited Math Splitter

Splits chat or tutor content into text, inline math ($...$) and block math
($$...$$) parts so a LaTeX renderer can typeset the math and leave the
prose alone. Block math is located first; the text between blocks is then
scanned for inline math.

Usage:
    >>> from core.mathtext.delimited import split_delimited_math
    >>> [p.kind for p in split_delimited_math("Area is $\\pi r^2$.")]
    ['text', 'inline', 'text']
"""

import logging
from dataclasses import dataclass
from typing import List

import regex

logger = logging.getLogger(__name__)

BLOCK_MATH_PATTERN = regex.compile(r'\$\$([^$]+)\$\$')
# Single $ pairs on one line, never touching a $$
INLINE_MATH_PATTERN = regex.compile(r'(?<!\$)\$(?!\$)([^$\n]+)\$(?!\$)')


@dataclass
class DelimitedPart:
    """
    A piece of delimited content.

    Attributes:
        kind: "text", "inline" or "block"
        content: Text as is, or the trimmed LaTeX inside the delimiters
        raw: Exact source span, delimiters included
    """
    kind: str
    content: str
    raw: str

    @property
    def is_math(self) -> bool:
        return self.kind != 'text'

    def to_dict(self) -> dict:
        return {'kind': self.kind, 'content': self.content, 'raw': self.raw}


def _split_inline(text: str) -> List[DelimitedPart]:
    parts = []
    position = 0
    for match in INLINE_MATH_PATTERN.finditer(text):
        if match.start() > position:
            chunk = text[position:match.start()]
            parts.append(DelimitedPart('text', chunk, chunk))
        parts.append(DelimitedPart('inline', match.group(1).strip(), match.group(0)))
        position = match.end()

    if position < len(text):
        chunk = text[position:]
        parts.append(DelimitedPart('text', chunk, chunk))

    return parts


def split_delimited_math(content: str) -> List[DelimitedPart]:
    """
    Split content on $$...$$ and $...$ delimiters

    Args:
        content: Chat message or note text

    Returns:
        Parts in source order; joining their raw fields gives content back
    """
    parts: List[DelimitedPart] = []
    position = 0

    for match in BLOCK_MATH_PATTERN.finditer(content):
        if match.start() > position:
            parts.extend(_split_inline(content[position:match.start()]))
        parts.append(DelimitedPart('block', match.group(1).strip(), match.group(0)))
        position = match.end()

    parts.extend(_split_inline(content[position:]))

    logger.debug("Split %d chars into %d delimited parts", len(content), len(parts))
    return parts


def strip_math_delimiters(text: str) -> str:
    """
    Remove one pair of math delimiters: $$...$$, $...$, \\[...\\] or \\(...\\)

    Text without delimiters is returned trimmed.
    """
    s = text.strip()

    if len(s) >= 4 and s.startswith('$$') and s.endswith('$$'):
        return s[2:-2].strip()
    if len(s) >= 4 and ((s.startswith('\\[') and s.endswith('\\]'))
                        or (s.startswith('\\(') and s.endswith('\\)'))):
        return s[2:-2].strip()
    if len(s) >= 2 and s.startswith('$') and s.endswith('$'):
        return s[1:-1].strip()

    return s
