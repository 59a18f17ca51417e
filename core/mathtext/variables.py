"""
Variable extraction for the math editor sidebar.

Scans editor lines for math segments and collects the variables they
define or use with a subscript/superscript, then fills up with the common
variables (x, y, z, n, i).
"""

import logging
from dataclasses import dataclass, asdict
from typing import Iterable, List, Optional

import regex

from config.constants import MATH_MAX_VARIABLES
from .math_detector import detect_math_segments

logger = logging.getLogger(__name__)

# A letter followed by "=", "_" or "^"
VARIABLE_PATTERN = regex.compile(r'([a-zA-Z])(?:\s*=|_|\^)', regex.ASCII)
GRAPHABLE_PATTERN = regex.compile(r'[xy]')


@dataclass
class MathVariable:
    symbol: str
    description: str
    color: Optional[str] = None

    def to_dict(self) -> dict:
        return asdict(self)


COMMON_VARIABLES = [
    MathVariable('x', 'Variable x', 'text-blue-500'),
    MathVariable('y', 'Variable y', 'text-green-500'),
    MathVariable('z', 'Variable z', 'text-purple-500'),
    MathVariable('n', 'Integer n', 'text-orange-500'),
    MathVariable('i', 'Index variable', 'text-cyan-500'),
]


def _common(symbol: str) -> Optional[MathVariable]:
    for variable in COMMON_VARIABLES:
        if variable.symbol == symbol:
            return variable
    return None


def extract_variables(lines: Iterable[str], limit: int = MATH_MAX_VARIABLES) -> List[MathVariable]:
    """
    Collect variables from the math segments of each line

    Args:
        lines: Editor lines in document order
        limit: Maximum number of variables returned

    Returns:
        Variables in first-seen order, followed by unused common variables
    """
    variables: List[MathVariable] = []
    seen = set()

    for index, line in enumerate(lines):
        for segment in detect_math_segments(line):
            if not segment.is_math:
                continue
            for match in VARIABLE_PATTERN.finditer(segment.content):
                symbol = match.group(1)
                if symbol in seen:
                    continue
                seen.add(symbol)
                common = _common(symbol)
                variables.append(MathVariable(
                    symbol=symbol,
                    description=common.description if common else f"Defined in line {index + 1}",
                    color=common.color if common else None,
                ))

    for common in COMMON_VARIABLES:
        if common.symbol not in seen:
            seen.add(common.symbol)
            variables.append(MathVariable(common.symbol, common.description, common.color))

    logger.debug("Extracted %d variable(s)", len(variables))
    return variables[:max(limit, 0)]


def graphable_equations(lines: Iterable[str]) -> List[str]:
    """Math segments that mention x or y, in document order"""
    equations = []
    for line in lines:
        for segment in detect_math_segments(line):
            if segment.is_math and GRAPHABLE_PATTERN.search(segment.content):
                equations.append(segment.content)
    return equations
