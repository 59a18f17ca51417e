"""
Pytest configuration and shared fixtures for the whiteboard math tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from core.mathtext import MathDetector


# ============================================================================
# Fixtures: Detectors
# ============================================================================

@pytest.fixture
def detector():
    """Create a MathDetector with the built-in pattern table."""
    return MathDetector()


# ============================================================================
# Fixtures: Sample Data
# ============================================================================

@pytest.fixture
def sample_texts():
    """Mixed prose/math strings used for round-trip checks."""
    return [
        "",
        "   ",
        "Hello world",
        "solve x = 5 please",
        "y = 2x + 1",
        "The answer is $x+1$ today",
        "take sqrt(16) now",
        "add 1/2 and 3/4, then 2^3",
        "the angle theta is small",
        "($ab$)^2",
        "Let x = 3 and y = 4.\nThen x + y = 7",
        r"inline \(a+b\) and x^{n+1}",
        "émoji ✏️ and 3x + 2 = 5 ünïcode",
    ]
