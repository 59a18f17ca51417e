"""
Unit tests for sidebar variable extraction
"""

from core.mathtext.variables import COMMON_VARIABLES, extract_variables, graphable_equations


class TestExtractVariables:
    """Test extract_variables"""

    def test_collects_defined_variables_first(self):
        variables = extract_variables(["x = 5", "y = 2x + 1", "k^2"])
        assert [v.symbol for v in variables] == ["x", "y", "k", "z", "n", "i"]

    def test_descriptions(self):
        variables = extract_variables(["x = 5", "then k^2"])
        by_symbol = {v.symbol: v for v in variables}
        assert by_symbol["x"].description == "Variable x"
        assert by_symbol["x"].color == "text-blue-500"
        assert by_symbol["k"].description == "Defined in line 2"
        assert by_symbol["k"].color is None

    def test_limit(self):
        assert [v.symbol for v in extract_variables(["x = 5", "y = 2x + 1"], limit=2)] == ["x", "y"]

    def test_no_lines_gives_common_variables(self):
        variables = extract_variables([])
        assert [v.symbol for v in variables] == [c.symbol for c in COMMON_VARIABLES]

    def test_prose_lines_ignored(self):
        variables = extract_variables(["Hello world", "a quick note"])
        assert [v.symbol for v in variables] == ["x", "y", "z", "n", "i"]

    def test_common_table_not_mutated(self):
        extract_variables(["x = 5"])
        assert COMMON_VARIABLES[0].description == "Variable x"


class TestGraphableEquations:
    """Test graphable_equations"""

    def test_only_x_or_y(self):
        assert graphable_equations(["x = 5", "k^2", "hello", "y = 2x + 1"]) == ["x = 5", "y = 2x + 1"]

    def test_empty(self):
        assert graphable_equations([]) == []
