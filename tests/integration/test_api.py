"""
Integration tests for API endpoints (api/main.py)
"""
import pytest
from fastapi.testclient import TestClient
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from api.main import app
from config.constants import LASSO_MAX_POINTS
from config.settings import settings


@pytest.fixture(scope="module")
def client():
    """Create a test client."""
    return TestClient(app)


class TestAPIBasics:
    """Test basic API functionality."""

    def test_health_check(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestMathEndpoints:
    """Test /api/math endpoints."""

    def test_segments(self, client):
        response = client.post("/api/math/segments", json={"text": "solve x = 5 please"})
        assert response.status_code == 200
        data = response.json()
        assert data["has_math"] is True
        assert data["segments"] == [
            {"type": "text", "content": "solve "},
            {"type": "math", "content": "x = 5"},
            {"type": "text", "content": " please"},
        ]

    def test_segments_without_math(self, client):
        response = client.post("/api/math/segments", json={"text": "Hello world", "merge": True})
        assert response.status_code == 200
        data = response.json()
        assert data["has_math"] is False
        assert data["segments"] == [{"type": "text", "content": "Hello world"}]

    def test_classify(self, client):
        response = client.post("/api/math/classify", json={"text": "running"})
        assert response.status_code == 200
        assert response.json() == {"text": "running", "is_math": False}

    def test_latex(self, client):
        response = client.post("/api/math/latex", json={"text": "a/b"})
        assert response.status_code == 200
        assert response.json() == {"latex": r"\frac{a}{b}", "is_latex": True}

    def test_plain(self, client):
        response = client.post("/api/math/plain", json={"latex": r"\alpha + \beta"})
        assert response.status_code == 200
        assert response.json()["plain"] == "alpha + beta"

    def test_normalize(self, client):
        response = client.post("/api/math/normalize", json={"latex": "x  =   y+1"})
        assert response.status_code == 200
        assert response.json()["latex"] == "x = y + 1"

    def test_delimited(self, client):
        response = client.post("/api/math/delimited", json={"content": "Area is $r^2$"})
        assert response.status_code == 200
        parts = response.json()["parts"]
        assert [p["kind"] for p in parts] == ["text", "inline"]
        assert parts[1]["raw"] == "$r^2$"

    def test_variables(self, client):
        response = client.post("/api/math/variables", json={"lines": ["x = 5", "k^2"]})
        assert response.status_code == 200
        data = response.json()
        assert [v["symbol"] for v in data["variables"]][:2] == ["x", "k"]
        assert len(data["variables"]) <= settings.math_max_variables
        assert data["graphable"] == ["x = 5"]

    def test_text_too_long(self, client):
        response = client.post("/api/math/segments", json={"text": "x" * (settings.max_text_length + 1)})
        assert response.status_code == 413

    def test_missing_field(self, client):
        response = client.post("/api/math/latex", json={})
        assert response.status_code == 422


class TestBoardEndpoints:
    """Test /api/board endpoints."""

    def test_lasso(self, client):
        payload = {
            "points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}, {"x": 10, "y": 10}, {"x": 0, "y": 10}],
            "shapes": [
                {"id": "a", "type": "draw", "bounds": {"x": 1, "y": 1, "width": 2, "height": 2}},
                {"id": "b", "type": "image", "bounds": {"x": 5, "y": 5, "width": 2, "height": 3}},
                {"id": "c", "type": "draw", "bounds": {"x": 40, "y": 40, "width": 2, "height": 2}},
            ],
        }
        response = client.post("/api/board/lasso", json=payload)
        assert response.status_code == 200
        data = response.json()
        assert data["shape_ids"] == ["a", "b"]
        assert data["bounds"] == {"x": 1.0, "y": 1.0, "width": 6.0, "height": 7.0}

    def test_lasso_too_many_points(self, client):
        payload = {"points": [{"x": 0, "y": 0}] * (LASSO_MAX_POINTS + 1), "shapes": []}
        response = client.post("/api/board/lasso", json=payload)
        assert response.status_code == 422

    def test_lasso_too_few_points(self, client):
        payload = {"points": [{"x": 0, "y": 0}], "shapes": []}
        response = client.post("/api/board/lasso", json=payload)
        assert response.status_code == 200
        assert response.json() == {"shape_ids": [], "bounds": None}
