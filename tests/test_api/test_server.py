"""Tests for the HTTP API."""

import inspect

import pytest
from fastapi.testclient import TestClient

from twentyfour.api.server import app, solve_hand


@pytest.fixture
def client():
    return TestClient(app)


class TestSolveEndpoint:
    """Test POST /api/solve."""

    def test_solve_numbers(self, client):
        response = client.post("/api/solve", json={"numbers": [3, 3, 8, 8]})

        assert response.status_code == 200
        data = response.json()
        assert data["numbers"] == [3, 3, 8, 8]
        assert data["count"] == len(data["solutions"]) > 0
        assert data["solutions"][0]["index"] == 1
        assert "8 / (3 - (8 / 3))" in [s["formula"] for s in data["solutions"]]

    def test_solve_text(self, client):
        response = client.post("/api/solve", json={"text": "1,2,3,4"})

        assert response.status_code == 200
        assert "(1 + 3) * (2 + 4)" in [s["formula"] for s in response.json()["solutions"]]

    def test_no_solutions(self, client):
        response = client.post("/api/solve", json={"text": "1111"})

        assert response.status_code == 200
        assert response.json()["count"] == 0
        assert response.json()["solutions"] == []

    def test_out_of_range(self, client):
        response = client.post("/api/solve", json={"numbers": [1, 2, 3, 10]})

        assert response.status_code == 400
        assert "digits 1-9" in response.json()["detail"]

    def test_bad_text(self, client):
        response = client.post("/api/solve", json={"text": "1 2 3"})

        assert response.status_code == 400
        assert "exactly 4 numbers" in response.json()["detail"]

    def test_missing_input(self, client):
        response = client.post("/api/solve", json={})

        assert response.status_code == 400

    def test_solutions_numbered_in_discovery_order(self, client):
        response = client.post("/api/solve", json={"numbers": [1, 2, 3, 4]})

        solutions = response.json()["solutions"]
        assert [s["index"] for s in solutions] == list(range(1, len(solutions) + 1))
        assert solutions[0]["formula"] == "((1 + 2) + 3) * 4"
        assert solutions[1]["formula"] == "((1 * 2) * 3) * 4"

    def test_handler_is_sync(self):
        """The search is CPU-bound; a plain def runs in the threadpool."""
        assert not inspect.iscoroutinefunction(solve_hand)


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["target"] == 24
