"""Tests for the Flask app — routes, session state and error mapping."""

from __future__ import annotations

import pytest

from main import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


class TestIndex:
    def test_renders_ui(self, client) -> None:
        res = client.get("/")
        assert res.status_code == 200
        body = res.get_data(as_text=True)
        assert "Sorting Algorithm Visualizer" in body
        assert 'id="btn-run"' in body
        assert body.count('class="bar"') == 50

    def test_run_handler_locks_controls_before_request(self, client) -> None:
        body = client.get("/").get_data(as_text=True)
        start = body.index("getElementById('btn-run')?.addEventListener")
        handler = body[start:body.index("getElementById('btn-new-array')", start)]

        guard = handler.index("if (playing) return;")
        lock = handler.index("setControlsEnabled(false)")
        request = handler.index("post('/api/run'")
        assert guard < lock < request
        assert handler.index("playing = true") < request
        # the unlock sits after the error branch, so it runs on both paths
        assert handler.rindex("setControlsEnabled(true)") > handler.index("data.error")


class TestArrayRoutes:
    def test_generate(self, client) -> None:
        data = client.post("/api/array/generate", json={"size": 12}).get_json()
        assert data["size"] == 12
        assert len(data["values"]) == 12
        assert all(1 <= v <= 100 for v in data["values"])

    def test_size_is_clamped_and_persisted(self, client) -> None:
        data = client.post("/api/config/size", json={"size": 9999}).get_json()
        assert data["size"] == 200
        state = client.get("/api/state").get_json()
        assert state["size"] == 200
        assert len(state["values"]) == 200

    def test_bad_size(self, client) -> None:
        res = client.post("/api/config/size", json={"size": "lots"})
        assert res.status_code == 400
        assert "error" in res.get_json()


class TestConfigRoutes:
    def test_speed(self, client) -> None:
        data = client.post("/api/config/speed", json={"speed": 75}).get_json()
        assert data == {"speed": 75, "delay_ms": 26}

    def test_algo(self, client) -> None:
        data = client.post("/api/config/algo", json={"algo_key": "heap"}).get_json()
        assert data["algo_key"] == "heap"
        assert "Heap Sort" in data["description"]
        assert client.get("/api/state").get_json()["selected_algo"] == "heap"

    def test_unknown_algo(self, client) -> None:
        res = client.post("/api/config/algo", json={"algo_key": "bogo"})
        assert res.status_code == 400


class TestRun:
    def test_run_returns_frames_and_sorts_session(self, client) -> None:
        client.post("/api/array/generate", json={"size": 15})
        before = client.get("/api/state").get_json()["values"]

        data = client.post("/api/run", json={"algo_key": "merge"}).get_json()
        assert data["initial"] == before
        assert data["final"] == sorted(before)
        assert data["frames"]
        assert data["result"]["algo_key"] == "merge"
        assert data["time"] == data["result"]["elapsed_display"]

        state = client.get("/api/state").get_json()
        assert state["values"] == sorted(before)
        assert state["last_result"]["algo_key"] == "merge"

    def test_run_unknown_algorithm(self, client) -> None:
        res = client.post("/api/run", json={"algo_key": "bogo"})
        assert res.status_code == 400

    def test_index_after_run_shows_result(self, client) -> None:
        client.post("/api/run", json={"algo_key": "bubble"})
        body = client.get("/").get_data(as_text=True)
        assert "Analytics — Bubble Sort" in body


class TestCompare:
    def test_compare(self, client) -> None:
        client.post("/api/array/generate", json={"size": 20})
        data = client.post("/api/compare", json={"left": "bubble", "right": "merge"}).get_json()
        assert data["comparison"]["left"]["algo_key"] == "bubble"
        assert data["comparison"]["right"]["algo_key"] == "merge"
        assert "Bubble Sort vs Merge Sort" in data["html"]

    def test_compare_unknown(self, client) -> None:
        res = client.post("/api/compare", json={"left": "bubble", "right": "bogo"})
        assert res.status_code == 400
