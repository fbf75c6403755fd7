"""Flask routes, driven through the test client against a real loop thread."""
import pytest

from config import AppConfig
from engine import CallTimeout
from main import create_app


@pytest.fixture
def app():
    # speed 1 → ~0.1 s between auto steps, so a bubble sort of 40 values
    # keeps running long enough to pause it from the test
    app = create_app(AppConfig(array_size=40, seed=3, speed=1, log_level="warning"))
    app.config.update(TESTING=True)
    yield app
    app.extensions["sortviz"]["loop"].stop()


@pytest.fixture
def client(app):
    return app.test_client()


class TestPages:
    def test_index(self, client):
        res = client.get("/")
        assert res.status_code == 200
        assert b"Sorting Algorithm Visualizer" in res.data
        assert b"<svg" in res.data

    def test_algorithms(self, client):
        keys = [a["key"] for a in client.get("/api/algorithms").get_json()]
        assert keys == ["insertion", "selection", "bubble", "quick", "merge", "shell"]

    def test_initial_state(self, client):
        state = client.get("/api/state").get_json()
        assert state["state"] == "idle"
        assert state["size"] == 40
        assert state["total"] == 0
        assert "<svg" in state["svg"]


class TestGenerate:
    def test_generate(self, client):
        data = client.post("/api/array/generate", json={"size": 12, "seed": 1}).get_json()
        assert data["size"] == 12
        again = client.post("/api/array/generate", json={"size": 12, "seed": 1}).get_json()
        assert again["values"] == data["values"]

    @pytest.mark.parametrize("size", [-1, 10_000, "many"])
    def test_bad_size(self, client, size):
        res = client.post("/api/array/generate", json={"size": size})
        assert res.status_code == 400
        assert "error" in res.get_json()


class TestPlayback:
    def test_run_pause_step_skip(self, client):
        data = client.post("/api/run", json={"algo": "bubble"}).get_json()
        assert data["started"] is True
        assert data["state"] == "running"
        assert "Bubble Sort" in data["analytics"]

        again = client.post("/api/run", json={"algo": "quick"}).get_json()
        assert again["started"] is False

        res = client.post("/api/step/next")
        assert res.status_code == 409
        assert res.get_json()["state"] == "running"

        paused = client.post("/api/pause").get_json()
        assert paused["state"] == "paused"
        cursor = paused["cursor"]

        nxt = client.post("/api/step/next").get_json()
        assert nxt["cursor"] == cursor + 1
        assert nxt["touched"] == nxt["highlight"]

        prev = client.post("/api/step/prev").get_json()
        assert prev["moved"] is True and prev["cursor"] == cursor

        goto = client.post("/api/step/goto", json={"index": 0}).get_json()
        assert goto["cursor"] == 0
        assert client.post("/api/step/goto", json={"index": 10**6}).status_code == 400

        end = client.post("/api/skip/end").get_json()
        assert end["cursor"] == end["total"]
        assert end["values"] == sorted(end["values"])
        assert end["state"] == "idle"
        assert ">Resume</button>" not in end["playback"]

        start = client.post("/api/skip/start").get_json()
        assert start["cursor"] == 0

        assert client.post("/api/toggle").status_code == 409

    def test_pause_when_idle_is_conflict(self, client):
        assert client.post("/api/pause").status_code == 409
        assert client.post("/api/resume").status_code == 409

    def test_unknown_algorithm(self, client):
        res = client.post("/api/run", json={"algo": "bogo"})
        assert res.status_code == 400

    def test_action_log(self, client):
        assert client.get("/api/log").get_json()["actions"] == []
        client.post("/api/run", json={"algo": "merge"})
        client.post("/api/pause")
        data = client.get("/api/log").get_json()
        state = client.get("/api/state").get_json()
        assert data["algo"] == "merge"
        assert data["cursor"] == state["cursor"]
        assert len(data["actions"]) == state["total"]
        assert all(a["kind"] == "set" and a["a"] == a["b"] for a in data["actions"])
        assert all("value" in a for a in data["actions"])

    def test_busy_loop_is_service_unavailable(self, app, client, monkeypatch):
        def busy(*args, **kwargs):
            raise CallTimeout()

        monkeypatch.setattr(app.extensions["sortviz"]["loop"], "call", busy)
        res = client.post("/api/pause")
        assert res.status_code == 503
        assert "error" in res.get_json()


class TestConfig:
    def test_speed(self, client):
        data = client.post("/api/config/speed", json={"speed": 100}).get_json()
        assert data["speed"] == 100
        assert data["interval_ms"] == pytest.approx(5.0)
        assert client.post("/api/config/speed", json={"preset": "slow"}).get_json()["speed"] == 5
        assert client.post("/api/config/speed", json={"preset": "warp"}).status_code == 400
        assert client.post("/api/config/speed", json={"speed": "fast"}).status_code == 400

    def test_canvas(self, client):
        data = client.post("/api/config/canvas", json={"width": 640, "height": 320}).get_json()
        assert data["canvas"] == {"width": 640, "height": 320}
        assert 'width="640"' in data["svg"]
        assert client.post("/api/config/canvas", json={"width": 0, "height": 10}).status_code == 400


class TestAppConfig:
    def test_from_env(self):
        cfg = AppConfig.from_env({
            "SORTVIZ_ARRAY_SIZE": "12",
            "SORTVIZ_SEED": "7",
            "SORTVIZ_LOG_JSON": "true",
            "SORTVIZ_SPEED": "80",
        })
        assert cfg.array_size == 12
        assert cfg.seed == 7
        assert cfg.log_json is True
        assert cfg.speed == 80
        assert cfg.canvas_height == 400

    def test_defaults(self):
        cfg = AppConfig.from_env({})
        assert cfg.seed is None and cfg.log_level == "info"
