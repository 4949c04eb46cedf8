from fastapi.testclient import TestClient

import pictosigns.main as main_module
from pictosigns.routers import discount as discount_router


class RecordingLogger:
    """Stand-in for the structlog logger; keeps (event, context) pairs."""

    def __init__(self, events, **context):
        self.events = events
        self.context = context

    def bind(self, **kwargs):
        return RecordingLogger(self.events, **{**self.context, **kwargs})

    def info(self, event, **kwargs):
        self.events.append((event, {**self.context, **kwargs}))

    warning = error = info


def finished(events):
    return [ctx for event, ctx in events if event == "request_finished"]


def test_request_finished_is_logged(client, monkeypatch):
    events = []
    monkeypatch.setattr(main_module, "logger", RecordingLogger(events))

    r = client.get("/health", headers={"X-Request-ID": "req-1"})

    assert r.status_code == 200
    assert r.headers["X-Request-ID"] == "req-1"
    [ctx] = finished(events)
    assert ctx["status_code"] == 200
    assert ctx["request_id"] == "req-1"
    assert ctx["endpoint"] == "/health"


def test_request_finished_is_logged_when_handler_crashes(db, client, monkeypatch):
    events = []
    monkeypatch.setattr(main_module, "logger", RecordingLogger(events))

    def crash(db):
        raise RuntimeError("boom")

    monkeypatch.setattr(discount_router, "get_all_discounts", crash)

    r = TestClient(main_module.app, raise_server_exceptions=False).get("/discount")

    assert r.status_code == 500
    [ctx] = finished(events)
    assert ctx["status_code"] == 500
    assert ctx["endpoint"] == "/discount"
