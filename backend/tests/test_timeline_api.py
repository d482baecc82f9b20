import pytest
from fastapi.testclient import TestClient

from order_timeline.api.deps import get_timeline_service
from order_timeline.main import app
from order_timeline.services.timeline_service import TimelineService


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def clear_overrides():
    yield
    app.dependency_overrides.clear()


def test_render_booking_timeline(client):
    body = {
        "raw_status": "scheduled",
        "transaction_kind": "service",
        "role": "seller",
        "created_at": "2024-01-10T09:00:00Z",
        "transaction_id": "BKG-1001",
    }

    resp = client.post("/api/timelines", json=body)
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["transaction_id"] == "BKG-1001"
    assert data["badge"] == {"label": "Status: Scheduled", "display_status": "scheduled"}
    assert [(s["id"], s["state"]) for s in data["timeline"]] == [
        ("requested", "completed"),
        ("confirmed", "completed"),
        ("scheduled", "current"),
        ("in_progress", "future"),
        ("completed", "future"),
    ]
    assert data["timeline"][0]["occurred_at"].startswith("2024-01-10T09:00:00")
    assert data["timeline"][1]["occurred_at"].startswith("2024-01-11T09:00:00")
    assert data["status_config"]["title"] == "Appointment Scheduled"


def test_cancelled_uses_previous_status(client):
    body = {
        "raw_status": "cancelled",
        "previous_status": "Confirmed",
        "transaction_kind": "service",
        "role": "buyer",
    }

    resp = client.post("/api/timelines", json=body)
    assert resp.status_code == 200, resp.text

    states = [(s["id"], s["state"]) for s in resp.json()["timeline"]]
    assert states[-1] == ("cancelled", "current")
    assert ("confirmed", "completed") in states
    assert ("in_progress", "skipped") in states


def test_unknown_status_is_not_an_error(client):
    resp = client.post(
        "/api/timelines",
        json={"raw_status": "lost_in_space", "transaction_kind": "product", "role": "buyer"},
    )
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert len(data["timeline"]) == 1
    assert data["timeline"][0]["label"] == "Unknown Status"
    assert data["timeline"][0]["state"] == "current"
    assert data["badge"]["label"] == "Status: Unknown Status"


def test_unparseable_created_at_drops_dates(client):
    resp = client.post(
        "/api/timelines",
        json={"raw_status": "delivered", "transaction_kind": "product", "created_at": "yesterday-ish"},
    )
    assert resp.status_code == 200, resp.text
    assert all(s["occurred_at"] is None for s in resp.json()["timeline"])


def test_invalid_role_returns_error_envelope(client):
    resp = client.post(
        "/api/timelines",
        json={"raw_status": "requested", "transaction_kind": "service", "role": "admin"},
    )
    assert resp.status_code == 422

    err = resp.json()["error"]
    assert err["code"] == "INVALID_ROLE"
    assert err["details"] == {"role": "admin"}


def test_invalid_kind_returns_error_envelope(client):
    resp = client.get("/api/timelines/flows/subscription")
    assert resp.status_code == 422
    assert resp.json()["error"]["code"] == "INVALID_TRANSACTION_KIND"


def test_flow_endpoint(client):
    resp = client.get("/api/timelines/flows/service", params={"role": "buyer"})
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert data["transaction_kind"] == "service"
    assert [s["id"] for s in data["steps"]] == ["requested", "confirmed", "in_progress", "completed"]
    assert data["steps"][0]["label"] == "Booking Requested"


def test_step_days_comes_from_service(client, clear_overrides):
    app.dependency_overrides[get_timeline_service] = lambda: TimelineService(step_days=2)

    resp = client.post(
        "/api/timelines",
        json={"raw_status": "delivered", "transaction_kind": "product", "created_at": "2024-01-10T00:00:00"},
    )
    assert resp.status_code == 200, resp.text
    assert resp.json()["timeline"][2]["occurred_at"].startswith("2024-01-14")


def test_unhandled_exception_returns_internal_error(clear_overrides):
    class Boom(TimelineService):
        def render(self, req):
            raise RuntimeError("boom")

    app.dependency_overrides[get_timeline_service] = lambda: Boom()
    client = TestClient(app, raise_server_exceptions=False)

    resp = client.post("/api/timelines", json={"raw_status": "pending", "transaction_kind": "product"})
    assert resp.status_code == 500
    assert resp.json()["error"]["code"] == "INTERNAL_ERROR"


def test_health_and_request_id(client):
    resp = client.get("/api/health", headers={"x-request-id": "req-42"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.headers["x-request-id"] == "req-42"


def test_root(client):
    resp = client.get("/api/")
    assert resp.status_code == 200
    assert resp.json()["docs"] == "/docs"


def test_malformed_body_uses_error_envelope(client):
    resp = client.post("/api/timelines", json={"transaction_kind": "product"})
    assert resp.status_code == 422

    err = resp.json()["error"]
    assert err["code"] == "VALIDATION_ERROR"
    assert any("raw_status" in f["loc"] for f in err["details"]["fields"])


def test_overlong_raw_status_renders_unknown_timeline(client):
    resp = client.post(
        "/api/timelines",
        json={"raw_status": "x" * 65, "transaction_kind": "service", "role": "buyer"},
    )
    assert resp.status_code == 200, resp.text

    data = resp.json()
    assert [s["id"] for s in data["timeline"]] == ["unknown"]
    assert data["timeline"][0]["state"] == "current"
    assert data["badge"]["label"] == "Status: Unknown Status"


def test_overlong_previous_status_is_ignored(client):
    resp = client.post(
        "/api/timelines",
        json={
            "raw_status": "cancelled",
            "previous_status": "confirmed" + "!" * 80,
            "transaction_kind": "service",
            "role": "buyer",
        },
    )
    assert resp.status_code == 200, resp.text

    states = [(s["id"], s["state"]) for s in resp.json()["timeline"]]
    assert states[:2] == [("requested", "completed"), ("confirmed", "skipped")]
    assert states[-1] == ("cancelled", "current")
