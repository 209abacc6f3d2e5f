from fastapi.testclient import TestClient

from app.constants import DB_NAME
from app.main import app
from common.database import mongodb


def test_health_and_liveness():
    client = TestClient(app)

    health = client.get("/health")
    assert health.status_code == 200
    assert health.json()["status"] == "healthy"
    assert health.json()["service"] == "backend-api"

    live = client.get("/live")
    assert live.status_code == 200
    assert live.json() == {"status": "alive"}


def test_root_describes_service():
    response = TestClient(app).get("/")

    assert response.status_code == 200
    assert response.json() == {"service": "backend-api", "version": "1.0.0", "status": "running"}


def test_ready_without_database_is_unavailable():
    response = TestClient(app).get("/ready")

    assert response.status_code == 503
    assert response.json()["checks"]["mongodb"]["status"] == "not ready"


def test_ready_with_database(connected):
    response = TestClient(app).get("/ready")

    assert response.status_code == 200
    assert response.json() == {
        "status": "ready",
        "checks": {"mongodb": {"status": "ready", "database": "backend"}}
    }


def test_status_route_without_database_forwards_error():
    response = TestClient(app).get("/api/v1/status")

    assert response.status_code == 503
    body = response.json()
    assert body["success"] is False
    assert body["message"] == "Database is not available"


def test_status_route_with_database(connected):
    response = TestClient(app).get("/api/v1/status")

    assert response.status_code == 200
    assert response.json() == {"success": True, "service": "backend-api", "database": "backend"}


def test_lifespan_connects_and_closes(fake_motor):
    client_cls = fake_motor()

    with TestClient(app) as client:
        assert mongodb.get_database().name == DB_NAME
        assert client.get("/ready").status_code == 200

    assert client_cls.instances[0].closed
    assert mongodb._client is None
