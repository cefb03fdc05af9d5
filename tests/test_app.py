from fastapi.testclient import TestClient

from main import app
from linksly_app.dependencies import get_analytics_service


def test_root(client: TestClient):
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["docs"] == "/docs"


def test_health(client: TestClient):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_unknown_route_is_404(client: TestClient):
    assert client.get("/api/nothing-here").status_code == 404


def test_unexpected_error_is_a_generic_500(db_session):
    """Internal failures answer 500 without leaking the exception"""
    class BrokenAnalytics:
        def overview(self):
            raise RuntimeError("secret internal detail")

    app.dependency_overrides[get_analytics_service] = lambda: BrokenAnalytics()
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.get("/api/analytics/overview")
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret internal detail" not in response.text
    assert "Traceback" not in response.text


def test_cors_preflight(client: TestClient):
    origin = "http://localhost:5173"
    response = client.options(
        "/api/links",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] in ("*", origin)
    assert "POST" in response.headers["access-control-allow-methods"]
