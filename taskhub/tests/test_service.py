from __future__ import annotations

from collections.abc import Callable

from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError

from taskhub.app import create_app, get_container
from taskhub.infrastructure.container import Container
from taskhub.shared.config import AppConfig
from taskhub.shared.middleware import REQUEST_ID_HEADER


def test_service_info(client: FlaskClient) -> None:
    response = client.get("/api/")

    assert response.status_code == 200
    assert response.get_json() == {"name": "taskhub", "version": "1", "environment": "test"}


def test_liveness(client: FlaskClient) -> None:
    response = client.get("/health/live")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_readiness(client: FlaskClient) -> None:
    for path in ("/health", "/health/ready"):
        response = client.get(path)
        assert response.status_code == 200
        assert response.get_json() == {"status": "ok", "checks": {"database": "ok"}}


def test_readiness_reports_database_failure(
    client: FlaskClient, container: Container, monkeypatch
) -> None:
    def broken_connect():
        raise OperationalError("SELECT 1", {}, Exception("database is gone"))

    monkeypatch.setattr(container.engine, "connect", broken_connect)

    response = client.get("/health/ready")

    assert response.status_code == 503
    assert response.get_json() == {"status": "unavailable", "checks": {"database": "error"}}


def test_metrics_exposition(client: FlaskClient) -> None:
    client.get("/health/live")
    client.get("/api/tasks")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.content_type.startswith("text/plain")
    text = response.get_data(as_text=True)
    assert 'http_requests_total{method="GET",route="/health/live",status="200"} 1.0' in text
    assert 'route="/api/tasks",status="401"' in text
    assert 'auth_failures_total{stage="extract"} 1.0' in text
    assert "http_request_duration_seconds_bucket" in text


def test_metrics_use_route_template(
    client: FlaskClient, signed_in: Callable[..., dict[str, str]]
) -> None:
    headers = signed_in()
    client.get("/api/tasks/41", headers=headers)
    client.get("/api/tasks/42", headers=headers)

    text = client.get("/metrics").get_data(as_text=True)

    assert 'route="/api/tasks/<int:task_id>",status="404"} 2.0' in text
    assert "/api/tasks/42" not in text


def test_metrics_disabled(make_config: Callable[..., AppConfig]) -> None:
    client = create_app(make_config(metrics=False)).test_client()

    assert client.get("/metrics").status_code == 404


def test_request_id_is_generated_and_echoed(client: FlaskClient) -> None:
    generated = client.get("/health/live").headers[REQUEST_ID_HEADER]
    echoed = client.get("/health/live", headers={REQUEST_ID_HEADER: "req-123.abc"})
    replaced = client.get("/health/live", headers={REQUEST_ID_HEADER: "bad id with spaces"})

    assert len(generated) == 32
    assert echoed.headers[REQUEST_ID_HEADER] == "req-123.abc"
    assert replaced.headers[REQUEST_ID_HEADER] != "bad id with spaces"


def test_request_id_present_on_errors(client: FlaskClient) -> None:
    response = client.get("/api/users/me", headers={REQUEST_ID_HEADER: "trace-401"})

    assert response.status_code == 401
    assert response.headers[REQUEST_ID_HEADER] == "trace-401"


def test_security_headers(client: FlaskClient) -> None:
    response = client.get("/health/live")

    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"
    assert "Strict-Transport-Security" not in response.headers


def test_hsts_when_enabled(make_config: Callable[..., AppConfig]) -> None:
    config = make_config()
    config.security.enable_hsts = True
    client = create_app(config).test_client()

    assert "max-age=" in client.get("/health/live").headers["Strict-Transport-Security"]


def test_unknown_route_is_json_404(client: FlaskClient) -> None:
    response = client.get("/api/nope")

    assert response.status_code == 404
    assert response.get_json()["error"] == "not_found"


def test_wrong_method_is_json_405(client: FlaskClient) -> None:
    response = client.put("/api/auth/signin", json={})

    assert response.status_code == 405
    assert response.get_json()["error"] == "method_not_allowed"


def test_each_app_owns_its_container(make_config: Callable[..., AppConfig]) -> None:
    first = create_app(make_config())
    second = create_app(make_config())

    assert get_container(first) is not get_container(second)
    assert get_container(first).metrics is not get_container(second).metrics
