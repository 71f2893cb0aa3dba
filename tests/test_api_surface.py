import sys
from pathlib import Path

from fastapi import FastAPI
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from app.api.v1.health import router as health_router
from app.main import app


def _registered_paths() -> set[str]:
    return {route.path for route in app.routes}


def test_only_cv_routes_are_registered() -> None:
    api_paths = {path for path in _registered_paths() if path.startswith("/v1/")}

    assert api_paths == {"/v1/health", "/v1/cvs/process"}


def test_health_endpoint_returns_healthy() -> None:
    test_app = FastAPI()
    test_app.include_router(health_router, prefix="/v1")
    client = TestClient(test_app)

    response = client.get("/v1/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}
